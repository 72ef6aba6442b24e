from sqlalchemy import Column, Integer, String, Float
from .connection import Base
from .grading import compute_percentage, compute_grade, round_percentage


class Student(Base):
    __tablename__ = 'students'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    # Looked up by update/delete/search but deliberately not unique
    roll_no = Column(String(50), nullable=False, index=True)
    department = Column(String(100))
    email = Column(String(255))
    phone = Column(String(30))

    # precision=53 renders DOUBLE on MySQL rather than single precision FLOAT
    sub1 = Column(Float(precision=53))
    sub2 = Column(Float(precision=53))
    sub3 = Column(Float(precision=53))

    # Derived fields, supplied by the caller at write time
    percentage = Column(Float(precision=53), index=True)
    grade = Column(String(2))

    # Fields overwritten by StudentStore.update (id and roll_no never change)
    UPDATABLE_FIELDS = (
        'name', 'department', 'sub1', 'sub2', 'sub3',
        'percentage', 'grade', 'email', 'phone',
    )

    @classmethod
    def from_marks(cls, name, roll_no, department, email, phone, sub1, sub2, sub3):
        """
        Build a new (unsaved) student, deriving percentage and grade from the marks.

        The percentage is rounded to 2 places before the grade is read off it,
        so the stored pair is always consistent.
        """
        percentage = round_percentage(compute_percentage(sub1, sub2, sub3))
        return cls(
            name=name,
            roll_no=roll_no,
            department=department,
            email=email,
            phone=phone,
            sub1=sub1,
            sub2=sub2,
            sub3=sub3,
            percentage=percentage,
            grade=compute_grade(percentage),
        )

    def to_dict(self):
        """Return the record's fields as a plain dictionary."""
        return {
            'id': self.id,
            'roll_no': self.roll_no,
            'name': self.name,
            'department': self.department,
            'email': self.email,
            'phone': self.phone,
            'sub1': self.sub1,
            'sub2': self.sub2,
            'sub3': self.sub3,
            'percentage': self.percentage,
            'grade': self.grade,
        }

    def __repr__(self):
        grade_str = f"{self.percentage:.2f}% {self.grade}" if self.percentage is not None else "N/A"
        return f"<Student {self.name} ({self.roll_no}) - {grade_str}>"


class AdminUser(Base):
    __tablename__ = 'admin_users'

    username = Column(String(100), primary_key=True)
    # Stored and compared in plaintext
    password = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<AdminUser {self.username}>"
