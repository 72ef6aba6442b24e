import pytest

from database import Base, Student, create_db_engine, create_session_factory
from queries import StudentStore, StatisticsQueries


@pytest.fixture
def engine():
    # In-memory SQLite shared across sessions through StaticPool
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def store(session_factory):
    return StudentStore(session_factory)


@pytest.fixture
def stats(session_factory):
    return StatisticsQueries(session_factory)


@pytest.fixture
def make_student():
    def _make(roll_no="R001", name="Alice Smith", department="Computer Science",
              sub1=80.0, sub2=90.0, sub3=70.0, email="alice@example.com",
              phone="555-0101"):
        return Student.from_marks(name, roll_no, department, email, phone, sub1, sub2, sub3)
    return _make


@pytest.fixture
def student_with_percentage():
    """Build a student whose stored percentage is exactly ``percentage``."""
    def _make(roll_no, percentage, name="Student", department="Physics", grade="C"):
        return Student(
            name=name, roll_no=roll_no, department=department,
            email=f"{roll_no}@example.com", phone="555-0000",
            sub1=percentage, sub2=percentage, sub3=percentage,
            percentage=percentage, grade=grade,
        )
    return _make
