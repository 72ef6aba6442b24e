"""
Create, read, update and delete operations over student records.

This module provides lookups by:
- Roll number (exact match)
- Name or department (substring match, SQL LIKE)
- Percentage threshold (inclusive lower bound)

Roll numbers are the lookup key but are not unique: update and delete act
on every row that matches, and searches return lists.
"""

import logging
from typing import List
from sqlalchemy import func
from database import get_db_session, Student

logger = logging.getLogger(__name__)


class StudentStore:
    """Persistence operations for Student records."""

    def __init__(self, session_factory):
        """
        Args:
            session_factory: sessionmaker bound to the process-wide engine
        """
        self.session_factory = session_factory

    def add(self, student: Student) -> None:
        """
        Persist a new student record. The database assigns its id, which is
        written back onto ``student``.

        Raises:
            StorageError: the insert was rejected (e.g. a NOT NULL column is missing)
            ConnectivityError: the database could not be reached
        """
        with get_db_session(self.session_factory) as db:
            db.add(student)
            db.flush()
        logger.info(f"Added student {student.roll_no} with id {student.id}")

    def get_all(self) -> List[Student]:
        """Return every student record in storage order."""
        with get_db_session(self.session_factory) as db:
            return db.query(Student).order_by(Student.id).all()

    def update(self, roll_no: str, student: Student) -> bool:
        """
        Overwrite the editable fields of every record with this roll number.

        The id and roll number of the stored rows are left untouched.

        Args:
            roll_no: Roll number to match exactly
            student: Carrier of the new field values

        Returns:
            True if at least one row matched, False otherwise
        """
        values = {field: getattr(student, field) for field in Student.UPDATABLE_FIELDS}
        with get_db_session(self.session_factory) as db:
            count = db.query(Student)\
                .filter(Student.roll_no == roll_no)\
                .update(values, synchronize_session=False)
        logger.info(f"Updated {count} row(s) with roll number {roll_no}")
        return count > 0

    def delete(self, roll_no: str) -> bool:
        """
        Remove every record with this roll number.

        Returns:
            True if at least one row was removed, False otherwise
        """
        with get_db_session(self.session_factory) as db:
            count = db.query(Student)\
                .filter(Student.roll_no == roll_no)\
                .delete(synchronize_session=False)
        logger.info(f"Deleted {count} row(s) with roll number {roll_no}")
        return count > 0

    def search_by_roll_no(self, roll_no: str) -> List[Student]:
        """Exact roll number match. Usually zero or one result, but not guaranteed."""
        logger.debug(f"Searching by roll number {roll_no!r}")
        with get_db_session(self.session_factory) as db:
            return db.query(Student)\
                .filter(Student.roll_no == roll_no)\
                .order_by(Student.id)\
                .all()

    def search_by_name(self, name_query: str) -> List[Student]:
        """
        Substring search on name.

        Uses LIKE '%name_query%', so case sensitivity follows the database
        (case-insensitive for ASCII on SQLite and default MySQL collations).
        An empty query matches every record.
        """
        return self._search_containing(Student.name, name_query)

    def search_by_department(self, department_query: str) -> List[Student]:
        """Substring search on department, same matching rules as search_by_name."""
        return self._search_containing(Student.department, department_query)

    def search_by_marks_range(self, threshold: float) -> List[Student]:
        """Return all records with percentage >= threshold."""
        logger.debug(f"Searching for percentage >= {threshold}")
        with get_db_session(self.session_factory) as db:
            return db.query(Student)\
                .filter(Student.percentage >= threshold)\
                .order_by(Student.id)\
                .all()

    def _search_containing(self, column, text: str) -> List[Student]:
        search_term = f"%{text}%"
        # NULL never matches LIKE; treat it as an empty string
        column_text = func.coalesce(column, '')
        logger.debug(f"Searching {column.key} LIKE {search_term!r}")
        with get_db_session(self.session_factory) as db:
            return db.query(Student)\
                .filter(column_text.like(search_term))\
                .order_by(Student.id)\
                .all()
