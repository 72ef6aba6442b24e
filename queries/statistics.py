"""
Aggregate, read-only statistics over the students table.

Each figure is its own query; they are not read from a common snapshot.
"""

import logging
from typing import Dict
from sqlalchemy import func
from database import get_db_session, Student
from database.grading import GRADE_BANDS, FAILING_GRADE

logger = logging.getLogger(__name__)


class StatisticsQueries:
    """Counts and extremes across all student records."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def total_count(self) -> int:
        """Number of stored records (0 for an empty table)."""
        with get_db_session(self.session_factory) as db:
            return db.query(func.count(Student.id)).scalar() or 0

    def highest_percentage(self) -> float:
        """Maximum percentage, or 0.0 when there are no records."""
        with get_db_session(self.session_factory) as db:
            value = db.query(func.max(Student.percentage)).scalar()
        return value if value is not None else 0.0

    def lowest_percentage(self) -> float:
        """Minimum percentage, or 0.0 when there are no records."""
        with get_db_session(self.session_factory) as db:
            value = db.query(func.min(Student.percentage)).scalar()
        return value if value is not None else 0.0

    def grade_distribution(self) -> Dict[str, int]:
        """
        Count records per letter grade.

        Every grade letter is present in the result, with 0 for grades no
        one holds. Rows with a grade outside A-F are ignored.
        """
        distribution = {grade: 0 for _, grade in GRADE_BANDS}
        distribution[FAILING_GRADE] = 0

        with get_db_session(self.session_factory) as db:
            rows = db.query(Student.grade, func.count(Student.id))\
                .group_by(Student.grade)\
                .all()

        for grade, count in rows:
            if grade in distribution:
                distribution[grade] = count
        logger.debug(f"Grade distribution: {distribution}")
        return distribution

    def summary(self) -> Dict:
        """
        Bundle all statistics for display or export.

        Returns:
            Dictionary with total_students, highest_percentage,
            lowest_percentage and grade_distribution
        """
        logger.debug("Collecting statistics summary")
        return {
            'total_students': self.total_count(),
            'highest_percentage': self.highest_percentage(),
            'lowest_percentage': self.lowest_percentage(),
            'grade_distribution': self.grade_distribution(),
        }
