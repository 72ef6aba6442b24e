#!/usr/bin/env python3
"""
Bulk-load student records from a CSV file.

Expected columns: name, roll_no, department, email, phone, sub1, sub2, sub3.
Percentage and grade are derived from the marks; they are never read from
the file.
"""

from pathlib import Path
from typing import List
import logging
import sys

import pandas as pd

from database import DATABASE_URL, create_db_engine, create_session_factory, Student
from queries import StudentStore

logger = logging.getLogger(__name__)

TEXT_COLUMNS = ['name', 'roll_no', 'department', 'email', 'phone']
MARK_COLUMNS = ['sub1', 'sub2', 'sub3']


def load_students_csv(csv_path: Path) -> List[Student]:
    """
    Read a CSV into unsaved Student records.

    Missing marks count as 0.0 and missing text fields as empty strings.

    Raises:
        ValueError: a required column is absent
    """
    df = pd.read_csv(csv_path, dtype={column: str for column in TEXT_COLUMNS})
    df.columns = [column.strip().lower() for column in df.columns]

    missing = set(TEXT_COLUMNS + MARK_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"{csv_path} is missing column(s): {', '.join(sorted(missing))}")

    df[TEXT_COLUMNS] = df[TEXT_COLUMNS].fillna('')
    df[MARK_COLUMNS] = df[MARK_COLUMNS].apply(pd.to_numeric, errors='coerce').fillna(0.0)

    students = []
    for row in df.itertuples(index=False):
        students.append(Student.from_marks(
            name=str(row.name).strip(),
            roll_no=str(row.roll_no).strip(),
            department=str(row.department).strip(),
            email=str(row.email).strip(),
            phone=str(row.phone).strip(),
            sub1=float(row.sub1),
            sub2=float(row.sub2),
            sub3=float(row.sub3),
        ))
    return students


def import_students(store: StudentStore, csv_path: Path) -> int:
    """Add every row of ``csv_path`` to the store. Returns the number added."""
    students = load_students_csv(csv_path)
    logger.info(f"Importing {len(students)} student(s) from {csv_path}")
    for student in students:
        store.add(student)
    return len(students)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) < 2:
        print("Usage: python import_students.py FILE.csv")
        sys.exit(2)

    engine = create_db_engine(DATABASE_URL)
    try:
        count = import_students(StudentStore(create_session_factory(engine)), Path(sys.argv[1]))
        print(f"✓ Imported {count} student(s)")
    finally:
        engine.dispose()
