"""
Database diagnostic script - check what's actually stored.

Reports duplicate roll numbers and records whose stored grade or
percentage no longer matches their marks.
"""

from typing import List
from sqlalchemy import func

from database import (
    DATABASE_URL, create_db_engine, create_session_factory, get_db_session,
    Student, AdminUser, compute_percentage, compute_grade, round_percentage,
)


def find_inconsistent_records(students: List[Student]) -> List[str]:
    """Describe every record whose percentage or grade disagrees with its marks."""
    problems = []
    for s in students:
        if None in (s.sub1, s.sub2, s.sub3):
            problems.append(f"{s.roll_no} (id {s.id}): missing subject marks")
            continue
        expected_pct = round_percentage(compute_percentage(s.sub1, s.sub2, s.sub3))
        if s.percentage is None or abs(s.percentage - expected_pct) > 0.01:
            problems.append(f"{s.roll_no} (id {s.id}): percentage {s.percentage} != {expected_pct}")
        elif s.grade != compute_grade(s.percentage):
            problems.append(f"{s.roll_no} (id {s.id}): grade {s.grade} != {compute_grade(s.percentage)}")
    return problems


def check_database_contents(session_factory) -> List[str]:
    """Check what's actually in the database. Returns the issues found."""
    issues = []

    with get_db_session(session_factory) as db:
        print("\n" + "="*80)
        print("DATABASE DIAGNOSTIC REPORT")
        print("="*80)

        # Check Students
        students = db.query(Student).order_by(Student.id).all()
        print(f"\n📊 Students: {len(students)} total")
        if students:
            print("\nSample students:")
            for s in students[:3]:
                print(f"  - {s.name} ({s.roll_no}) - {s.department} - {s.percentage}% {s.grade}")

        # Check admin accounts
        admin_count = db.query(func.count(AdminUser.username)).scalar()
        print(f"\n🔑 Admin users: {admin_count} total")
        if not admin_count:
            issues.append("No admin users: nobody can log in (run database.init_db --admin)")

        # Duplicate roll numbers
        duplicates = db.query(Student.roll_no, func.count(Student.id))\
            .group_by(Student.roll_no)\
            .having(func.count(Student.id) > 1)\
            .all()
        for roll_no, count in duplicates:
            issues.append(f"Roll No {roll_no} is shared by {count} records")

    issues.extend(find_inconsistent_records(students))

    print("\n" + "="*80)
    if issues:
        print(f"⚠️  Found {len(issues)} issue(s):")
        for issue in issues:
            print(f"  - {issue}")
    else:
        print("✓ No issues found")
    print("="*80)

    return issues


if __name__ == '__main__':
    engine = create_db_engine(DATABASE_URL)
    try:
        check_database_contents(create_session_factory(engine))
    finally:
        engine.dispose()
