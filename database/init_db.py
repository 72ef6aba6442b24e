#!/usr/bin/env python3
"""
Database initialization script.
Run this to create all tables and, optionally, an administrator account.
"""

from .connection import (
    Base, DATABASE_URL, create_db_engine, create_session_factory, get_db_session
)
from .models import Student, AdminUser
import argparse
import logging

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {Student.__tablename__, AdminUser.__tablename__}


def init_database(engine, drop_existing=False):
    """
    Initialize the database by creating all tables.
    
    Args:
        engine: SQLAlchemy engine to create the tables on
        drop_existing (bool): If True, drop all existing tables first (DANGER!)
    """
    logger.info(f"Initializing database at: {engine.url}")
    
    if drop_existing:
        logger.warning("Dropping all existing tables...")
        Base.metadata.drop_all(bind=engine)
        logger.info("Tables dropped.")
    
    logger.info("Creating tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created successfully!")
    
    for table in Base.metadata.sorted_tables:
        logger.info(f"  - {table.name}")


def verify_database(engine):
    """Verify database connection and tables exist"""
    from sqlalchemy import inspect
    
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    
    logger.info(f"Database contains {len(tables)} tables:")
    for table in tables:
        logger.info(f"  - {table}")
    
    missing_tables = EXPECTED_TABLES - set(tables)
    
    if missing_tables:
        logger.error(f"Missing tables: {missing_tables}")
        return False
    
    logger.info("All expected tables exist!")
    return True


def ensure_admin_user(session_factory, username: str, password: str) -> bool:
    """
    Create an administrator account unless one with ``username`` already exists.

    Returns:
        True if the account was created, False if it was already present
    """
    with get_db_session(session_factory) as db:
        if db.query(AdminUser).filter_by(username=username).first():
            logger.info(f"Admin user '{username}' already exists")
            return False
        db.add(AdminUser(username=username, password=password))
    logger.info(f"Created admin user '{username}'")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the student records tables.")
    parser.add_argument('--drop', action='store_true', help="drop existing tables first")
    parser.add_argument('--admin', nargs=2, metavar=('USERNAME', 'PASSWORD'),
                        help="create an administrator account")
    args = parser.parse_args(argv)

    if args.drop:
        confirm = input("⚠️  This will DELETE ALL DATA. Are you sure? (yes/no): ")
        if confirm.lower() != 'yes':
            print("Aborted.")
            return 0

    engine = create_db_engine(DATABASE_URL)
    try:
        init_database(engine, drop_existing=args.drop)
        if args.admin:
            ensure_admin_user(create_session_factory(engine), *args.admin)
        return 0 if verify_database(engine) else 1
    finally:
        engine.dispose()


if __name__ == '__main__':
    import sys

    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
