from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

from .errors import translate_error

logger = logging.getLogger(__name__)

# Load environment variables
CURRENT_DIR = Path(os.path.dirname(os.path.abspath(__file__))).parent
load_dotenv((CURRENT_DIR / '.env').as_posix())

# Create base class for models
Base = declarative_base()

# Database configuration
DB_TYPE = os.getenv('DB_TYPE', 'sqlite')  # 'sqlite', 'postgresql' or 'mysql'
DB_ECHO = os.getenv('DB_ECHO', 'False') == 'True'  # Set to True for SQL logging


def build_database_url(db_type: str = DB_TYPE) -> str:
    """Assemble the connection URL from DATABASE_URL or the DB_* variables."""
    explicit_url = os.getenv('DATABASE_URL')
    if explicit_url:
        return explicit_url

    if db_type in ('postgresql', 'mysql'):
        db_user = os.getenv('DB_USER', 'postgres' if db_type == 'postgresql' else 'root')
        db_password = os.getenv('DB_PASSWORD', '')
        db_host = os.getenv('DB_HOST', 'localhost')
        db_port = os.getenv('DB_PORT', '5432' if db_type == 'postgresql' else '3306')
        db_name = os.getenv('DB_NAME', 'studentdb')
        driver = 'postgresql' if db_type == 'postgresql' else 'mysql+pymysql'
        return f"{driver}://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"

    # SQLite connection (default)
    db_path = os.getenv('DB_PATH', (CURRENT_DIR / 'students.db').as_posix())
    return f"sqlite:///{db_path}"


DATABASE_URL = build_database_url()


def create_db_engine(database_url: str = DATABASE_URL, echo: bool = DB_ECHO):
    """
    Create the engine for the backing relational store.

    The engine is the process-wide connection handle: build it once at
    startup, hand its session factory to every component and call
    ``engine.dispose()`` on the way out.
    """
    if database_url.startswith('sqlite'):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},  # Needed for SQLite with multiple threads
            poolclass=StaticPool
        )

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10
    )


def create_session_factory(engine):
    """Create a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@contextmanager
def get_db_session(session_factory):
    """
    Open a database session as a unit of work. Use as context manager:

    with get_db_session(session_factory) as session:
        # do work

    Commits when the block exits cleanly. Any SQLAlchemy failure rolls the
    transaction back and is re-raised as ConnectivityError or StorageError.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        error = translate_error(e)
        logger.error(f"Database operation failed: {error}")
        raise error from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
