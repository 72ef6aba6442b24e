from .connection import (
    Base, DATABASE_URL, create_db_engine, create_session_factory, get_db_session
)
from .errors import RecordStoreError, ConnectivityError, StorageError
from .grading import compute_percentage, compute_grade, round_percentage
from .models import Student, AdminUser

__all__ = [
    'Base',
    'DATABASE_URL',
    'create_db_engine',
    'create_session_factory',
    'get_db_session',
    'RecordStoreError',
    'ConnectivityError',
    'StorageError',
    'compute_percentage',
    'compute_grade',
    'round_percentage',
    'Student',
    'AdminUser',
]
