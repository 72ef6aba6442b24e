"""
Query modules for reading and writing student records.

This package provides a clean interface over the student database
without coupling to any specific UI.
"""

from .student_store import StudentStore
from .statistics import StatisticsQueries
from .credentials import CredentialVerifier, PlaintextCredentialVerifier
from .formatting import StudentFormatter

__all__ = [
    'StudentStore',
    'StatisticsQueries',
    'CredentialVerifier',
    'PlaintextCredentialVerifier',
    'StudentFormatter',
]
