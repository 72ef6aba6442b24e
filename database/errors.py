"""
Typed failures raised by the data access layer.

Callers never see raw SQLAlchemy exceptions: they get a ConnectivityError
when the store cannot be reached and a StorageError when it rejects a
statement. "Not found" is not an error; operations report it with False
or an empty list.
"""

from sqlalchemy import exc as sa_exc


class RecordStoreError(Exception):
    """Base class for failures surfaced by the record store."""


class ConnectivityError(RecordStoreError):
    """The backing store is unreachable or the connection is unusable."""


class StorageError(RecordStoreError):
    """The backing store rejected a statement (constraint, type mismatch...)."""


_CONNECTIVITY_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
)


def translate_error(error: Exception) -> RecordStoreError:
    """Map a SQLAlchemy exception onto the store's error taxonomy."""
    if isinstance(error, RecordStoreError):
        return error

    # DBAPIError carries the driver message in .orig
    detail = getattr(error, 'orig', None) or error
    if isinstance(error, _CONNECTIVITY_ERRORS):
        return ConnectivityError(f"Database unavailable: {detail}")
    return StorageError(f"Database rejected the operation: {detail}")
