import pytest
from sqlalchemy import exc as sa_exc

from database import (
    ConnectivityError, StorageError, Student, create_db_engine,
    create_session_factory, get_db_session,
)
from database.errors import translate_error
from database.init_db import init_database, verify_database
from queries import StudentStore, StatisticsQueries


def test_operational_errors_mean_connectivity():
    error = sa_exc.OperationalError("SELECT 1", {}, Exception("server has gone away"))
    translated = translate_error(error)
    assert isinstance(translated, ConnectivityError)
    assert "server has gone away" in str(translated)


def test_integrity_errors_mean_storage():
    error = sa_exc.IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed"))
    assert isinstance(translate_error(error), StorageError)


def test_typed_errors_pass_through():
    error = StorageError("already typed")
    assert translate_error(error) is error


def test_unreachable_database(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'missing' / 'students.db'}")
    session_factory = create_session_factory(engine)
    try:
        with pytest.raises(ConnectivityError):
            StudentStore(session_factory).get_all()
        with pytest.raises(ConnectivityError):
            StatisticsQueries(session_factory).total_count()
    finally:
        engine.dispose()


def test_failed_block_is_rolled_back(session_factory, store, make_student):
    with pytest.raises(StorageError):
        with get_db_session(session_factory) as db:
            db.add(make_student("R001"))
            db.flush()
            db.add(Student(roll_no="R002", name=None))
            db.flush()
    assert store.get_all() == []


def test_non_database_errors_propagate_unchanged(session_factory, store, make_student):
    with pytest.raises(KeyError):
        with get_db_session(session_factory) as db:
            db.add(make_student("R001"))
            raise KeyError("boom")
    assert store.get_all() == []


def test_init_database_creates_tables(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'students.db'}")
    try:
        assert verify_database(engine) is False
        init_database(engine)
        assert verify_database(engine) is True
    finally:
        engine.dispose()
