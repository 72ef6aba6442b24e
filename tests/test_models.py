from sqlalchemy.dialects import mysql, postgresql
from sqlalchemy.schema import CreateTable

from database import Student


def _ddl(dialect):
    return str(CreateTable(Student.__table__).compile(dialect=dialect))


def test_marks_use_double_precision_on_mysql():
    ddl = _ddl(mysql.dialect())
    for column in ('sub1', 'sub2', 'sub3', 'percentage'):
        assert f"{column} FLOAT(53)" in ddl


def test_marks_use_double_precision_on_postgresql():
    ddl = _ddl(postgresql.dialect())
    assert "percentage FLOAT(53)" in ddl
