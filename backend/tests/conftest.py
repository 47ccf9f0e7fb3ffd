# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.orm import Session

from db import SessionLocal, get_db
from main import app
from models import Base
from models.apartment import Apartment  # noqa: F401 - register with Base
from models.fee import Fee  # noqa: F401
from models.vehicle import Vehicle  # noqa: F401


def _get_engine():
    """Engine used by the app (in-memory when TESTING=true)."""
    return SessionLocal.kw["bind"]


# pysqlite defers BEGIN until the first DML, so a SAVEPOINT would run outside the
# outer transaction and survive its rollback. Take over transaction control.
@event.listens_for(_get_engine(), "connect")
def _sqlite_no_implicit_tx(dbapi_conn, connection_record):
    dbapi_conn.isolation_level = None


@event.listens_for(_get_engine(), "begin")
def _sqlite_explicit_begin(conn):
    conn.exec_driver_sql("BEGIN")


@pytest.fixture(scope="session")
def engine():
    """One in-memory engine per test run; create tables once."""
    eng = _get_engine()
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture
def db_session(engine):
    """Function-scoped session; each test runs in a transaction that is rolled back.

    Repository commits only release a SAVEPOINT inside the outer transaction.
    """
    connection = engine.connect()
    trans = connection.begin()
    session = Session(bind=connection, join_transaction_mode="create_savepoint")
    try:
        yield session
    finally:
        session.close()
        if trans.is_active:
            trans.rollback()
        connection.close()


def _override_get_db(session):
    """Return a generator that yields the given session (for dependency override)."""
    def override():
        yield session
    return override


@pytest.fixture
def client(db_session):
    """API test client; overrides get_db to use the test db_session, cleared on teardown."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
