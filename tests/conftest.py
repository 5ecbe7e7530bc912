import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Point app settings at SQLite before anything imports app.db.session
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENABLE_REQUEST_LOGGING", "false")

from app.db.base import Base  # noqa: E402
from app.api.dependencies.database import get_db  # noqa: E402


SEED_JOBS = [
    {"title": "j1", "salary": 100000, "equity": "0", "company_handle": "c1"},
    {"title": "j2", "salary": 200000, "equity": "0", "company_handle": "c1"},
    {"title": "j1", "salary": 100100, "equity": "0.5", "company_handle": "c2"},
]


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Session over a database seeded with companies c1..c3 and three jobs."""
    session = session_factory()
    for n in (1, 2, 3):
        session.execute(
            text(
                "INSERT INTO companies (handle, name, num_employees, description, logo_url) "
                "VALUES (:handle, :name, :num, :desc, :logo)"
            ),
            {"handle": f"c{n}", "name": f"C{n}", "num": n, "desc": f"Desc{n}", "logo": f"http://c{n}.img"},
        )
    for job in SEED_JOBS:
        session.execute(
            text(
                "INSERT INTO jobs (title, salary, equity, company_handle) "
                "VALUES (:title, :salary, :equity, :company_handle)"
            ),
            job,
        )
    session.commit()
    yield session
    session.close()


@pytest.fixture
def job_ids(db_session):
    """Ids of the seeded jobs, in insertion order."""
    rows = db_session.execute(text("SELECT id FROM jobs ORDER BY id")).all()
    return [row.id for row in rows]


@pytest.fixture
def bad_id(job_ids):
    # One past the highest assigned id never matches
    return max(job_ids) + 1


@pytest.fixture
def client(db_session, session_factory):
    from main import app

    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_db, None)
