"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from jobly.auth import create_token
from jobly.db import get_session
from jobly.main import app
from jobly.models import Company, Job


@pytest.fixture
def engine():
    """In-memory SQLite shared across threads (TestClient runs handlers in a pool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded_jobs(engine) -> dict[str, int]:
    """Two companies and three jobs; returns job ids keyed by title."""
    with Session(engine) as session:
        session.add(Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"))
        session.add(Company(handle="c2", name="C2", description="Desc2", num_employees=2))
        jobs = [
            Job(title="Engineer", salary=100000, equity=0.1, company_handle="c1"),
            Job(title="Senior ENGINEER", salary=150000, equity=0.0, company_handle="c1"),
            Job(title="Accountant", salary=50000, equity=None, company_handle="c2"),
        ]
        session.add_all(jobs)
        session.commit()
        return {job.title: job.id for job in jobs}


@pytest.fixture
def session(engine, seeded_jobs):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine, seeded_jobs):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_token('u1', is_admin=False)}"}
