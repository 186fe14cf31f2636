"""Test configuration and fixtures."""
from datetime import date
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobtracker.app.main import app
from jobtracker.app.dependencies import get_db
from jobtracker.core.database import Base
from jobtracker.core.models import JobApplication


@pytest.fixture
def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def test_db(test_engine):
    """Get database session for each test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine
    )
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(test_db):
    """Create test client with database dependency override."""
    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


SAMPLE_JOBS = [
    {"company": "Google", "title": "Software Engineer", "status": "interviewing",
     "date_applied": date(2024, 3, 1), "notes": "Referral from Sam"},
    {"company": "Google", "title": "Site Reliability Engineer", "status": "offer",
     "date_applied": date(2024, 3, 10), "notes": ""},
    {"company": "Acme", "title": "Data Analyst", "status": "offer",
     "date_applied": date(2024, 2, 15), "notes": "Strong analytics team"},
    {"company": "Initech", "title": "Backend Developer", "status": "applied",
     "date_applied": date(2024, 3, 5), "notes": "Hiring manager ex-GOOGLE, 100% remote"},
    {"company": "Globex", "title": "Product Manager", "status": "rejected",
     "date_applied": date(2024, 1, 20), "notes": None},
]


@pytest.fixture
def sample_jobs(test_db):
    """Insert sample jobs into the database."""
    jobs = [JobApplication(**data) for data in SAMPLE_JOBS]
    test_db.add_all(jobs)
    test_db.commit()
    return jobs
