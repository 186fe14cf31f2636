"""Tests for listing, search and status filter endpoints."""
import pytest

from jobtracker.core.database import Base
from .conftest import SAMPLE_JOBS


def titles(response):
    return [job["title"] for job in response.json()]


def expected_matches(term, status=None):
    """Titles of sample jobs a search should return, ignoring order."""
    term = term.lower()
    return {
        job["title"] for job in SAMPLE_JOBS
        if any(term in (job[field] or "").lower() for field in ("company", "title", "notes"))
        and (status is None or job["status"] == status)
    }


@pytest.mark.api
def test_get_jobs_ordered_by_date_applied(client, sample_jobs):
    response = client.get("/api/jobs/")
    assert response.status_code == 200
    assert titles(response) == [
        "Site Reliability Engineer",
        "Backend Developer",
        "Software Engineer",
        "Data Analyst",
        "Product Manager",
    ]


@pytest.mark.api
def test_search_without_filters_returns_everything(client, sample_jobs):
    all_jobs = client.get("/api/jobs/").json()
    response = client.get("/api/jobs/search")
    assert response.status_code == 200
    assert response.json() == all_jobs

    response = client.get("/api/jobs/search", params={"search": "", "status": ""})
    assert response.json() == all_jobs


@pytest.mark.api
def test_search_matches_company_title_and_notes(client, sample_jobs):
    """Company match, then notes match (case differs), newest first."""
    response = client.get("/api/jobs/search", params={"search": "google"})
    assert response.status_code == 200
    assert titles(response) == ["Site Reliability Engineer", "Backend Developer", "Software Engineer"]


@pytest.mark.api
@pytest.mark.parametrize("term", ["google", "ENGINEER", "analyst", "remote", "a", "zzz"])
def test_search_is_sound_and_complete(client, sample_jobs, term):
    response = client.get("/api/jobs/search", params={"search": term})
    assert set(titles(response)) == expected_matches(term)


@pytest.mark.api
def test_search_and_status_must_both_match(client, sample_jobs):
    response = client.get("/api/jobs/search", params={"search": "Google", "status": "offer"})
    assert response.status_code == 200
    # Excludes Google/interviewing and Acme/offer
    assert titles(response) == ["Site Reliability Engineer"]


@pytest.mark.api
def test_search_by_status_only(client, sample_jobs):
    response = client.get("/api/jobs/search", params={"status": "offer"})
    assert titles(response) == ["Site Reliability Engineer", "Data Analyst"]
    assert all(job["status"] == "offer" for job in response.json())


@pytest.mark.api
def test_search_wildcards_are_literal(client, sample_jobs):
    """A % or _ in the term matches that character, not any text."""
    assert titles(client.get("/api/jobs/search", params={"search": "%"})) == ["Backend Developer"]
    assert titles(client.get("/api/jobs/search", params={"search": "_"})) == []


@pytest.mark.api
def test_search_term_is_not_interpolated(client, sample_jobs):
    response = client.get("/api/jobs/search", params={"search": "' OR 1=1 --"})
    assert response.status_code == 200
    assert response.json() == []
    assert len(client.get("/api/jobs/").json()) == len(SAMPLE_JOBS)


@pytest.mark.api
@pytest.mark.parametrize("status", ["applied", "interviewing", "offer", "rejected"])
def test_status_filter(client, sample_jobs, status):
    response = client.get("/api/jobs/status", params={"status": status})
    assert response.status_code == 200
    jobs = response.json()
    assert all(job["status"] == status for job in jobs)
    assert len(jobs) == sum(1 for job in SAMPLE_JOBS if job["status"] == status)


@pytest.mark.api
def test_status_filter_without_status_returns_everything(client, sample_jobs):
    response = client.get("/api/jobs/status")
    assert len(response.json()) == len(SAMPLE_JOBS)


@pytest.mark.api
def test_unknown_status_filter_matches_nothing(client, sample_jobs):
    response = client.get("/api/jobs/status", params={"status": "archived"})
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.api
def test_store_failure_surfaces_as_500(client, test_engine):
    """Test that store errors carry the store's diagnostic message."""
    Base.metadata.drop_all(bind=test_engine)

    response = client.get("/api/jobs/")
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to fetch jobs"
    assert "no such table" in body["details"]

    response = client.get("/api/jobs/search", params={"search": "google"})
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to search jobs"
