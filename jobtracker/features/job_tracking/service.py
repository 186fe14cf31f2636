"""Job application CRUD on top of the record store.

Functions take an open SQLAlchemy session and raise the errors from
``jobtracker.core.exceptions``; the API layer maps those to HTTP statuses.
"""
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobtracker.core.exceptions import NotFoundError, StoreError, ValidationError
from jobtracker.core.logging import setup_logging
from jobtracker.core.models import JobApplication
from jobtracker.core.schemas import DEFAULT_STATUS, JobStatus
from jobtracker.features.job_tracking.query import fetch_jobs

logger = setup_logging('job_service')

UPDATABLE_FIELDS = ('company', 'title', 'status', 'date_applied', 'notes')
REQUIRED_FIELDS = ('company', 'title')

# Ids outside a signed 64-bit integer can never be stored
MAX_JOB_ID = 2**63 - 1


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def _status_value(status: Any) -> Any:
    return status.value if isinstance(status, JobStatus) else status


def _not_found(job_id: int) -> NotFoundError:
    return NotFoundError("Job not found", f"No job found with ID: {job_id}")


def list_jobs(session: Session) -> List[JobApplication]:
    """Get all jobs, most recently applied first."""
    return fetch_jobs(session)


def search_jobs(session: Session, search: Optional[str] = None, status: Optional[str] = None) -> List[JobApplication]:
    """Get jobs matching a search term and/or a status."""
    return fetch_jobs(session, search=search, status=status, failure_message="Failed to search jobs")


def jobs_by_status(session: Session, status: Optional[str] = None) -> List[JobApplication]:
    """Get jobs with the given status, or all jobs when status is empty."""
    return fetch_jobs(session, status=status)


def get_job(session: Session, job_id: int) -> JobApplication:
    """Get a single job by id."""
    if abs(job_id) > MAX_JOB_ID:
        raise _not_found(job_id)

    try:
        job = session.get(JobApplication, job_id)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error fetching job {job_id}: {str(e)}")
        raise StoreError("Failed to fetch job", str(e)) from e

    if job is None:
        raise _not_found(job_id)
    return job


def create_job(session: Session, data: Dict[str, Any]) -> JobApplication:
    """Create a job, applying defaults for status, date applied and notes.

    Raises:
        ValidationError: If company or title is missing or blank
        StoreError: If the insert fails
    """
    if any(_is_blank(data.get(field)) for field in REQUIRED_FIELDS):
        raise ValidationError("Missing required fields", "Company and title are required")

    job = JobApplication(
        company=data['company'],
        title=data['title'],
        status=_status_value(data.get('status')) or DEFAULT_STATUS.value,
        date_applied=data.get('date_applied') or date.today(),
        notes=data.get('notes') or ''
    )

    try:
        session.add(job)
        session.commit()
        session.refresh(job)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error creating job at {data['company']}: {str(e)}")
        raise StoreError("Failed to create job", str(e)) from e

    logger.info(f"Created job {job.id}: {job.title} at {job.company}")
    return job


def update_job(session: Session, job_id: int, changes: Dict[str, Any]) -> JobApplication:
    """Apply a partial update; fields absent from ``changes`` keep their value.

    Raises:
        ValidationError: If no field is supplied, or company/title is blank
        NotFoundError: If no job has this id
        StoreError: If the update fails
    """
    update_data = {
        field: _status_value(value)
        for field, value in changes.items()
        if field in UPDATABLE_FIELDS
    }
    if not update_data:
        raise ValidationError("No data provided", "At least one field must be provided to update")

    for field in REQUIRED_FIELDS:
        if field in update_data and _is_blank(update_data[field]):
            raise ValidationError("Invalid field value", f"{field.capitalize()} cannot be empty")

    job = get_job(session, job_id)

    try:
        for field, value in update_data.items():
            setattr(job, field, value)
        session.commit()
        session.refresh(job)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error updating job {job_id}: {str(e)}")
        raise StoreError("Failed to update job", str(e)) from e

    logger.info(f"Updated job {job_id}: {', '.join(sorted(update_data))}")
    return job


def delete_job(session: Session, job_id: int) -> Dict[str, Any]:
    """Delete a job and return the data it held."""
    job = get_job(session, job_id)
    deleted = job.to_dict()

    try:
        session.delete(job)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error deleting job {job_id}: {str(e)}")
        raise StoreError("Failed to delete job", str(e)) from e

    logger.info(f"Deleted job {job_id}")
    return deleted
