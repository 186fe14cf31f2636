"""Search and status filter composition for job listings.

A free-text search term and a status value combine into one ``select()``
against the jobs table:

* neither given: every record
* search term: company, title or notes contains the term (case-insensitive)
* status: status equals the value, AND-ed with the search predicate

Every path shares the same ordering, most recently applied first, so the
unfiltered listing and a filtered one present records in the same order.

Example:
    ```python
    from jobtracker.features.job_tracking.query import fetch_jobs

    with get_session() as session:
        offers = fetch_jobs(session, search="google", status="offer")
    ```
"""
from typing import List, Optional

from sqlalchemy import Select, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobtracker.core.exceptions import StoreError
from jobtracker.core.logging import setup_logging
from jobtracker.core.models import JobApplication

logger = setup_logging('job_query')

SEARCH_FIELDS = (JobApplication.company, JobApplication.title, JobApplication.notes)

# id breaks ties between records applied on the same day, newest insert first
RESULT_ORDER = (JobApplication.date_applied.desc(), JobApplication.id.desc())


def search_predicate(term: str):
    """Match ``term`` as a literal substring of any searchable field.

    The term is sent as a bound parameter; ``autoescape`` makes ``%`` and
    ``_`` inside it match themselves instead of acting as wildcards.
    """
    return or_(*(field.icontains(term, autoescape=True) for field in SEARCH_FIELDS))


def build_jobs_query(search: Optional[str] = None, status: Optional[str] = None) -> Select:
    """Compose the retrieval query for the given filters.

    Args:
        search: Free-text term; empty or None disables text matching
        status: Status value; empty or None disables status matching

    Returns:
        A select over JobApplication ordered by date applied, newest first
    """
    query = select(JobApplication)

    if search:
        query = query.where(search_predicate(search))

    if status:
        query = query.where(JobApplication.status == status)

    return query.order_by(*RESULT_ORDER)


def fetch_jobs(
    session: Session,
    search: Optional[str] = None,
    status: Optional[str] = None,
    failure_message: str = "Failed to fetch jobs"
) -> List[JobApplication]:
    """Execute the composed query.

    Raises:
        StoreError: If the store rejects the query; no retry is attempted
    """
    try:
        return list(session.scalars(build_jobs_query(search=search, status=status)))
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"{failure_message} (search={search!r}, status={status!r}): {str(e)}")
        raise StoreError(failure_message, str(e)) from e
