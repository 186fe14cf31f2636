"""Dashboard statistics derived from the full job list.

Both functions take the complete, unfiltered list of job records (as
returned by the API) and never look at the active search or status filter.
"""
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping

from jobtracker.core.schemas import STATUS_VALUES

RECENT_LIMIT = 6


def count_by_status(jobs: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    """Count jobs per status.

    All four statuses are always present. Jobs holding any other status
    value are skipped.
    """
    counts = {status: 0 for status in STATUS_VALUES}
    for job in jobs:
        status = job.get('status')
        if status in counts:
            counts[status] += 1
    return counts


def applied_on(job: Mapping[str, Any]) -> date:
    """Sort key: the job's date applied, ``date.min`` when missing or malformed."""
    value = job.get('date_applied')
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return date.min


def most_recent_first(jobs: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Order jobs by date applied, newest first, keeping input order for ties."""
    # sorted() is stable, and reverse=True keeps equal keys in input order
    return sorted(jobs, key=applied_on, reverse=True)


def recent_jobs(jobs: Iterable[Mapping[str, Any]], limit: int = RECENT_LIMIT) -> List[Mapping[str, Any]]:
    """The ``limit`` most recently applied jobs."""
    return most_recent_first(jobs)[:limit]
