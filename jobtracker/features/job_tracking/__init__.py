"""Job application tracking: query composition and CRUD."""

from .query import build_jobs_query, fetch_jobs
from .service import (
    list_jobs,
    search_jobs,
    jobs_by_status,
    get_job,
    create_job,
    update_job,
    delete_job,
)

__all__ = [
    'build_jobs_query',
    'fetch_jobs',
    'list_jobs',
    'search_jobs',
    'jobs_by_status',
    'get_job',
    'create_job',
    'update_job',
    'delete_job',
]
