"""Client for the job tracker API and the view state a UI renders."""

from .api import JobsApiClient, JobsApiError
from .board import JobBoard
from .form import JobForm, JobFormError
from .search import LatestRequestRegister, SearchDebouncer
from .stats import count_by_status, recent_jobs

__all__ = [
    'JobsApiClient',
    'JobsApiError',
    'JobBoard',
    'JobForm',
    'JobFormError',
    'LatestRequestRegister',
    'SearchDebouncer',
    'count_by_status',
    'recent_jobs',
]
