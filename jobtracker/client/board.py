"""View state for the job board: listing, filters, stats and recent activity.

The board keeps two independently fetched lists:

* ``jobs`` - what the list view shows, the result of the current search
  term and status filter
* ``all_jobs`` - the complete set, from which ``status_counts`` and
  ``recent`` are derived

Changing a filter refreshes only ``jobs``. Loading and every mutation
refresh both, concurrently; a failure in one leaves the other intact.

Example:
    ```python
    from jobtracker.client import JobBoard, JobsApiClient

    with JobBoard(JobsApiClient()) as board:
        board.load()
        board.set_status_filter('offer')
        print(board.jobs, board.status_counts)
    ```
"""
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Callable, Dict, List, Optional

from jobtracker.client.api import JobsApiClient, JobsApiError
from jobtracker.client.search import DEFAULT_DEBOUNCE_SECONDS, LatestRequestRegister, SearchDebouncer
from jobtracker.client.stats import count_by_status, recent_jobs
from jobtracker.core.logging import setup_logging

logger = setup_logging('job_board')


class JobBoard:
    """Client-side state behind the job tracker UI."""

    def __init__(
        self,
        api: JobsApiClient,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        timer_factory: Callable[..., Any] = threading.Timer,
    ):
        self.api = api

        self.search_term = ''
        self.status_filter: Optional[str] = None
        self.jobs: List[Dict[str, Any]] = []
        self.error: Optional[str] = None

        self.all_jobs: List[Dict[str, Any]] = []
        self.status_counts = count_by_status([])
        self.recent: List[Dict[str, Any]] = []
        self.stats_error: Optional[str] = None

        self._lock = threading.Lock()
        self._view_requests = LatestRequestRegister()
        self._stats_requests = LatestRequestRegister()
        self._debouncer = SearchDebouncer(
            self._on_search_settled,
            delay=debounce_seconds,
            timer_factory=timer_factory
        )
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix='job-board')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self._debouncer.cancel()
        self._executor.shutdown(wait=True)

    def load(self):
        """Initial load of both the list view and the dashboard."""
        self.refresh()

    def refresh(self):
        """Re-fetch the filtered view and the full set concurrently."""
        futures = [
            self._executor.submit(self.refresh_view),
            self._executor.submit(self.refresh_stats),
        ]
        wait(futures)
        for future in futures:
            future.result()

    def set_search_term(self, term: str):
        """Record typed text; the search runs once typing pauses."""
        self.search_term = term or ''
        self._debouncer.submit(self.search_term)

    def set_status_filter(self, status: Optional[str]):
        """Apply a status filter immediately, with the current search term."""
        self.status_filter = status or None
        # The pending search would use the same term; this request supersedes it
        self._debouncer.cancel()
        self.refresh_view()

    def flush_search(self):
        """Run a pending debounced search now."""
        self._debouncer.flush()

    def _on_search_settled(self, term: str):
        self.refresh_view()

    def refresh_view(self) -> bool:
        """Fetch the list for the current filters.

        Returns:
            True if the result was applied, False if it failed or a newer
            request superseded it
        """
        ticket = self._view_requests.issue()
        search_term, status = self.search_term, self.status_filter

        try:
            if search_term or status:
                jobs = self.api.search_jobs(search_term, status)
            else:
                jobs = self.api.get_all_jobs()
        except JobsApiError as e:
            with self._lock:
                if self._view_requests.is_current(ticket):
                    self.error = e.message
                    self.jobs = []
            return False

        with self._lock:
            if not self._view_requests.is_current(ticket):
                logger.debug(f"Dropping stale results for search={search_term!r} status={status!r}")
                return False
            self.jobs = jobs
            self.error = None
        return True

    def refresh_stats(self) -> bool:
        """Fetch the full set and recompute status counts and recent jobs."""
        ticket = self._stats_requests.issue()

        try:
            all_jobs = self.api.get_all_jobs()
        except JobsApiError as e:
            with self._lock:
                if self._stats_requests.is_current(ticket):
                    self.stats_error = e.message
            return False

        with self._lock:
            if not self._stats_requests.is_current(ticket):
                return False
            self.all_jobs = all_jobs
            self.status_counts = count_by_status(all_jobs)
            self.recent = recent_jobs(all_jobs)
            self.stats_error = None
        return True

    def create_job(self, job_data: Dict[str, Any]) -> Dict[str, Any]:
        result = self.api.create_job(job_data)
        logger.info(f"Created job {result['job']['id']}")
        self.refresh()
        return result['job']

    def update_job(self, job_id: int, job_data: Dict[str, Any]) -> Dict[str, Any]:
        result = self.api.update_job(job_id, job_data)
        logger.info(f"Updated job {job_id}")
        self.refresh()
        return result['job']

    def delete_job(self, job_id: int) -> Dict[str, Any]:
        result = self.api.delete_job(job_id)
        logger.info(f"Deleted job {job_id}")
        self.refresh()
        return result['deletedJob']
