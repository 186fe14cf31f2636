"""HTTP client for the job tracker API."""

import os
from typing import Any, Dict, List, Optional

import requests

from jobtracker.core.logging import setup_logging

logger = setup_logging('jobs_api')

DEFAULT_BASE_URL = "http://localhost:3000/api/jobs"


class JobsApiError(Exception):
    """A job API call failed; the message is what the UI should show."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class JobsApiClient:
    """One method per job API endpoint.

    Failed calls raise :class:`JobsApiError` with the server's ``error`` text
    when the response carries one, otherwise a per-operation fallback. Calls
    are never retried; the caller re-issues on the next user action.
    """

    DEFAULT_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Jobs resource root, defaults to JOBTRACKER_API_URL
            timeout: Per-request timeout in seconds
            session: Optional pre-configured requests session
        """
        self.base_url = (base_url or os.getenv("JOBTRACKER_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(self.DEFAULT_HEADERS)

    def _request(self, method: str, path: str, fallback: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {str(e)}")
            raise JobsApiError(fallback) from e

        if not response.ok:
            message = fallback
            try:
                message = response.json().get("error") or fallback
            except ValueError:
                pass
            logger.error(f"{method} {url} returned {response.status_code}: {message}")
            raise JobsApiError(message, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned a body that is not JSON: {str(e)}")
            raise JobsApiError(fallback, response.status_code) from e

    def get_all_jobs(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/", "Failed to fetch jobs")

    def get_job_by_id(self, job_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/{job_id}", "Failed to fetch job")

    def search_jobs(self, search_term: Optional[str], status: Optional[str] = None) -> List[Dict[str, Any]]:
        """Search jobs; empty arguments are left out of the query string."""
        params = {}
        if search_term:
            params["search"] = search_term
        if status:
            params["status"] = status
        return self._request("GET", "/search", "Failed to search jobs", params=params)

    def get_jobs_by_status(self, status: str) -> List[Dict[str, Any]]:
        return self._request("GET", "/status", "Failed to filter jobs", params={"status": status})

    def create_job(self, job_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/", "Failed to create job", json=job_data)

    def update_job(self, job_id: int, job_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/{job_id}", "Failed to update job", json=job_data)

    def delete_job(self, job_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/{job_id}", "Failed to delete job")
