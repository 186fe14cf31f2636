"""Error taxonomy shared by the job service and the API layer.

Each error carries a short ``error`` summary and a ``details`` string; the
API renders both as the JSON body ``{"error": ..., "details": ...}``.
"""
from typing import Optional


class JobTrackerError(Exception):
    """Base class for all job tracker errors."""

    status_code = 500

    def __init__(self, error: str, details: Optional[str] = None):
        super().__init__(error if details is None else f"{error}: {details}")
        self.error = error
        self.details = details or error

    def to_dict(self) -> dict:
        return {"error": self.error, "details": self.details}


class ValidationError(JobTrackerError):
    """Request input must be corrected by the client."""

    status_code = 400


class NotFoundError(JobTrackerError):
    """No job matches the requested id."""

    status_code = 404


class StoreError(JobTrackerError):
    """The record store was unreachable or rejected the operation."""

    status_code = 500


class ConfigurationError(JobTrackerError):
    """Required store settings are missing from the environment."""
