"""Core functionality for the jobtracker package."""

# Import core components
from .logging import setup_logging
from .database import Base, get_session, init_database
from .exceptions import (
    JobTrackerError,
    ValidationError,
    NotFoundError,
    StoreError,
    ConfigurationError,
)
from .schemas import JobStatus

__all__ = [
    'setup_logging',
    'Base',
    'get_session',
    'init_database',
    'JobTrackerError',
    'ValidationError',
    'NotFoundError',
    'StoreError',
    'ConfigurationError',
    'JobStatus',
]
