"""FastAPI application models."""

from .jobs import (
    JobBase,
    JobCreate,
    JobUpdate,
    JobResponse,
    JobMutationResponse,
    JobDeleteResponse,
    ErrorResponse,
)

__all__ = [
    'JobBase',
    'JobCreate',
    'JobUpdate',
    'JobResponse',
    'JobMutationResponse',
    'JobDeleteResponse',
    'ErrorResponse',
]
