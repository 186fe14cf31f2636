"""Shared enumerations for job application records.

The API request models and the client-side aggregator both key off
:class:`JobStatus`, so the four allowed status values live in one place.
"""
from enum import Enum


class JobStatus(str, Enum):
    """Application status.

    Attributes:
        APPLIED: Application submitted, no response yet
        INTERVIEWING: In an interview loop
        OFFER: Offer received
        REJECTED: Application closed without an offer
    """
    APPLIED = "applied"
    INTERVIEWING = "interviewing"
    OFFER = "offer"
    REJECTED = "rejected"


DEFAULT_STATUS = JobStatus.APPLIED

STATUS_VALUES = tuple(status.value for status in JobStatus)
