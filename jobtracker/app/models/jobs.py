"""Job-related request and response models."""
from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

from jobtracker.core.schemas import JobStatus


class JobBase(BaseModel):
    """Fields shared by create and update requests."""
    status: Optional[JobStatus] = None
    date_applied: Optional[date] = None
    notes: Optional[str] = None

    @field_validator('status', 'date_applied', mode='before')
    @classmethod
    def blank_as_missing(cls, value):
        """Forms submit unset selects and dates as empty strings."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class JobCreate(JobBase):
    """Job creation model.

    company and title are checked by the job service so a missing value
    gets the same error body as a blank one.
    """
    company: Optional[str] = None
    title: Optional[str] = None


class JobUpdate(JobBase):
    """Partial update model; only fields present in the body are applied."""
    company: Optional[str] = None
    title: Optional[str] = None


class JobResponse(BaseModel):
    """Job response model."""
    id: int
    company: str
    title: str
    status: str
    date_applied: Optional[date] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class JobMutationResponse(BaseModel):
    """Response for create and update."""
    message: str
    job: JobResponse


class JobDeleteResponse(BaseModel):
    """Response for delete, echoing the removed record."""
    message: str
    deleted_job: JobResponse = Field(alias='deletedJob')

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Error body returned for 4xx and 5xx responses."""
    error: str
    details: str
