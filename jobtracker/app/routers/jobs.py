from fastapi import APIRouter, Depends, Query, status as http_status
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.jobs import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobMutationResponse,
    JobDeleteResponse,
    ErrorResponse,
)
from ..dependencies import get_db

from jobtracker.features.job_tracking import service

router = APIRouter()

STORE_ERROR = {500: {"model": ErrorResponse, "description": "Record store failure"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Job not found"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid request"}}


@router.get("/", response_model=List[JobResponse], responses=STORE_ERROR)
async def get_jobs(db: Session = Depends(get_db)):
    """Get all jobs, most recently applied first"""
    return service.list_jobs(db)


# Registered before /{job_id} so "search" and "status" are not taken as ids
@router.get("/search", response_model=List[JobResponse], responses=STORE_ERROR)
async def search_jobs(
    search: Optional[str] = Query(None, description="Text matched against company, title and notes"),
    status: Optional[str] = Query(None, description="Application status"),
    db: Session = Depends(get_db)
):
    """Search jobs by free text, optionally narrowed to one status"""
    return service.search_jobs(db, search=search, status=status)


@router.get("/status", response_model=List[JobResponse], responses=STORE_ERROR)
async def get_jobs_by_status(
    status: Optional[str] = Query(None, description="Application status"),
    db: Session = Depends(get_db)
):
    """Get jobs with the given status"""
    return service.jobs_by_status(db, status=status)


@router.get("/{job_id}", response_model=JobResponse, responses={**NOT_FOUND, **STORE_ERROR})
async def get_job(job_id: int, db: Session = Depends(get_db)):
    """Get details for a specific job"""
    return service.get_job(db, job_id)


@router.post(
    "/",
    response_model=JobMutationResponse,
    status_code=http_status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **STORE_ERROR}
)
async def create_job(payload: JobCreate, db: Session = Depends(get_db)):
    """Create a job; status defaults to applied and date applied to today"""
    job = service.create_job(db, payload.model_dump(exclude_none=True))
    return JobMutationResponse(message="Job created successfully", job=JobResponse.model_validate(job))


@router.put(
    "/{job_id}",
    response_model=JobMutationResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **STORE_ERROR}
)
async def update_job(job_id: int, payload: JobUpdate, db: Session = Depends(get_db)):
    """Update only the fields present in the request body"""
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    job = service.update_job(db, job_id, changes)
    return JobMutationResponse(message="Job updated successfully", job=JobResponse.model_validate(job))


@router.delete("/{job_id}", response_model=JobDeleteResponse, responses={**NOT_FOUND, **STORE_ERROR})
async def delete_job(job_id: int, db: Session = Depends(get_db)):
    """Delete a job"""
    deleted = service.delete_job(db, job_id)
    return JobDeleteResponse(message="Job deleted successfully", deleted_job=deleted)
