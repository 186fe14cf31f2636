"""Main FastAPI application module."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import os
from dotenv import load_dotenv

from jobtracker import __version__
from jobtracker.core.database import init_database
from jobtracker.core.exceptions import JobTrackerError
from jobtracker.core.logging import setup_logging

from .routers import jobs

# Load environment variables
load_dotenv()

# Initialize logging
logger = setup_logging('api')

app = FastAPI(
    title="Job Tracker API",
    description="""
    REST API for tracking job applications.

    * List jobs, most recently applied first
    * Search company, title and notes, optionally narrowed to one status
    * Create, partially update and delete applications

    Errors are returned as `{"error": ..., "details": ...}`.
    """,
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    jobs.router,
    prefix="/api/jobs",
    tags=["jobs"]
)


@app.exception_handler(JobTrackerError)
async def job_tracker_error_handler(request: Request, exc: JobTrackerError):
    """Render service errors with their HTTP status."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.details}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies, ids and status values as 400."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "details": details}
    )


@app.on_event("startup")
async def startup_event():
    """Initialize the record store connection on startup."""
    try:
        init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Error during startup: {str(e)}")
        raise


@app.get("/")
async def root():
    """Root endpoint listing the job routes."""
    return {
        "message": "Job Tracker API is running!",
        "version": __version__,
        "endpoints": {
            "jobs": "/api/jobs",
            "search": "/api/jobs/search",
            "filter": "/api/jobs/status"
        }
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "Job Tracker API",
        "version": __version__
    }
