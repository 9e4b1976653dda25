import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.ids import is_valid_object_id
from ..repositories.jobs import ENTRY_LEVEL, JobRepository
from ..services.job_format import format_job_details, format_job_listing
from ..utils.error_handlers import NotFoundError, get_error_message, handle_database_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def get_job_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


def _listing_response(jobs) -> dict:
    return {
        "success": True,
        "count": len(jobs),
        "jobs": [format_job_listing(job) for job in jobs],
    }


@router.get("")
def list_jobs(jobs: JobRepository = Depends(get_job_repository)):
    try:
        rows = jobs.list_all()
    except SQLAlchemyError as e:
        raise handle_database_error(e, "listing jobs")
    return _listing_response(rows)


# Registered before /{job_id} so "entry-level" is not taken for an id.
@router.get("/entry-level")
def list_entry_level_jobs(jobs: JobRepository = Depends(get_job_repository)):
    try:
        rows = jobs.list_by_skill_level(ENTRY_LEVEL)
    except SQLAlchemyError as e:
        raise handle_database_error(e, "listing entry-level jobs")
    return _listing_response(rows)


@router.get("/city/{city}")
def list_jobs_by_city(city: str, jobs: JobRepository = Depends(get_job_repository)):
    try:
        rows = jobs.list_by_city(city)
    except SQLAlchemyError as e:
        raise handle_database_error(e, f"listing jobs in {city}")
    return _listing_response(rows)


@router.get("/{job_id}")
def get_job(job_id: str, jobs: JobRepository = Depends(get_job_repository)):
    if not is_valid_object_id(job_id):
        raise NotFoundError(get_error_message("job_not_found"))
    try:
        job = jobs.get(job_id.lower())
    except SQLAlchemyError as e:
        raise handle_database_error(e, "fetching job")
    if job is None:
        raise NotFoundError(get_error_message("job_not_found"))

    return {
        "success": True,
        "job": format_job_details(job),
    }
