import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..repositories.jobs import JobRepository
from ..repositories.users import UserRepository
from ..services.job_format import format_job_details
from ..services.saved_jobs import SavedJobsManager
from ..utils.dependencies import get_current_user
from ..utils.error_handlers import DatabaseError, get_error_message, handle_database_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Saved Jobs"])


def get_saved_jobs_manager(db: Session = Depends(get_db)) -> SavedJobsManager:
    return SavedJobsManager(UserRepository(db), JobRepository(db))


# Every route declares get_current_user first, so a request without a valid token is
# rejected before the manager or the store is touched.


@router.post("/save-jobs/{job_id}")
def save_job(
    job_id: str,
    current_user: dict = Depends(get_current_user),
    manager: SavedJobsManager = Depends(get_saved_jobs_manager),
):
    try:
        result = manager.save_job(current_user["userId"], job_id)
    except SQLAlchemyError as e:
        logger.exception("Error saving job %s", job_id)
        error = handle_database_error(e, "saving job")
        if isinstance(error, DatabaseError):
            error = DatabaseError(get_error_message("save_failed"))
        raise error

    return {
        "success": True,
        "message": result.message,
        "savedJobs": result.saved_jobs,
    }


@router.get("/saved-jobs")
def list_saved_jobs(
    current_user: dict = Depends(get_current_user),
    manager: SavedJobsManager = Depends(get_saved_jobs_manager),
):
    try:
        jobs = manager.list_saved_jobs(current_user["userId"])
    except SQLAlchemyError as e:
        raise handle_database_error(e, "listing saved jobs")

    return {
        "success": True,
        "jobs": [format_job_details(job) for job in jobs],
    }


@router.delete("/saved-jobs/{job_id}")
def remove_saved_job(
    job_id: str,
    current_user: dict = Depends(get_current_user),
    manager: SavedJobsManager = Depends(get_saved_jobs_manager),
):
    try:
        message = manager.remove_job(current_user["userId"], job_id)
    except SQLAlchemyError as e:
        raise handle_database_error(e, "removing saved job")

    return {
        "success": True,
        "message": message,
    }
