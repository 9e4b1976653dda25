"""
Saved-jobs (bookmark) manager.

For every (user, job) pair the only transitions are:

    Unsaved --save_job--> Saved       (save_job on Saved is a no-op)
    Saved --remove_job--> Unsaved     (remove_job on Unsaved is NotFound)

Each transition is one insert or delete guarded by the ``(user_id, job_id)``
unique index, so concurrent saves for the same user cannot lose each other's
updates or create duplicates.
"""
import logging
from dataclasses import dataclass, field

from ..models.job import Job
from ..repositories.jobs import JobRepository
from ..repositories.users import UserRepository
from ..utils.error_handlers import NotFoundError, get_error_message
from ..utils.validation import validate_object_id

logger = logging.getLogger(__name__)

MSG_SAVED = "Job saved successfully"
MSG_ALREADY_SAVED = "Job already saved"
MSG_REMOVED = "Job removed from saved jobs"


@dataclass
class SaveResult:
    message: str
    saved_jobs: list[str] = field(default_factory=list)
    created: bool = True


class SavedJobsManager:
    def __init__(self, users: UserRepository, jobs: JobRepository):
        self.users = users
        self.jobs = jobs

    def save_job(self, user_id, job_id) -> SaveResult:
        user_id = validate_object_id(user_id)
        job_id = validate_object_id(job_id)

        if self.users.get(user_id) is None or not self.jobs.exists(job_id):
            raise NotFoundError(get_error_message("user_or_job_not_found"))

        if self.users.has_saved_job(user_id, job_id) or not self.users.add_saved_job(user_id, job_id):
            return SaveResult(MSG_ALREADY_SAVED, self.users.saved_job_ids(user_id), created=False)

        logger.info("User %s saved job %s", user_id, job_id)
        return SaveResult(MSG_SAVED, self.users.saved_job_ids(user_id))

    def list_saved_jobs(self, user_id) -> list[Job]:
        """
        Resolve the user's saved ids to jobs, in the order they were saved.

        Ids whose job has been deleted from the store are left in place and simply
        omitted from the result.
        """
        user_id = validate_object_id(user_id, "invalid_user_id")

        if self.users.get(user_id) is None:
            raise NotFoundError(get_error_message("user_not_found"))

        return self.users.saved_jobs(user_id)

    def remove_job(self, user_id, job_id) -> str:
        user_id = validate_object_id(user_id)
        job_id = validate_object_id(job_id)

        if self.users.get(user_id) is None:
            raise NotFoundError(get_error_message("user_not_found"))

        if not self.users.remove_saved_job(user_id, job_id):
            raise NotFoundError(get_error_message("saved_job_not_found"))

        logger.info("User %s removed saved job %s", user_id, job_id)
        return MSG_REMOVED
