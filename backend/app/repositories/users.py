"""
Users repository: credentials and the saved-jobs bookmark rows.

Writes that could race are single statements guarded by unique indexes
(``users.username`` and ``saved_jobs(user_id, job_id)``), so concurrent requests
never read-modify-write a shared list.
"""
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.job import Job
from ..models.saved_job import SavedJob
from ..models.user import User
from ..utils.error_handlers import DuplicateUsernameError

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> User | None:
        return self.db.get(User, user_id)

    def get_by_username(self, username: str) -> User | None:
        return self.db.scalar(select(User).where(User.username == username))

    def create(self, username: str, password_hash: str) -> User:
        user = User(username=username, password=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Duplicate username rejected by unique index: %s", username)
            raise DuplicateUsernameError() from e
        self.db.refresh(user)
        return user

    def saved_job_ids(self, user_id: str) -> list[str]:
        stmt = select(SavedJob.job_id).where(SavedJob.user_id == user_id).order_by(SavedJob.id)
        return list(self.db.scalars(stmt).all())

    def has_saved_job(self, user_id: str, job_id: str) -> bool:
        stmt = select(SavedJob.id).where(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        return self.db.scalar(stmt) is not None

    def add_saved_job(self, user_id: str, job_id: str) -> bool:
        """Append ``job_id`` to the user's list. Returns False if it was already there."""
        self.db.add(SavedJob(user_id=user_id, job_id=job_id))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.has_saved_job(user_id, job_id):
                # Lost a race with a concurrent save of the same pair.
                return False
            raise
        return True

    def remove_saved_job(self, user_id: str, job_id: str) -> bool:
        result = self.db.execute(
            delete(SavedJob).where(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        )
        self.db.commit()
        return result.rowcount > 0

    def saved_jobs(self, user_id: str) -> list[Job]:
        """Saved jobs in insertion order. Ids whose job no longer exists are skipped."""
        stmt = (
            select(Job)
            .join(SavedJob, SavedJob.job_id == Job.id)
            .where(SavedJob.user_id == user_id)
            .order_by(SavedJob.id)
        )
        return list(self.db.scalars(stmt).all())
