"""
Jobs repository.

Read access to job postings plus the insert used by the importer. No business
rules live here.
"""
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models.job import Job

ENTRY_LEVEL = "Entry-Level"


class JobRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, job_id: str) -> Job | None:
        return self.db.get(Job, job_id)

    def exists(self, job_id: str) -> bool:
        return self.db.scalar(select(func.count()).select_from(Job).where(Job.id == job_id)) > 0

    def list_all(self) -> list[Job]:
        return list(self.db.scalars(select(Job).order_by(Job.created_at, Job.id)).all())

    def list_by_city(self, city: str) -> list[Job]:
        # Case-insensitive substring match; % and _ in the input are literal.
        pattern = city.strip().lower()
        stmt = (
            select(Job)
            .where(func.lower(Job.city).contains(pattern, autoescape=True))
            .order_by(Job.created_at, Job.id)
        )
        return list(self.db.scalars(stmt).all())

    def list_by_skill_level(self, level: str = ENTRY_LEVEL) -> list[Job]:
        stmt = select(Job).where(Job.skill_level == level).order_by(Job.created_at, Job.id)
        return list(self.db.scalars(stmt).all())

    def add(self, **fields) -> Job:
        job = Job(**fields)
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        return job
