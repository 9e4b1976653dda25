from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base
from .ids import OBJECT_ID_LENGTH


class SavedJob(Base):
    __tablename__ = "saved_jobs"

    # Autoincrement id doubles as the insertion order of a user's bookmarks.
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        String(OBJECT_ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Plain reference, no FK: a job removed from the store leaves this row dangling.
    job_id = Column(String(OBJECT_ID_LENGTH), nullable=False)
    saved_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="saved_jobs")

    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_saved_jobs_user_job"),
    )
