from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base
from .ids import OBJECT_ID_LENGTH, new_object_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)
    # Uniqueness is enforced by the index, not by a lookup before insert.
    username = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # store hashed password
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    saved_jobs = relationship(
        "SavedJob",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="SavedJob.id",
    )
