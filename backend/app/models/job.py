from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from ..database import Base
from .ids import OBJECT_ID_LENGTH, new_object_id


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)
    company = Column(String(255), nullable=True)
    role = Column(String(255), nullable=True)
    country = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True, index=True)
    linkedin_url = Column(String(500), nullable=True)
    alternative_url = Column(String(500), nullable=True)
    employment_type = Column(String(50), nullable=True)  # Full-time / Contract / ...
    onsite = Column(String(50), nullable=True)  # Onsite / Remote / Hybrid
    skill_level = Column(String(50), nullable=True, index=True)  # e.g. "Entry-Level"
    min_years_experience = Column(Integer, nullable=True)
    job_description = Column(Text, nullable=True)
    key_responsibilities = Column(Text, nullable=True)  # ";"-joined list
    preferred_skills = Column(Text, nullable=True)  # ";"-joined list
    languages = Column(Text, nullable=True)  # ","-joined list
    technologies_mentioned = Column(Text, nullable=True)  # ","-joined list
    educational_requirements = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
