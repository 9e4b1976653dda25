from .job import Job
from .saved_job import SavedJob
from .user import User

__all__ = ["Job", "SavedJob", "User"]
