from .jobs import JobRepository
from .users import UserRepository

__all__ = ["JobRepository", "UserRepository"]
