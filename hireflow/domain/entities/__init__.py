# Domain Entities
from .job import Job
from .user import User, UserRole
from .applicant import (
    ALLOWED_TRANSITIONS,
    INITIAL_STATUS,
    ApplicantEntry,
    ApplicationStatus,
)

__all__ = [
    "Job",
    "User",
    "UserRole",
    "ApplicantEntry",
    "ApplicationStatus",
    "ALLOWED_TRANSITIONS",
    "INITIAL_STATUS",
]
