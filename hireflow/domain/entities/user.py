"""
User Entity - Recruiters and job seekers.
"""

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    """Role of a user; fixed for the lifetime of a session."""

    RECRUITER = "recruiter"
    JOB_SEEKER = "job_seeker"


@dataclass
class User:
    """
    User entity.

    The same ``id`` is referenced as ``Job.posted_by`` for recruiters and
    as ``ApplicantEntry.candidate_id`` for job seekers.
    """

    id: str
    name: str
    email: str
    role: UserRole

    def __post_init__(self) -> None:
        """Validate user data."""
        if not self.id:
            raise ValueError("id is required")
        if not self.email or "@" not in self.email:
            raise ValueError("a valid email is required")

        if isinstance(self.role, str):
            self.role = UserRole(self.role)

    @property
    def is_recruiter(self) -> bool:
        return self.role == UserRole.RECRUITER

    def to_dict(self) -> dict:
        """Convert to dictionary for database storage."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create User from dictionary (database row)."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            email=data["email"],
            role=UserRole(data["role"]),
        )
