"""
Job Entity - Represents a recruiter-posted opening.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Job:
    """
    Job entity representing an opening posted by a recruiter.

    The applicant list belongs to the job but is persisted separately
    (one row per candidate) so it can be mutated with single-row atomic
    writes; see ``ApplicantEntry``.

    Attributes:
        id: Unique job id
        title: Job title
        description: Full job description text
        posted_by: User id of the owning recruiter (immutable)
        skills: Free-text skill tags
        locations: Where the job is based
        vacancies: Number of open positions
        is_deleted: Soft-delete flag
        created_at: When the job was posted
        updated_at: Last modification
    """

    id: str
    title: str
    description: str
    posted_by: str
    skills: frozenset[str] = field(default_factory=frozenset)
    locations: list[str] = field(default_factory=list)
    vacancies: int = 1
    is_deleted: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate job data after initialization."""
        if not self.id:
            raise ValueError("id is required")
        if not self.title:
            raise ValueError("title is required")
        if not self.description:
            raise ValueError("description is required")
        if not self.posted_by:
            raise ValueError("posted_by is required")
        if not self.locations:
            raise ValueError("at least one location is required")
        if self.vacancies < 1:
            raise ValueError("vacancies must be at least 1")

        if not isinstance(self.skills, frozenset):
            self.skills = frozenset(s.strip() for s in self.skills if s.strip())

    @property
    def is_open(self) -> bool:
        """Check if the job still accepts applications."""
        return not self.is_deleted

    def is_owned_by(self, user_id: str) -> bool:
        """Check if ``user_id`` is the recruiter who posted this job."""
        return self.posted_by == user_id

    def to_dict(self) -> dict:
        """Convert to dictionary for database storage."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "posted_by": self.posted_by,
            "skills": json.dumps(sorted(self.skills)),
            "locations": json.dumps(self.locations),
            "vacancies": self.vacancies,
            "is_deleted": int(self.is_deleted),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Job":
        """Create Job from dictionary (database row)."""
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            posted_by=data["posted_by"],
            skills=frozenset(_load_list(data.get("skills"))),
            locations=_load_list(data.get("locations")),
            vacancies=int(data.get("vacancies", 1)),
            is_deleted=bool(data.get("is_deleted", 0)),
            created_at=datetime.fromisoformat(data["created_at"])
            if isinstance(data["created_at"], str)
            else data["created_at"],
            updated_at=datetime.fromisoformat(data["updated_at"])
            if isinstance(data["updated_at"], str)
            else data["updated_at"],
        )


def _load_list(value: Optional[str | list]) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return list(json.loads(value))
    return list(value)
