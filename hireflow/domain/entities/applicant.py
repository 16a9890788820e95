"""
Applicant Entity - One candidate's application record within a job.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class ApplicationStatus(str, Enum):
    """Status of a candidate within a job's hiring pipeline.

    Canonical transitions:
        applied  ->  interviewing
        interviewing  ->  hired | rejected
        hired, rejected: terminal
    """

    APPLIED = "applied"
    INTERVIEWING = "interviewing"
    HIRED = "hired"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition is possible."""
        return not ALLOWED_TRANSITIONS[self]

    def can_transition_to(self, target: "ApplicationStatus") -> bool:
        """Check if moving from this status to ``target`` is legal."""
        return target in ALLOWED_TRANSITIONS[self]


ALLOWED_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.APPLIED: frozenset({ApplicationStatus.INTERVIEWING}),
    ApplicationStatus.INTERVIEWING: frozenset(
        {ApplicationStatus.HIRED, ApplicationStatus.REJECTED}
    ),
    ApplicationStatus.HIRED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}

INITIAL_STATUS = ApplicationStatus.APPLIED


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ApplicantEntry:
    """
    Applicant entry stored in a job's applicant list.

    Corresponds to the `applicants` table; `position` preserves
    application order (oldest first).

    Attributes:
        job_id: Job the candidate applied to
        candidate_id: User id of the candidate
        status: Current pipeline status
        position: Insertion order within the job (None before persisting)
        applied_at: When the application was admitted
        updated_at: Last status change
    """

    job_id: str
    candidate_id: str
    status: ApplicationStatus = INITIAL_STATUS
    position: Optional[int] = None
    applied_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate and normalize entry data."""
        if not self.job_id:
            raise ValueError("job_id is required")
        if not self.candidate_id:
            raise ValueError("candidate_id is required")

        # Convert string status to enum if needed
        if isinstance(self.status, str):
            self.status = ApplicationStatus(self.status)

    @property
    def is_terminal(self) -> bool:
        """Check if the candidate has been hired or rejected."""
        return self.status.is_terminal

    def to_dict(self) -> dict:
        """Convert to dictionary for database storage."""
        return {
            "job_id": self.job_id,
            "candidate_id": self.candidate_id,
            "status": self.status.value,
            "applied_at": self.applied_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ApplicantEntry":
        """Create ApplicantEntry from dictionary (database row)."""
        return cls(
            job_id=data["job_id"],
            candidate_id=data["candidate_id"],
            status=ApplicationStatus(data["status"]),
            position=data.get("position"),
            applied_at=_parse_timestamp(data["applied_at"]),
            updated_at=_parse_timestamp(data["updated_at"]),
        )


def _parse_timestamp(value) -> datetime:
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value
