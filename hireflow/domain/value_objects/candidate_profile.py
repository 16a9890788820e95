"""
CandidateProfile Value Object - Public fields of an applicant.
"""

from dataclasses import dataclass

from hireflow.domain.entities import ApplicantEntry, User


@dataclass(frozen=True)
class CandidateProfile:
    """Public projection of a candidate user shown to recruiters."""

    id: str
    name: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "CandidateProfile":
        return cls(id=user.id, name=user.name, email=user.email, role=user.role.value)


@dataclass(frozen=True)
class ApplicantView:
    """An applicant entry resolved to its candidate's public profile."""

    entry: ApplicantEntry
    candidate: CandidateProfile

    @property
    def status(self):
        return self.entry.status

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for display or serialization."""
        return {
            "candidate": {
                "id": self.candidate.id,
                "name": self.candidate.name,
                "email": self.candidate.email,
                "role": self.candidate.role,
            },
            "status": self.entry.status.value,
            "applied_at": self.entry.applied_at.isoformat(),
        }
