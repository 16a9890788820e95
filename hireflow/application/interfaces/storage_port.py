"""
Storage Port - Abstract interface for hiring data persistence.

Correctness of admission and transitions rests entirely on the two
conditional writes below being atomic in the backing store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hireflow.domain.entities import ApplicantEntry, ApplicationStatus, Job, User


class HiringStorePort(ABC):
    """Abstract interface for job, user and applicant storage."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize storage connection."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close storage connection."""
        pass

    # Users
    @abstractmethod
    async def save_user(self, user: User) -> None:
        """Insert or replace a user."""
        pass

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[User]:
        """Get a user by id."""
        pass

    # Jobs
    @abstractmethod
    async def save_job(self, job: Job) -> None:
        """Insert a new job."""
        pass

    @abstractmethod
    async def get_job(self, job_id: str) -> Optional[Job]:
        """Get a job by id, including soft-deleted ones."""
        pass

    @abstractmethod
    async def list_jobs(
        self,
        posted_by: Optional[str] = None,
        limit: int = 20,
        skip: int = 0,
    ) -> list[Job]:
        """List non-deleted jobs, newest first."""
        pass

    @abstractmethod
    async def soft_delete_job(self, job_id: str, posted_by: str) -> bool:
        """Flag a job as deleted if owned by ``posted_by``. Returns True if flagged."""
        pass

    # Applicants
    @abstractmethod
    async def add_applicant(self, job_id: str, candidate_id: str) -> bool:
        """
        Atomically append an ``applied`` entry unless one exists for the pair.

        Returns:
            True if inserted, False if the candidate was already listed.
        """
        pass

    @abstractmethod
    async def compare_and_set_status(
        self,
        job_id: str,
        candidate_id: str,
        expected: ApplicationStatus,
        new: ApplicationStatus,
    ) -> bool:
        """
        Atomically set the entry's status to ``new`` iff it equals ``expected``.

        Returns:
            True if exactly one entry was updated.
        """
        pass

    @abstractmethod
    async def get_applicants(
        self,
        job_id: str,
        limit: int = 0,
        skip: int = 0,
    ) -> list[ApplicantEntry]:
        """Get applicant entries in application order (limit 0 = all)."""
        pass

    @abstractmethod
    async def get_applicant(self, job_id: str, candidate_id: str) -> Optional[ApplicantEntry]:
        """Get one applicant entry."""
        pass
