"""
Job management use cases - posting and soft-deleting jobs.
"""

import logging
import uuid
from typing import Iterable, Optional

from hireflow.application.interfaces import HiringStorePort
from hireflow.domain.entities import Job, UserRole
from hireflow.domain.services import JobAuthorizationGuard
from hireflow.domain.value_objects import AuthenticatedUser
from hireflow.infrastructure.storage import StorageError

from .results import (
    HiringResult,
    OperationResult,
    from_denial,
    job_not_found,
    storage_failed,
    validation_error,
)


logger = logging.getLogger(__name__)


class PostJobUseCase:
    """Creates a job owned by the calling recruiter."""

    def __init__(
        self,
        store: HiringStorePort,
        guard: Optional[JobAuthorizationGuard] = None,
    ) -> None:
        self.store = store
        self.guard = guard or JobAuthorizationGuard()

    async def execute(
        self,
        user: AuthenticatedUser,
        title: str,
        description: str,
        skills: Iterable[str],
        locations: Iterable[str],
        vacancies: int,
    ) -> HiringResult:
        decision = self.guard.authorize(user, None, UserRole.RECRUITER)
        if not decision.allowed:
            return from_denial(decision)

        try:
            job = Job(
                id=uuid.uuid4().hex,
                title=(title or "").strip(),
                description=(description or "").strip(),
                posted_by=user.id,
                skills=list(skills),
                locations=[loc.strip() for loc in locations if loc.strip()],
                vacancies=vacancies,
            )
        except ValueError as e:
            return validation_error(f"Validation Error. {e}")

        try:
            await self.store.save_job(job)
        except StorageError as e:
            logger.error(f"Creating job failed: {e.message}")
            return storage_failed(e.message)

        logger.info(f"Recruiter {user.id} posted job {job.id} ({job.title})")
        return HiringResult(OperationResult.CREATED, "Job Created Successfully.", job=job)


class DeleteJobUseCase:
    """Soft-deletes a job; only its owner may do so."""

    def __init__(
        self,
        store: HiringStorePort,
        guard: Optional[JobAuthorizationGuard] = None,
    ) -> None:
        self.store = store
        self.guard = guard or JobAuthorizationGuard()

    async def execute(self, user: AuthenticatedUser, job_id: str) -> HiringResult:
        decision = self.guard.authorize(user, None, UserRole.RECRUITER)
        if not decision.allowed:
            return from_denial(decision)

        try:
            deleted = await self.store.soft_delete_job(job_id, user.id)
        except StorageError as e:
            logger.error(f"Deleting job {job_id} failed: {e.message}")
            return storage_failed(e.message)

        if not deleted:
            return job_not_found()

        logger.info(f"Recruiter {user.id} deleted job {job_id}")
        return HiringResult(OperationResult.SUCCESS, "Job deleted.")


class BrowseJobsUseCase:
    """Read-only job queries open to any authenticated user."""

    def __init__(self, store: HiringStorePort) -> None:
        self.store = store

    async def list_jobs(
        self,
        user: AuthenticatedUser,
        posted_by: Optional[str] = None,
        limit: int = 20,
        skip: int = 0,
    ) -> HiringResult:
        """Open jobs, newest first, optionally only those ``posted_by`` a recruiter."""
        if limit < 0 or skip < 0:
            return validation_error("limit and skip must not be negative")

        try:
            jobs = await self.store.list_jobs(posted_by=posted_by, limit=limit or 20, skip=skip)
        except StorageError as e:
            logger.error(f"Listing jobs failed: {e.message}")
            return storage_failed(e.message)

        return HiringResult(OperationResult.SUCCESS, "Operation success", jobs=jobs)

    async def get_job(self, user: AuthenticatedUser, job_id: str) -> HiringResult:
        """One job by id; a deleted job is only visible to its owner."""
        if not job_id:
            return validation_error("Id must not be empty.")

        try:
            job = await self.store.get_job(job_id)
        except StorageError as e:
            logger.error(f"Reading job {job_id} failed: {e.message}")
            return storage_failed(e.message)

        if job is None or (job.is_deleted and not job.is_owned_by(user.id)):
            return job_not_found()

        return HiringResult(OperationResult.SUCCESS, "Operation Succeed.", job=job)
