"""
List Applicants Use Case - Read-only projection of a job's applicant list.
"""

import logging
from typing import Optional

from hireflow.application.interfaces import HiringStorePort
from hireflow.domain.entities import UserRole
from hireflow.domain.services import JobAuthorizationGuard
from hireflow.domain.value_objects import (
    ApplicantView,
    AuthenticatedUser,
    CandidateProfile,
)
from hireflow.infrastructure.storage import StorageError

from .results import HiringResult, OperationResult, from_denial, storage_failed, validation_error


logger = logging.getLogger(__name__)


class ListApplicantsUseCase:
    """Returns a job's applicants in application order, oldest first."""

    def __init__(
        self,
        store: HiringStorePort,
        default_limit: int = 0,
        guard: Optional[JobAuthorizationGuard] = None,
    ) -> None:
        """
        Args:
            store: Hiring store.
            default_limit: Page size when the caller gives none (0 = all).
            guard: Authorization guard (default instance if omitted).
        """
        self.store = store
        self.default_limit = default_limit
        self.guard = guard or JobAuthorizationGuard()

    async def execute(
        self,
        user: AuthenticatedUser,
        job_id: str,
        limit: Optional[int] = None,
        skip: int = 0,
    ) -> HiringResult:
        """List applicants of ``job_id``; only the owning recruiter may look."""
        decision = self.guard.authorize(user, None, UserRole.RECRUITER)
        if not decision.allowed:
            return from_denial(decision)

        if not job_id:
            return validation_error("jobId must not be empty")
        if (limit is not None and limit < 0) or skip < 0:
            return validation_error("limit and skip must not be negative")

        try:
            job = await self.store.get_job(job_id)
            decision = self.guard.authorize(
                user, job, UserRole.RECRUITER, require_ownership=True
            )
            if not decision.allowed:
                return from_denial(decision)

            entries = await self.store.get_applicants(
                job_id,
                limit=self.default_limit if limit is None else limit,
                skip=skip,
            )

            views = []
            for entry in entries:
                candidate = await self.store.get_user(entry.candidate_id)
                if candidate is not None:
                    profile = CandidateProfile.from_user(candidate)
                else:
                    # Entry without a user row; show what we know
                    profile = CandidateProfile(
                        id=entry.candidate_id,
                        name="",
                        email="",
                        role=UserRole.JOB_SEEKER.value,
                    )
                views.append(ApplicantView(entry=entry, candidate=profile))
        except StorageError as e:
            logger.error(f"Listing applicants of job {job_id} failed: {e.message}")
            return storage_failed(e.message)

        return HiringResult(OperationResult.SUCCESS, "Success.", job=job, applicants=views)
