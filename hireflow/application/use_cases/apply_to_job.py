"""
Apply to Job Use Case - Application admission.

A job seeker is added to a job's applicant list at most once. The
duplicate check and the append happen in one conditional write in the
store, so concurrent applications from the same candidate cannot both
succeed.
"""

import logging
from typing import Optional

from hireflow.application.interfaces import HiringStorePort
from hireflow.domain.entities import UserRole
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


class ApplyToJobUseCase:
    """
    Use case for a job seeker applying to a job.

    1. Require the job seeker role
    2. Require an existing, non-deleted job
    3. Require the candidate to be a registered job seeker
    4. Insert the applicant entry unless one already exists
    """

    def __init__(
        self,
        store: HiringStorePort,
        guard: Optional[JobAuthorizationGuard] = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            store: Hiring store.
            guard: Authorization guard (default instance if omitted).
        """
        self.store = store
        self.guard = guard or JobAuthorizationGuard()

    async def execute(self, user: AuthenticatedUser, job_id: str) -> HiringResult:
        """
        Apply ``user`` to ``job_id``.

        Returns:
            APPLIED, ALREADY_APPLIED, JOB_NOT_FOUND, UNAUTHORIZED,
            CANDIDATE_NOT_ELIGIBLE, VALIDATION_ERROR or STORAGE_FAILED.
        """
        decision = self.guard.authorize(user, None, UserRole.JOB_SEEKER)
        if not decision.allowed:
            logger.info(f"Apply denied for user {user.id}: {decision.reason.value}")
            return from_denial(decision)

        if not job_id:
            return validation_error("jobId must not be empty.")

        try:
            job = await self.store.get_job(job_id)
            if job is None or not job.is_open:
                return job_not_found()

            candidate = await self.store.get_user(user.id)
            if candidate is None or candidate.role != UserRole.JOB_SEEKER:
                logger.info(f"Candidate {user.id} is not a registered job seeker")
                return HiringResult(
                    OperationResult.CANDIDATE_NOT_ELIGIBLE, "Candidate doesn't exist."
                )

            inserted = await self.store.add_applicant(job_id, user.id)
        except StorageError as e:
            logger.error(f"Apply failed for job {job_id}: {e.message}")
            return storage_failed(e.message)

        if not inserted:
            logger.info(f"Candidate {user.id} already applied to job {job_id}")
            return HiringResult(OperationResult.ALREADY_APPLIED, "Already applied.", job=job)

        logger.info(f"Candidate {user.id} applied to job {job_id}")
        return HiringResult(OperationResult.APPLIED, "Applied successfully", job=job)
