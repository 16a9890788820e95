"""
Job Authorization Guard - Role and ownership checks for job operations.

Shared by admission and the transition engine. Ownership failures are
reported as NOT_FOUND so a recruiter cannot discover jobs owned by
someone else; a missing job and a job owned by another recruiter look
the same to the caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hireflow.domain.entities import Job, UserRole
from hireflow.domain.value_objects import AuthenticatedUser


class DenialReason(str, Enum):
    """Why access was refused."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class AccessDecision:
    """Result of an authorization check."""

    allowed: bool
    reason: Optional[DenialReason] = None

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenialReason) -> "AccessDecision":
        return cls(allowed=False, reason=reason)


class JobAuthorizationGuard:
    """
    Pure predicate over (user, job).

    Role is always checked first, so a job seeker calling a recruiter
    operation gets UNAUTHORIZED regardless of whether the job exists.
    """

    def authorize(
        self,
        user: AuthenticatedUser,
        job: Optional[Job],
        required_role: UserRole,
        require_ownership: bool = False,
    ) -> AccessDecision:
        """
        Decide whether ``user`` may act on ``job``.

        Args:
            user: The authenticated caller.
            job: Target job, or None if it does not exist.
            required_role: Role the operation needs.
            require_ownership: Whether the caller must have posted the job.

        Returns:
            AccessDecision.allow() or a denial with its reason.
        """
        if not user.has_role(required_role):
            return AccessDecision.deny(DenialReason.UNAUTHORIZED)

        if require_ownership and (job is None or not job.is_owned_by(user.id)):
            return AccessDecision.deny(DenialReason.NOT_FOUND)

        return AccessDecision.allow()
