"""
Operation results returned by every hiring use case.

Use cases never raise across their boundary; each outcome, including
storage faults, is reported as a HiringResult.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from hireflow.domain.entities import Job
from hireflow.domain.services import AccessDecision, DenialReason
from hireflow.domain.value_objects import ApplicantView


class OperationResult(Enum):
    """Outcome of a hiring operation."""
    APPLIED = "applied"
    CREATED = "created"
    SUCCESS = "success"
    ALREADY_APPLIED = "already_applied"
    UNAUTHORIZED = "unauthorized"
    JOB_NOT_FOUND = "job_not_found"
    CANDIDATE_NOT_ELIGIBLE = "candidate_not_eligible"
    NOTIFICATION_FAILED = "notification_failed"
    VALIDATION_ERROR = "validation_error"
    STORAGE_FAILED = "storage_failed"


SUCCESSFUL_RESULTS = frozenset(
    {OperationResult.APPLIED, OperationResult.CREATED, OperationResult.SUCCESS}
)


@dataclass
class HiringResult:
    """Detailed result of a hiring operation."""
    result: OperationResult
    message: str = ""
    job: Optional[Job] = None
    applicants: list[ApplicantView] = field(default_factory=list)
    jobs: list[Job] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.result in SUCCESSFUL_RESULTS


def unauthorized() -> HiringResult:
    return HiringResult(OperationResult.UNAUTHORIZED, "Invalid Permission.")


def job_not_found() -> HiringResult:
    return HiringResult(OperationResult.JOB_NOT_FOUND, "Job not found.")


def validation_error(message: str) -> HiringResult:
    return HiringResult(OperationResult.VALIDATION_ERROR, message)


def storage_failed(message: str) -> HiringResult:
    return HiringResult(OperationResult.STORAGE_FAILED, message or "Operation Failed.")


def from_denial(decision: AccessDecision) -> HiringResult:
    """Map a guard denial onto the caller-visible result."""
    if decision.reason == DenialReason.UNAUTHORIZED:
        return unauthorized()
    return job_not_found()
