"""
Advance Applicant Use Case - Status transition engine.

Moves one applicant along applied -> interviewing -> hired | rejected.
Every move is a compare-and-set on (job, candidate, expected status): if
the entry is not at the transition's source status, nothing changes and
the caller gets CANDIDATE_NOT_ELIGIBLE. The same answer is given for a
candidate who never applied or is unknown.

After a committed move the candidate is notified. Notification is not
part of the state change: a failed or timed-out dispatch is reported as
NOTIFICATION_FAILED and the new status stays.
"""

import asyncio
import logging
from datetime import date, time
from typing import Optional

from hireflow.application.interfaces import HiringStorePort, NotificationPort
from hireflow.domain.entities import UserRole
from hireflow.domain.services import JobAuthorizationGuard
from hireflow.domain.value_objects import (
    SCHEDULE_INTERVIEW,
    SEND_OFFER,
    SEND_REGRET,
    AuthenticatedUser,
    Notification,
    Transition,
)
from hireflow.infrastructure.storage import StorageError

from .results import (
    HiringResult,
    OperationResult,
    from_denial,
    storage_failed,
    validation_error,
)


logger = logging.getLogger(__name__)

INTERVIEW_DATE_FORMAT = "%d/%m/%Y"
INTERVIEW_TIME_FORMAT = "%I:%M %p"


class AdvanceApplicantUseCase:
    """
    Use case for recruiter-driven status transitions.

    Only the recruiter who posted the job may move its applicants; any
    other recruiter is told the job does not exist.
    """

    SUCCESS_MESSAGES = {
        SCHEDULE_INTERVIEW.name: "Interview scheduled.",
        SEND_OFFER.name: "Offer Letter Sent.",
        SEND_REGRET.name: "Regret Letter Sent.",
    }

    def __init__(
        self,
        store: HiringStorePort,
        notifier: NotificationPort,
        sender: str,
        notification_timeout: float = 10.0,
        guard: Optional[JobAuthorizationGuard] = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            store: Hiring store.
            notifier: Candidate notification dispatcher.
            sender: From address for notifications.
            notification_timeout: Seconds to wait for the dispatcher.
            guard: Authorization guard (default instance if omitted).
        """
        self.store = store
        self.notifier = notifier
        self.sender = sender
        self.notification_timeout = notification_timeout
        self.guard = guard or JobAuthorizationGuard()

    async def execute(
        self,
        user: AuthenticatedUser,
        job_id: str,
        candidate_id: str,
        transition: Transition,
        message: str,
        subject_context: Optional[dict[str, str]] = None,
    ) -> HiringResult:
        """
        Apply ``transition`` to ``candidate_id`` within ``job_id``.

        Returns:
            SUCCESS, UNAUTHORIZED, JOB_NOT_FOUND, CANDIDATE_NOT_ELIGIBLE,
            NOTIFICATION_FAILED, VALIDATION_ERROR or STORAGE_FAILED.
        """
        decision = self.guard.authorize(user, None, UserRole.RECRUITER)
        if not decision.allowed:
            logger.info(f"{transition.name} denied for user {user.id}: {decision.reason.value}")
            return from_denial(decision)

        if not job_id:
            return validation_error("jobId must not be empty.")
        if not candidate_id:
            return validation_error("candidateId must not be empty.")
        if not message or not message.strip():
            return validation_error("message must not be empty.")

        # Subject is rendered before the write so a bad context changes nothing
        try:
            subject = transition.render_subject(**(subject_context or {}))
        except (KeyError, IndexError) as e:
            return validation_error(f"Missing subject detail for {transition.name}: {e}")

        try:
            job = await self.store.get_job(job_id)
            decision = self.guard.authorize(
                user, job, UserRole.RECRUITER, require_ownership=True
            )
            if not decision.allowed:
                logger.info(f"{transition.name} on job {job_id} masked as not found for {user.id}")
                return from_denial(decision)

            candidate = await self.store.get_user(candidate_id)
            if candidate is None:
                return self._not_eligible(transition, job_id, candidate_id)

            updated = await self.store.compare_and_set_status(
                job_id, candidate_id, transition.source, transition.target
            )
        except StorageError as e:
            logger.error(f"{transition.name} failed for job {job_id}: {e.message}")
            return storage_failed(e.message)

        if not updated:
            return self._not_eligible(transition, job_id, candidate_id)

        logger.info(
            f"{transition.name}: candidate {candidate_id} on job {job_id} "
            f"{transition.source.value} -> {transition.target.value}"
        )

        notification = Notification(
            sender=self.sender,
            recipient=candidate.email,
            subject=subject,
            body=message,
        )
        reason = await self._dispatch(notification)
        if reason is not None:
            return HiringResult(
                OperationResult.NOTIFICATION_FAILED,
                f"Status updated but notification failed: {reason}",
                job=job,
            )

        return HiringResult(
            OperationResult.SUCCESS,
            self.SUCCESS_MESSAGES.get(transition.name, "Status updated."),
            job=job,
        )

    async def schedule_interview(
        self,
        user: AuthenticatedUser,
        job_id: str,
        candidate_id: str,
        interview_date: date | str,
        interview_time: time | str,
        message: str,
    ) -> HiringResult:
        """Move an applicant from applied to interviewing."""
        # Role comes before input validation, as in execute()
        decision = self.guard.authorize(user, None, UserRole.RECRUITER)
        if not decision.allowed:
            return from_denial(decision)

        try:
            when_date = _as_date(interview_date)
            when_time = _as_time(interview_time)
        except (TypeError, ValueError):
            return validation_error("interviewDate/interviewTime must be ISO formatted.")

        context = {
            "date": when_date.strftime(INTERVIEW_DATE_FORMAT),
            "time": when_time.strftime(INTERVIEW_TIME_FORMAT),
        }
        return await self.execute(
            user, job_id, candidate_id, SCHEDULE_INTERVIEW, message, context
        )

    async def send_offer(
        self,
        user: AuthenticatedUser,
        job_id: str,
        candidate_id: str,
        message: str,
    ) -> HiringResult:
        """Move an applicant from interviewing to hired."""
        return await self.execute(user, job_id, candidate_id, SEND_OFFER, message)

    async def send_regret(
        self,
        user: AuthenticatedUser,
        job_id: str,
        candidate_id: str,
        message: str,
    ) -> HiringResult:
        """Move an applicant from interviewing to rejected."""
        return await self.execute(user, job_id, candidate_id, SEND_REGRET, message)

    async def _dispatch(self, notification: Notification) -> Optional[str]:
        """Send ``notification``; returns the failure reason, or None if delivered."""
        try:
            outcome = await asyncio.wait_for(
                self.notifier.send(notification),
                timeout=self.notification_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Notification to {notification.recipient} timed out")
            return "timed out"
        except Exception as e:
            logger.warning(f"Notification to {notification.recipient} raised: {e}")
            return str(e) or type(e).__name__

        if not outcome.ok:
            logger.warning(f"Notification to {notification.recipient} failed: {outcome.reason}")
            return outcome.reason or "delivery failed"
        return None

    def _not_eligible(self, transition: Transition, job_id: str, candidate_id: str) -> HiringResult:
        logger.info(
            f"{transition.name}: candidate {candidate_id} on job {job_id} "
            f"is not at {transition.source.value}"
        )
        return HiringResult(OperationResult.CANDIDATE_NOT_ELIGIBLE, "Unable to find candidate.")


def _as_date(value: date | str) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _as_time(value: time | str) -> time:
    if isinstance(value, time):
        return value
    return time.fromisoformat(value)
