"""
Hiring Service - Facade over the hiring use cases.

This is the surface a transport (CLI, HTTP, ...) wraps. Every method takes
the caller as an explicit AuthenticatedUser and returns a HiringResult.
"""

from datetime import date, time
from typing import Iterable, Optional

from hireflow.application.interfaces import HiringStorePort, NotificationPort
from hireflow.config.settings import Settings
from hireflow.domain.services import JobAuthorizationGuard
from hireflow.domain.value_objects import AuthenticatedUser

from .advance_applicant import AdvanceApplicantUseCase
from .apply_to_job import ApplyToJobUseCase
from .list_applicants import ListApplicantsUseCase
from .manage_jobs import BrowseJobsUseCase, DeleteJobUseCase, PostJobUseCase
from .results import HiringResult


class HiringService:
    """Coordinates admission, transitions and queries for one store."""

    def __init__(
        self,
        store: HiringStorePort,
        notifier: NotificationPort,
        settings: Settings,
    ) -> None:
        """
        Initialize the service.

        Args:
            store: Initialized hiring store.
            notifier: Candidate notification dispatcher.
            settings: Application settings.
        """
        self.store = store
        self.notifier = notifier
        self.settings = settings

        guard = JobAuthorizationGuard()
        self._apply = ApplyToJobUseCase(store, guard)
        self._advance = AdvanceApplicantUseCase(
            store,
            notifier,
            sender=settings.notification_sender,
            notification_timeout=settings.notification_timeout,
            guard=guard,
        )
        self._list = ListApplicantsUseCase(store, settings.applicants_page_size, guard)
        self._post = PostJobUseCase(store, guard)
        self._delete = DeleteJobUseCase(store, guard)
        self._browse = BrowseJobsUseCase(store)

    async def apply(self, user: AuthenticatedUser, job_id: str) -> HiringResult:
        return await self._apply.execute(user, job_id)

    async def schedule_interview(
        self,
        user: AuthenticatedUser,
        job_id: str,
        candidate_id: str,
        interview_date: date | str,
        interview_time: time | str,
        message: str,
    ) -> HiringResult:
        return await self._advance.schedule_interview(
            user, job_id, candidate_id, interview_date, interview_time, message
        )

    async def send_offer(
        self, user: AuthenticatedUser, job_id: str, candidate_id: str, message: str
    ) -> HiringResult:
        return await self._advance.send_offer(user, job_id, candidate_id, message)

    async def send_regret(
        self, user: AuthenticatedUser, job_id: str, candidate_id: str, message: str
    ) -> HiringResult:
        return await self._advance.send_regret(user, job_id, candidate_id, message)

    # Pipeline vocabulary used by recruiters
    advance_to_interview = schedule_interview
    hire = send_offer
    reject = send_regret

    async def list_applicants(
        self,
        user: AuthenticatedUser,
        job_id: str,
        limit: Optional[int] = None,
        skip: int = 0,
    ) -> HiringResult:
        return await self._list.execute(user, job_id, limit, skip)

    async def post_job(
        self,
        user: AuthenticatedUser,
        title: str,
        description: str,
        skills: Iterable[str],
        locations: Iterable[str],
        vacancies: int,
    ) -> HiringResult:
        return await self._post.execute(user, title, description, skills, locations, vacancies)

    async def delete_job(self, user: AuthenticatedUser, job_id: str) -> HiringResult:
        return await self._delete.execute(user, job_id)

    async def list_jobs(
        self,
        user: AuthenticatedUser,
        posted_by: Optional[str] = None,
        limit: int = 20,
        skip: int = 0,
    ) -> HiringResult:
        return await self._browse.list_jobs(user, posted_by, limit, skip)

    async def get_job(self, user: AuthenticatedUser, job_id: str) -> HiringResult:
        return await self._browse.get_job(user, job_id)
