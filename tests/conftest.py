"""
Shared fixtures for the HireFlow test suite.

Async code is driven with asyncio.run() inside plain pytest tests; each
test opens its own SQLite file under tmp_path.
"""

import asyncio
from types import SimpleNamespace

import pytest

from hireflow.config.settings import Settings
from hireflow.domain.entities import Job, User, UserRole
from hireflow.domain.value_objects import AuthenticatedUser, DeliveryResult, Notification
from hireflow.application.interfaces import NotificationPort


class FailingNotifier(NotificationPort):
    """Dispatcher that always reports a delivery failure."""

    def __init__(self, reason: str = "smtp unavailable") -> None:
        self.reason = reason
        self.attempts: list[Notification] = []

    async def send(self, notification: Notification) -> DeliveryResult:
        self.attempts.append(notification)
        return DeliveryResult.failure(self.reason)


class RaisingNotifier(NotificationPort):
    """Dispatcher that breaks its contract and raises."""

    async def send(self, notification: Notification) -> DeliveryResult:
        raise ConnectionError("relay refused connection")


class SlowNotifier(NotificationPort):
    """Dispatcher that never answers in time."""

    async def send(self, notification: Notification) -> DeliveryResult:
        await asyncio.sleep(5)
        return DeliveryResult.success()


def as_caller(user: User) -> AuthenticatedUser:
    return AuthenticatedUser(id=user.id, role=user.role, email=user.email)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Create test settings backed by a temporary data dir."""
    return Settings(
        data_dir=tmp_path,
        notification_sender="jobs@hireflow.test",
        notification_timeout=1.0,
        applicants_page_size=0,
        token_max_age=0,
    )


@pytest.fixture
def seed():
    """Async helper that stores two recruiters, two seekers and one job."""

    async def _seed(store) -> SimpleNamespace:
        recruiter = User(id="rec-1", name="Rita Recruiter", email="rita@corp.test", role=UserRole.RECRUITER)
        other_recruiter = User(id="rec-2", name="Omar Other", email="omar@corp.test", role=UserRole.RECRUITER)
        alice = User(id="seek-a", name="Alice", email="alice@mail.test", role=UserRole.JOB_SEEKER)
        bob = User(id="seek-b", name="Bob", email="bob@mail.test", role=UserRole.JOB_SEEKER)
        for user in (recruiter, other_recruiter, alice, bob):
            await store.save_user(user)

        job = Job(
            id="job-1",
            title="Backend Developer",
            description="Build hiring pipelines",
            posted_by=recruiter.id,
            skills=["Python", "SQL"],
            locations=["Lisbon"],
            vacancies=2,
        )
        await store.save_job(job)

        return SimpleNamespace(
            job=job,
            recruiter=as_caller(recruiter),
            other_recruiter=as_caller(other_recruiter),
            alice=as_caller(alice),
            bob=as_caller(bob),
        )

    return _seed


@pytest.fixture
def failing_notifier() -> FailingNotifier:
    return FailingNotifier()


@pytest.fixture
def raising_notifier() -> RaisingNotifier:
    return RaisingNotifier()


@pytest.fixture
def slow_notifier() -> SlowNotifier:
    return SlowNotifier()
