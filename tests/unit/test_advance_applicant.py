"""
Unit tests for the status transition engine.
"""

import asyncio
from datetime import date, time

import pytest

from hireflow.application.use_cases import (
    AdvanceApplicantUseCase,
    HiringService,
    OperationResult,
)
from hireflow.domain.entities import ApplicationStatus
from hireflow.domain.value_objects import SCHEDULE_INTERVIEW
from hireflow.infrastructure.notifications import LoggingNotifier
from hireflow.infrastructure.storage import SQLiteAdapter


def run_with_service(settings, seed, body, notifier=None):
    """Open a store, seed it, and run ``body(service, env, store, notifier)``."""
    notifier = notifier or LoggingNotifier()

    async def scenario():
        async with SQLiteAdapter(settings.database_path) as store:
            env = await seed(store)
            service = HiringService(store, notifier, settings)
            return await body(service, env, store, notifier)

    return asyncio.run(scenario())


async def status_of(store, job_id, candidate_id):
    entry = await store.get_applicant(job_id, candidate_id)
    return entry.status if entry else None


async def to_interview(service, env):
    await service.apply(env.alice, env.job.id)
    return await service.schedule_interview(
        env.recruiter, env.job.id, env.alice.id, "2026-10-20", "14:30", "See you soon"
    )


class TestPipeline:
    """The happy path and forward-only moves."""

    def test_full_pipeline(self, settings, seed):
        async def body(service, env, store, notifier):
            steps = []
            await service.apply(env.alice, env.job.id)
            steps.append(await status_of(store, env.job.id, env.alice.id))

            interview = await service.schedule_interview(
                env.recruiter, env.job.id, env.alice.id,
                date(2026, 10, 20), time(14, 30), "Bring your portfolio",
            )
            steps.append(await status_of(store, env.job.id, env.alice.id))

            offer = await service.hire(env.recruiter, env.job.id, env.alice.id, "Welcome aboard")
            steps.append(await status_of(store, env.job.id, env.alice.id))

            late_regret = await service.reject(env.recruiter, env.job.id, env.alice.id, "Sorry")
            steps.append(await status_of(store, env.job.id, env.alice.id))
            return interview, offer, late_regret, steps, notifier.sent

        interview, offer, late_regret, steps, sent = run_with_service(settings, seed, body)

        assert interview.result == OperationResult.SUCCESS
        assert interview.message == "Interview scheduled."
        assert offer.result == OperationResult.SUCCESS
        assert offer.message == "Offer Letter Sent."
        assert late_regret.result == OperationResult.CANDIDATE_NOT_ELIGIBLE
        assert steps == [
            ApplicationStatus.APPLIED,
            ApplicationStatus.INTERVIEWING,
            ApplicationStatus.HIRED,
            ApplicationStatus.HIRED,
        ]
        assert [n.subject for n in sent] == [
            "Scheduled Interview on 20/10/2026 at 02:30 PM",
            "Offer Letter",
        ]
        assert all(n.recipient == "alice@mail.test" for n in sent)
        assert all(n.sender == "jobs@hireflow.test" for n in sent)
        assert sent[1].body == "Welcome aboard"

    def test_regret_after_interview(self, settings, seed):
        async def body(service, env, store, notifier):
            await to_interview(service, env)
            result = await service.send_regret(env.recruiter, env.job.id, env.alice.id, "Not this time")
            return result, await status_of(store, env.job.id, env.alice.id), notifier.sent[-1]

        result, status, last = run_with_service(settings, seed, body)

        assert result.result == OperationResult.SUCCESS
        assert status == ApplicationStatus.REJECTED
        assert last.subject == "Regret Letter"

    @pytest.mark.parametrize("operation", ["send_offer", "send_regret"])
    def test_cannot_skip_interview(self, settings, seed, operation):
        async def body(service, env, store, notifier):
            await service.apply(env.alice, env.job.id)
            result = await getattr(service, operation)(env.recruiter, env.job.id, env.alice.id, "msg")
            return result, await status_of(store, env.job.id, env.alice.id), notifier.sent

        result, status, sent = run_with_service(settings, seed, body)

        assert result.result == OperationResult.CANDIDATE_NOT_ELIGIBLE
        assert status == ApplicationStatus.APPLIED
        assert sent == []

    def test_interview_twice(self, settings, seed):
        async def body(service, env, store, notifier):
            await to_interview(service, env)
            return await service.schedule_interview(
                env.recruiter, env.job.id, env.alice.id, "2026-10-21", "09:00", "Again?"
            )

        assert run_with_service(settings, seed, body).result == OperationResult.CANDIDATE_NOT_ELIGIBLE

    def test_candidate_never_applied(self, settings, seed):
        async def body(service, env, store, notifier):
            return await service.schedule_interview(
                env.recruiter, env.job.id, env.bob.id, "2026-10-20", "10:00", "Hi"
            )

        assert run_with_service(settings, seed, body).result == OperationResult.CANDIDATE_NOT_ELIGIBLE

    def test_unknown_candidate_looks_the_same(self, settings, seed):
        async def body(service, env, store, notifier):
            unknown = await service.send_offer(env.recruiter, env.job.id, "ghost", "Hi")
            await service.apply(env.bob, env.job.id)
            wrong_stage = await service.send_offer(env.recruiter, env.job.id, env.bob.id, "Hi")
            return unknown, wrong_stage

        unknown, wrong_stage = run_with_service(settings, seed, body)

        assert unknown.result == wrong_stage.result == OperationResult.CANDIDATE_NOT_ELIGIBLE
        assert unknown.message == wrong_stage.message

    def test_entry_without_user_row_is_not_advanced(self, settings, seed):
        async def body(service, env, store, notifier):
            await store.add_applicant(env.job.id, "seek-c")
            result = await service.schedule_interview(
                env.recruiter, env.job.id, "seek-c", "2026-10-20", "10:00", "Hi"
            )
            return result, await status_of(store, env.job.id, "seek-c"), notifier.sent

        result, status, sent = run_with_service(settings, seed, body)

        assert result.result == OperationResult.CANDIDATE_NOT_ELIGIBLE
        assert status == ApplicationStatus.APPLIED
        assert sent == []


class TestAuthorization:
    """Role and ownership gating."""

    @pytest.mark.parametrize("operation", ["send_offer", "send_regret"])
    def test_job_seeker_is_unauthorized(self, settings, seed, operation):
        async def body(service, env, store, notifier):
            on_real_job = await getattr(service, operation)(env.alice, env.job.id, env.alice.id, "msg")
            on_missing_job = await getattr(service, operation)(env.alice, "nope", env.alice.id, "msg")
            return on_real_job, on_missing_job

        on_real_job, on_missing_job = run_with_service(settings, seed, body)

        assert on_real_job.result == OperationResult.UNAUTHORIZED
        assert on_missing_job.result == OperationResult.UNAUTHORIZED

    def test_job_seeker_cannot_schedule_interview(self, settings, seed):
        async def body(service, env, store, notifier):
            return await service.advance_to_interview(
                env.alice, env.job.id, env.alice.id, "not-a-date", "14:30", "msg"
            )

        assert run_with_service(settings, seed, body).result == OperationResult.UNAUTHORIZED

    def test_non_owner_masked_as_not_found(self, settings, seed):
        async def body(service, env, store, notifier):
            await service.apply(env.alice, env.job.id)
            foreign = await service.schedule_interview(
                env.other_recruiter, env.job.id, env.alice.id, "2026-10-20", "10:00", "Hi"
            )
            missing = await service.schedule_interview(
                env.recruiter, "no-such-job", env.alice.id, "2026-10-20", "10:00", "Hi"
            )
            return foreign, missing, await status_of(store, env.job.id, env.alice.id)

        foreign, missing, status = run_with_service(settings, seed, body)

        assert foreign.result == OperationResult.JOB_NOT_FOUND
        assert (foreign.result, foreign.message) == (missing.result, missing.message)
        assert status == ApplicationStatus.APPLIED


class TestValidation:
    """Malformed inputs."""

    def test_empty_message(self, settings, seed):
        async def body(service, env, store, notifier):
            await service.apply(env.alice, env.job.id)
            return await service.send_offer(env.recruiter, env.job.id, env.alice.id, "   ")

        assert run_with_service(settings, seed, body).result == OperationResult.VALIDATION_ERROR

    def test_bad_interview_date(self, settings, seed):
        async def body(service, env, store, notifier):
            await service.apply(env.alice, env.job.id)
            result = await service.schedule_interview(
                env.recruiter, env.job.id, env.alice.id, "20/10/2026", "14:30", "Hi"
            )
            return result, await status_of(store, env.job.id, env.alice.id)

        result, status = run_with_service(settings, seed, body)

        assert result.result == OperationResult.VALIDATION_ERROR
        assert status == ApplicationStatus.APPLIED

    @pytest.mark.parametrize("context", [None, {}, {"date": "20/10/2026"}])
    def test_missing_subject_details_change_nothing(self, settings, seed, context):
        async def body(service, env, store, notifier):
            await service.apply(env.alice, env.job.id)
            engine = AdvanceApplicantUseCase(store, notifier, sender="jobs@hireflow.test")
            result = await engine.execute(
                env.recruiter, env.job.id, env.alice.id, SCHEDULE_INTERVIEW, "Hi", context
            )
            return result, await status_of(store, env.job.id, env.alice.id), notifier.sent

        result, status, sent = run_with_service(settings, seed, body)

        assert result.result == OperationResult.VALIDATION_ERROR
        assert status == ApplicationStatus.APPLIED
        assert sent == []

    def test_execute_with_full_subject_details(self, settings, seed):
        async def body(service, env, store, notifier):
            await service.apply(env.alice, env.job.id)
            engine = AdvanceApplicantUseCase(store, notifier, sender="jobs@hireflow.test")
            result = await engine.execute(
                env.recruiter, env.job.id, env.alice.id, SCHEDULE_INTERVIEW, "Hi",
                {"date": "20/10/2026", "time": "09:00 AM"},
            )
            return result, notifier.sent

        result, sent = run_with_service(settings, seed, body)

        assert result.result == OperationResult.SUCCESS
        assert [n.subject for n in sent] == ["Scheduled Interview on 20/10/2026 at 09:00 AM"]


class TestNotifications:
    """Notification failures never undo a committed transition."""

    def test_failed_delivery_keeps_status(self, settings, seed, failing_notifier):
        async def body(service, env, store, notifier):
            await service.apply(env.alice, env.job.id)
            interview = await service.schedule_interview(
                env.recruiter, env.job.id, env.alice.id, "2026-10-20", "14:30", "Hi"
            )
            hire = await service.hire(env.recruiter, env.job.id, env.alice.id, "Welcome")
            listing = await service.list_applicants(env.recruiter, env.job.id)
            return interview, hire, listing

        interview, hire, listing = run_with_service(settings, seed, body, failing_notifier)

        assert interview.result == OperationResult.NOTIFICATION_FAILED
        assert hire.result == OperationResult.NOTIFICATION_FAILED
        assert "smtp unavailable" in hire.message
        assert [view.status for view in listing.applicants] == [ApplicationStatus.HIRED]
        assert len(failing_notifier.attempts) == 2

    def test_raising_dispatcher(self, settings, seed, raising_notifier):
        async def body(service, env, store, notifier):
            result = await to_interview(service, env)
            return result, await status_of(store, env.job.id, env.alice.id)

        result, status = run_with_service(settings, seed, body, raising_notifier)

        assert result.result == OperationResult.NOTIFICATION_FAILED
        assert status == ApplicationStatus.INTERVIEWING

    def test_dispatch_timeout(self, settings, seed, slow_notifier):
        async def scenario():
            async with SQLiteAdapter(settings.database_path) as store:
                env = await seed(store)
                await store.add_applicant(env.job.id, env.alice.id)
                engine = AdvanceApplicantUseCase(
                    store, slow_notifier, sender="jobs@hireflow.test", notification_timeout=0.05
                )
                result = await engine.schedule_interview(
                    env.recruiter, env.job.id, env.alice.id, "2026-10-20", "14:30", "Hi"
                )
                return result, await status_of(store, env.job.id, env.alice.id)

        result, status = asyncio.run(scenario())

        assert result.result == OperationResult.NOTIFICATION_FAILED
        assert "timed out" in result.message
        assert status == ApplicationStatus.INTERVIEWING


class TestConcurrentTransitions:
    """Racing recruiters."""

    def test_offer_and_regret_race(self, settings, seed):
        async def body(service, env, store, notifier):
            await to_interview(service, env)
            offer, regret = await asyncio.gather(
                service.send_offer(env.recruiter, env.job.id, env.alice.id, "Yes"),
                service.send_regret(env.recruiter, env.job.id, env.alice.id, "No"),
            )
            return offer, regret, await status_of(store, env.job.id, env.alice.id)

        offer, regret, status = run_with_service(settings, seed, body)
        outcomes = sorted([offer.result.value, regret.result.value])

        assert outcomes == sorted([
            OperationResult.SUCCESS.value,
            OperationResult.CANDIDATE_NOT_ELIGIBLE.value,
        ])
        winner = ApplicationStatus.HIRED if offer.ok else ApplicationStatus.REJECTED
        assert status == winner

    def test_double_offer(self, settings, seed):
        async def body(service, env, store, notifier):
            await to_interview(service, env)
            results = await asyncio.gather(
                *(service.send_offer(env.recruiter, env.job.id, env.alice.id, "Yes") for _ in range(2))
            )
            offers = [n for n in notifier.sent if n.subject == "Offer Letter"]
            return results, offers

        results, offers = run_with_service(settings, seed, body)

        assert [r.result for r in results].count(OperationResult.SUCCESS) == 1
        assert [r.result for r in results].count(OperationResult.CANDIDATE_NOT_ELIGIBLE) == 1
        assert len(offers) == 1

    def test_offer_and_regret_from_two_processes(self, settings, seed):
        """Two connections to one file stand in for two service processes."""

        async def scenario():
            async with SQLiteAdapter(settings.database_path) as first, \
                    SQLiteAdapter(settings.database_path) as second:
                env = await seed(first)
                notifiers = [LoggingNotifier(), LoggingNotifier()]
                here = HiringService(first, notifiers[0], settings)
                there = HiringService(second, notifiers[1], settings)
                await to_interview(here, env)

                offer, regret = await asyncio.gather(
                    here.send_offer(env.recruiter, env.job.id, env.alice.id, "Yes"),
                    there.send_regret(env.recruiter, env.job.id, env.alice.id, "No"),
                )
                letters = [n.subject for n in notifiers[0].sent + notifiers[1].sent]
                return offer, regret, await status_of(second, env.job.id, env.alice.id), letters

        offer, regret, status, letters = asyncio.run(scenario())

        assert [offer.ok, regret.ok].count(True) == 1
        loser = regret if offer.ok else offer
        assert loser.result == OperationResult.CANDIDATE_NOT_ELIGIBLE
        assert status == (ApplicationStatus.HIRED if offer.ok else ApplicationStatus.REJECTED)
        assert letters.count("Offer Letter") + letters.count("Regret Letter") == 1
