"""
HireFlow - Job posting and hiring workflow

Entry point: logging setup, component wiring and a small command line.

    python -m hireflow.main add-user "Rita Recruiter" rita@example.com recruiter
    python -m hireflow.main post-job --token T --title ... --description ... --location Lisbon
    python -m hireflow.main apply --token T JOB_ID
    python -m hireflow.main offer --token T JOB_ID CANDIDATE_ID --message "Welcome aboard"
"""

import argparse
import asyncio
import json
import logging
import sys
import uuid
from typing import Optional

from hireflow.application.interfaces import NotificationPort
from hireflow.application.use_cases import HiringResult, HiringService
from hireflow.config.settings import Settings, get_settings
from hireflow.domain.entities import Job, User, UserRole
from hireflow.domain.value_objects import AuthenticatedUser
from hireflow.infrastructure.notifications import LoggingNotifier, SMTPNotifier
from hireflow.infrastructure.security import CryptoService, TokenIdentityProvider
from hireflow.infrastructure.storage import SQLiteAdapter, StorageError


logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def create_notifier(settings: Settings) -> NotificationPort:
    """Real email when enabled, log-only otherwise."""
    if settings.notifications_enabled:
        return SMTPNotifier(settings)
    return LoggingNotifier()


def create_identity(settings: Settings) -> TokenIdentityProvider:
    crypto = CryptoService(settings.token_key_path)
    crypto.initialize()
    return TokenIdentityProvider(crypto, max_age=settings.token_max_age)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hireflow", description="Job posting and hiring workflow.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create or migrate the database.")

    add_user = sub.add_parser("add-user", help="Register a user and print a bearer token.")
    add_user.add_argument("name")
    add_user.add_argument("email")
    add_user.add_argument("role", choices=[r.value for r in UserRole])

    post = sub.add_parser("post-job", help="Post a job (recruiter).")
    post.add_argument("--token", required=True)
    post.add_argument("--title", required=True)
    post.add_argument("--description", required=True)
    post.add_argument("--skill", action="append", default=[], help="Repeatable.")
    post.add_argument("--location", action="append", default=[], help="Repeatable.")
    post.add_argument("--vacancies", type=int, default=1)

    delete = sub.add_parser("delete-job", help="Soft-delete a job (owner recruiter).")
    delete.add_argument("--token", required=True)
    delete.add_argument("job_id")

    jobs = sub.add_parser("jobs", help="List open jobs, newest first.")
    jobs.add_argument("--token", required=True)
    jobs.add_argument("--posted-by", default=None)
    jobs.add_argument("--limit", type=int, default=20)
    jobs.add_argument("--skip", type=int, default=0)

    job = sub.add_parser("job", help="Show one job.")
    job.add_argument("--token", required=True)
    job.add_argument("job_id")

    apply = sub.add_parser("apply", help="Apply to a job (job seeker).")
    apply.add_argument("--token", required=True)
    apply.add_argument("job_id")

    interview = sub.add_parser("schedule-interview", help="Move applied -> interviewing.")
    interview.add_argument("--token", required=True)
    interview.add_argument("job_id")
    interview.add_argument("candidate_id")
    interview.add_argument("--date", required=True, help="YYYY-MM-DD")
    interview.add_argument("--time", required=True, help="HH:MM")
    interview.add_argument("--message", required=True)

    for name, help_text in (
        ("offer", "Move interviewing -> hired."),
        ("regret", "Move interviewing -> rejected."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--token", required=True)
        cmd.add_argument("job_id")
        cmd.add_argument("candidate_id")
        cmd.add_argument("--message", required=True)

    applicants = sub.add_parser("applicants", help="List applicants (owner recruiter).")
    applicants.add_argument("--token", required=True)
    applicants.add_argument("job_id")
    applicants.add_argument("--limit", type=int, default=None)
    applicants.add_argument("--skip", type=int, default=0)

    return parser


def _job_payload(job: Job) -> dict:
    return {
        "id": job.id,
        "title": job.title,
        "description": job.description,
        "posted_by": job.posted_by,
        "skills": sorted(job.skills),
        "locations": job.locations,
        "vacancies": job.vacancies,
        "is_deleted": job.is_deleted,
        "created_at": job.created_at.isoformat(),
    }


def _print_result(result: HiringResult) -> int:
    payload: dict = {"result": result.result.value, "message": result.message}
    if result.job is not None:
        payload["job_id"] = result.job.id
        payload["job"] = _job_payload(result.job)
    if result.jobs:
        payload["jobs"] = [_job_payload(job) for job in result.jobs]
    if result.applicants:
        payload["applicants"] = [view.to_dict() for view in result.applicants]
    print(json.dumps(payload, indent=2))
    return 0 if result.ok else 1


async def run(args: argparse.Namespace, settings: Settings) -> int:
    identity = create_identity(settings)

    async with SQLiteAdapter(settings.database_path, settings.db_busy_timeout) as store:
        if args.command == "init-db":
            print(f"Database ready at {settings.database_path}")
            return 0

        if args.command == "add-user":
            user = User(id=uuid.uuid4().hex, name=args.name, email=args.email, role=UserRole(args.role))
            await store.save_user(user)
            print(json.dumps({"id": user.id, "token": identity.issue(user)}, indent=2))
            return 0

        caller: Optional[AuthenticatedUser] = identity.resolve(args.token)
        if caller is None:
            print(json.dumps({"result": "unauthorized", "message": "Invalid token."}))
            return 1

        service = HiringService(store, create_notifier(settings), settings)

        if args.command == "post-job":
            result = await service.post_job(
                caller, args.title, args.description, args.skill, args.location, args.vacancies
            )
        elif args.command == "delete-job":
            result = await service.delete_job(caller, args.job_id)
        elif args.command == "jobs":
            result = await service.list_jobs(caller, args.posted_by, args.limit, args.skip)
        elif args.command == "job":
            result = await service.get_job(caller, args.job_id)
        elif args.command == "apply":
            result = await service.apply(caller, args.job_id)
        elif args.command == "schedule-interview":
            result = await service.schedule_interview(
                caller, args.job_id, args.candidate_id, args.date, args.time, args.message
            )
        elif args.command == "offer":
            result = await service.send_offer(caller, args.job_id, args.candidate_id, args.message)
        elif args.command == "regret":
            result = await service.send_regret(caller, args.job_id, args.candidate_id, args.message)
        else:
            result = await service.list_applicants(caller, args.job_id, args.limit, args.skip)

        return _print_result(result)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)
    try:
        return asyncio.run(run(args, settings))
    except StorageError as e:
        logger.error(f"{args.command} failed: {e.message}")
        print(json.dumps(e.to_dict(), indent=2))
        return 1


if __name__ == "__main__":
    sys.exit(main())
