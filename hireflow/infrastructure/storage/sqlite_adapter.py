"""
SQLite Adapter - Database operations for HireFlow.

Admission and status transitions are each a single SQL statement, so
SQLite's own write lock makes them atomic across coroutines, connections
and processes. No application-level lock is involved.
"""

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

import aiosqlite

from hireflow.application.interfaces import HiringStorePort
from hireflow.domain.entities import (
    INITIAL_STATUS,
    ApplicantEntry,
    ApplicationStatus,
    Job,
    User,
)
from .errors import create_db_error, create_not_initialized_error
from .migrations import run_migrations


logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SQLiteAdapter(HiringStorePort):
    """
    SQLite database adapter for HireFlow.

    Provides async CRUD operations for users, jobs and applicant lists.
    Can be used as an async context manager:

        async with SQLiteAdapter(path) as store:
            await store.add_applicant(job_id, candidate_id)
    """

    def __init__(self, db_path: Path, busy_timeout: float = 5.0) -> None:
        """
        Initialize the adapter.

        Args:
            db_path: Path to the SQLite database file.
            busy_timeout: Seconds to wait for another writer's lock.
        """
        self.db_path = db_path
        self.busy_timeout = busy_timeout
        self._connection: Optional[aiosqlite.Connection] = None

    async def initialize(self) -> None:
        """Initialize database and run migrations."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            run_migrations(self.db_path)

            # Autocommit: every statement is its own transaction
            self._connection = await aiosqlite.connect(
                str(self.db_path),
                timeout=self.busy_timeout,
                isolation_level=None,
            )
            self._connection.row_factory = aiosqlite.Row
            await self._connection.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as e:
            raise create_db_error(str(e), retryable=True, original_error=e) from e

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def conn(self) -> aiosqlite.Connection:
        """Get the active connection or raise error."""
        if not self._connection:
            raise create_not_initialized_error()
        return self._connection

    async def _execute(self, sql: str, params: Iterable[Any] = ()) -> aiosqlite.Cursor:
        """Run one statement, translating driver errors into StorageError."""
        try:
            return await self.conn.execute(sql, tuple(params))
        except sqlite3.OperationalError as e:
            # Locked/busy databases are transient
            raise create_db_error(str(e), retryable=True, original_error=e) from e
        except sqlite3.Error as e:
            raise create_db_error(str(e), retryable=False, original_error=e) from e

    async def _fetchone(self, sql: str, params: Iterable[Any] = ()) -> Optional[dict]:
        cursor = await self._execute(sql, params)
        row = await cursor.fetchone()
        return dict(row) if row else None

    async def _fetchall(self, sql: str, params: Iterable[Any] = ()) -> list[dict]:
        cursor = await self._execute(sql, params)
        rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    # ==================== User Operations ====================

    async def save_user(self, user: User) -> None:
        """Insert or replace a user."""
        data = user.to_dict()
        await self._execute(
            "INSERT OR REPLACE INTO users (id, name, email, role) VALUES (?, ?, ?, ?)",
            (data["id"], data["name"], data["email"], data["role"]),
        )

    async def get_user(self, user_id: str) -> Optional[User]:
        """Get a user by id."""
        row = await self._fetchone("SELECT * FROM users WHERE id = ?", (user_id,))
        return User.from_dict(row) if row else None

    # ==================== Job Operations ====================

    async def save_job(self, job: Job) -> None:
        """Insert a new job."""
        data = job.to_dict()
        await self._execute(
            """
            INSERT INTO jobs
            (id, title, description, posted_by, skills, locations, vacancies,
             is_deleted, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                data["id"],
                data["title"],
                data["description"],
                data["posted_by"],
                data["skills"],
                data["locations"],
                data["vacancies"],
                data["is_deleted"],
                data["created_at"],
                data["updated_at"],
            ),
        )

    async def get_job(self, job_id: str) -> Optional[Job]:
        """Get a job by id, including soft-deleted ones."""
        row = await self._fetchone("SELECT * FROM jobs WHERE id = ?", (job_id,))
        return Job.from_dict(row) if row else None

    async def list_jobs(
        self,
        posted_by: Optional[str] = None,
        limit: int = 20,
        skip: int = 0,
    ) -> list[Job]:
        """List non-deleted jobs, newest first."""
        query = "SELECT * FROM jobs WHERE is_deleted = 0"
        params: list[Any] = []

        if posted_by:
            query += " AND posted_by = ?"
            params.append(posted_by)

        query += " ORDER BY created_at DESC, rowid DESC LIMIT ? OFFSET ?"
        params.extend([limit, skip])

        rows = await self._fetchall(query, params)
        return [Job.from_dict(row) for row in rows]

    async def soft_delete_job(self, job_id: str, posted_by: str) -> bool:
        """Flag a job as deleted if owned by ``posted_by``."""
        cursor = await self._execute(
            """
            UPDATE jobs SET is_deleted = 1, updated_at = ?
            WHERE id = ? AND posted_by = ? AND is_deleted = 0
            """,
            (_now(), job_id, posted_by),
        )
        return cursor.rowcount == 1

    # ==================== Applicant Operations ====================

    async def add_applicant(self, job_id: str, candidate_id: str) -> bool:
        """
        Append an ``applied`` entry unless the candidate is already listed.

        The UNIQUE(job_id, candidate_id) constraint plus ON CONFLICT DO
        NOTHING makes check-and-insert a single atomic statement.
        """
        now = _now()
        cursor = await self._execute(
            """
            INSERT INTO applicants (job_id, candidate_id, status, applied_at, updated_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(job_id, candidate_id) DO NOTHING
            """,
            (job_id, candidate_id, INITIAL_STATUS.value, now, now),
        )
        return cursor.rowcount == 1

    async def compare_and_set_status(
        self,
        job_id: str,
        candidate_id: str,
        expected: ApplicationStatus,
        new: ApplicationStatus,
    ) -> bool:
        """Set the entry's status to ``new`` only if it currently equals ``expected``."""
        cursor = await self._execute(
            """
            UPDATE applicants SET status = ?, updated_at = ?
            WHERE job_id = ? AND candidate_id = ? AND status = ?
            """,
            (new.value, _now(), job_id, candidate_id, expected.value),
        )
        return cursor.rowcount == 1

    async def get_applicants(
        self,
        job_id: str,
        limit: int = 0,
        skip: int = 0,
    ) -> list[ApplicantEntry]:
        """Get applicant entries in application order (limit 0 = all)."""
        rows = await self._fetchall(
            """
            SELECT * FROM applicants WHERE job_id = ?
            ORDER BY position ASC LIMIT ? OFFSET ?
            """,
            (job_id, limit if limit > 0 else -1, skip),
        )
        return [ApplicantEntry.from_dict(row) for row in rows]

    async def get_applicant(self, job_id: str, candidate_id: str) -> Optional[ApplicantEntry]:
        """Get one applicant entry."""
        row = await self._fetchone(
            "SELECT * FROM applicants WHERE job_id = ? AND candidate_id = ?",
            (job_id, candidate_id),
        )
        return ApplicantEntry.from_dict(row) if row else None
