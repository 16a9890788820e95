"""
Database Migrations - Schema setup and versioning.
"""

import sqlite3
from pathlib import Path
from typing import Optional


SCHEMA_VERSION = 1

SCHEMA_SQL = """
-- Recruiters and job seekers
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL DEFAULT '',
    email TEXT NOT NULL,
    role TEXT NOT NULL CHECK(role IN ('recruiter', 'job_seeker'))
);

-- Posted jobs (soft-deleted, never removed)
CREATE TABLE IF NOT EXISTS jobs (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    description TEXT NOT NULL,
    posted_by TEXT NOT NULL,
    skills TEXT NOT NULL DEFAULT '[]',
    locations TEXT NOT NULL DEFAULT '[]',
    vacancies INTEGER NOT NULL DEFAULT 1,
    is_deleted INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

-- Applicant list: one row per (job, candidate), position = application order
CREATE TABLE IF NOT EXISTS applicants (
    position INTEGER PRIMARY KEY AUTOINCREMENT,
    job_id TEXT NOT NULL REFERENCES jobs(id),
    candidate_id TEXT NOT NULL,
    status TEXT NOT NULL CHECK(status IN ('applied', 'interviewing', 'hired', 'rejected')),
    applied_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    UNIQUE(job_id, candidate_id)
);

-- Schema version tracking
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY
);

-- Indexes for performance
CREATE INDEX IF NOT EXISTS idx_jobs_posted_by ON jobs(posted_by);
CREATE INDEX IF NOT EXISTS idx_jobs_created_at ON jobs(created_at);
CREATE INDEX IF NOT EXISTS idx_applicants_job_id ON applicants(job_id);
"""


def run_migrations(db_path: Path, conn: Optional[sqlite3.Connection] = None) -> None:
    """
    Run database migrations to ensure schema is up to date.

    Args:
        db_path: Path to the SQLite database file.
        conn: Optional existing connection to use.
    """
    should_close = conn is None
    if conn is None:
        conn = sqlite3.connect(str(db_path))

    try:
        cursor = conn.cursor()

        # WAL lets readers proceed while another process writes
        cursor.execute("PRAGMA journal_mode=WAL")

        cursor.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
        )
        version_table_exists = cursor.fetchone() is not None

        current_version = 0
        if version_table_exists:
            cursor.execute("SELECT MAX(version) FROM schema_version")
            row = cursor.fetchone()
            current_version = row[0] if row and row[0] else 0

        if current_version < SCHEMA_VERSION:
            cursor.executescript(SCHEMA_SQL)

            cursor.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (SCHEMA_VERSION,)
            )
            conn.commit()

    finally:
        if should_close:
            conn.close()
