# Storage Package
from .errors import ErrorCode, StorageError
from .migrations import run_migrations
from .sqlite_adapter import SQLiteAdapter

__all__ = ["SQLiteAdapter", "run_migrations", "StorageError", "ErrorCode"]
