"""
Error model for the storage layer.

Provides structured error codes and sanitized error messages so database
internals (SQL text, filesystem paths) never reach callers.
"""

import re
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Structured error codes for storage faults."""
    DB_NOT_INITIALIZED = "DB_NOT_INITIALIZED"
    DB_ERROR = "DB_ERROR"


class StorageError(Exception):
    """Infrastructure fault raised by a store adapter."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        retryable: bool = False,
        original_error: Optional[Exception] = None
    ):
        """
        Initialize a storage error.

        Args:
            code: The error code
            message: Human-readable error message
            retryable: Whether the operation can be retried
            original_error: The original exception if this wraps another error
        """
        self.code = code
        self.message = message
        self.retryable = retryable
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary format."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "retryable": self.retryable
            }
        }


def sanitize_sql_error(error_msg: str) -> str:
    """
    Sanitize SQL error messages to remove sensitive details.

    Removes SQL fragments and absolute paths, and keeps only the first
    line of the message.

    Args:
        error_msg: The original error message

    Returns:
        Sanitized error message
    """
    sanitized = error_msg.split('\n')[0]
    sanitized = re.sub(r'SQL:.*', '', sanitized, flags=re.IGNORECASE)
    sanitized = re.sub(r'\b(SELECT|INSERT|UPDATE|DELETE)\b.*', '[SQL query]', sanitized, flags=re.IGNORECASE)
    sanitized = re.sub(r'/[^\s]+/', '[path]/', sanitized)
    return sanitized.strip()


def create_db_error(message: str, retryable: bool = False, original_error: Optional[Exception] = None) -> StorageError:
    """
    Create a database error.

    Args:
        message: Description of the database error
        retryable: Whether the operation can be retried
        original_error: The original exception

    Returns:
        StorageError with DB_ERROR code
    """
    return StorageError(
        code=ErrorCode.DB_ERROR,
        message=f"Database error: {sanitize_sql_error(message)}",
        retryable=retryable,
        original_error=original_error
    )


def create_not_initialized_error() -> StorageError:
    """Create the error raised when the store is used before initialize()."""
    return StorageError(
        code=ErrorCode.DB_NOT_INITIALIZED,
        message="Database not initialized. Call initialize() first.",
        retryable=False
    )
