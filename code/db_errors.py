"""
Error taxonomy for the connection, command and formatting layers.
The raising APIs propagate these; the sentinel APIs log them and return None / -1 / False.
"""
from typing import Optional


class DatabaseError(Exception):
    """Base class for every failure raised by this project."""


class DatabaseNotFound(DatabaseError):
    """The database file does not exist at the given path."""

    def __init__(self, path, working_dir):
        self.path = path
        self.working_dir = working_dir
        super().__init__(f"Database file does not exist: {path} (working directory: {working_dir})")


class DriverUnavailable(DatabaseError):
    """The SQLAlchemy dialect or its DBAPI module could not be loaded."""


class ConnectionFailed(DatabaseError):
    """Opening the connection failed for any other reason."""


class ExecutionError(DatabaseError):
    """A query, update or parameter bind failed."""

    def __init__(self, message: str, sql: Optional[str] = None):
        self.sql = sql
        super().__init__(message)


class UnsupportedParameterError(ExecutionError, TypeError):
    """A bound value is not text, integer, float, date or None."""
