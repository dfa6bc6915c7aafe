"""
Command Executor.
Runs literal and prepared (qmark) statements against an open connection.

run_query / run_update raise ExecutionError; the execute_* functions log the failure
together with the SQL text and return a sentinel (None cursor, -1 row count) instead.
"""
import logging
from typing import Any, Iterable, Optional

# --- Third Party Libraries ---
from sqlalchemy.engine import Connection, CursorResult
from sqlalchemy.exc import SQLAlchemyError

from db_errors import ExecutionError
from db_models import QueryDescriptor


# --- Logging ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


# --- Raising API ---
def run_query(conn: Connection, query: QueryDescriptor) -> CursorResult:
    """Executes a read-only statement and returns its cursor."""
    bind_values = query.bind_values()
    logger.debug(f"Executing query with {len(bind_values)} bound parameter(s): {query.sql}")
    try:
        return conn.exec_driver_sql(query.sql, bind_values or None)
    except SQLAlchemyError as e:
        raise ExecutionError(str(e), sql=query.sql) from e
    except (OverflowError, ValueError) as e:
        # sqlite3 raises these while binding and SQLAlchemy does not wrap them
        raise ExecutionError(f"Parameter bind error: {e}", sql=query.sql) from e


def run_update(conn: Connection, query: QueryDescriptor) -> int:
    """Executes a mutating statement, commits it and returns the affected row count."""
    bind_values = query.bind_values()
    logger.debug(f"Executing update with {len(bind_values)} bound parameter(s): {query.sql}")
    try:
        result = conn.exec_driver_sql(query.sql, bind_values or None)
        conn.commit()
        return result.rowcount
    except SQLAlchemyError as e:
        _rollback_quietly(conn)
        raise ExecutionError(str(e), sql=query.sql) from e
    except (OverflowError, ValueError) as e:
        _rollback_quietly(conn)
        raise ExecutionError(f"Parameter bind error: {e}", sql=query.sql) from e


def _rollback_quietly(conn: Connection):
    try:
        conn.rollback()
    except SQLAlchemyError as e:
        logger.debug(f"Rollback after failed update also failed: {e}")


def _log_failure(label: str, error: ExecutionError, sql: str):
    logger.error(f"{label}: {error}")
    logger.error(f"Query: {sql}")


# --- Sentinel API ---
def execute_query(conn: Connection, query: str) -> Optional[CursorResult]:
    """Runs a SELECT without parameters. Returns None on failure."""
    try:
        return run_query(conn, QueryDescriptor(sql=query))
    except ExecutionError as e:
        _log_failure("Query execution error", e, query)
        return None


def execute_update(conn: Connection, query: str) -> int:
    """Runs an INSERT, UPDATE or DELETE without parameters. Returns -1 on failure."""
    try:
        return run_update(conn, QueryDescriptor(sql=query))
    except ExecutionError as e:
        _log_failure("Update execution error", e, query)
        return -1


def execute_prepared_query(conn: Connection, query: str, params: Optional[Iterable[Any]] = None) -> Optional[CursorResult]:
    """
    Binds params positionally (text, integer, float, date or None) and runs the SELECT.
    An unsupported parameter type fails the call before any SQL is sent. Returns None on failure.
    """
    try:
        descriptor = QueryDescriptor.build(query, params)
        return run_query(conn, descriptor)
    except ExecutionError as e:
        _log_failure("Prepared query error", e, query)
        return None


def execute_prepared_update(conn: Connection, query: str, params: Optional[Iterable[Any]] = None) -> int:
    """Same binding rules as execute_prepared_query, for mutating statements. Returns -1 on failure."""
    try:
        descriptor = QueryDescriptor.build(query, params)
        return run_update(conn, descriptor)
    except ExecutionError as e:
        _log_failure("Prepared update error", e, query)
        return -1
