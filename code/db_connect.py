"""
Connection Manager.
Opens and closes SQLAlchemy connections to a local SQLite file and checks that the driver loads.
"""
import logging
from pathlib import Path
from typing import Optional, Union

# --- Third Party Libraries ---
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.exc import NoSuchModuleError, SQLAlchemyError
from sqlalchemy.types import NullType

from db_errors import ConnectionFailed, DatabaseError, DatabaseNotFound, DriverUnavailable

# --- Configuration ---
try:
    from config import DB_DRIVER, SKIPPED_TABLES
except ImportError:
    raise ImportError("Configuration file 'config.py' not found or missing required variables.")


# --- Logging ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


def resolve_path(relative_path: Union[str, Path]) -> Path:
    """Joins the process working directory with a relative path. Does not touch the target."""
    return Path.cwd() / relative_path


def _load_driver():
    """Loads the dialect class and imports its DBAPI module, raising DriverUnavailable on failure."""
    try:
        dialect_cls = make_url(f"{DB_DRIVER}://").get_dialect()
        dialect_cls.import_dbapi()
    except (NoSuchModuleError, ImportError) as e:
        raise DriverUnavailable(f"SQLite driver '{DB_DRIVER}' not found: {e}") from e
    return dialect_cls


def is_driver_available() -> bool:
    """Checks that the driver loads without opening a connection."""
    try:
        _load_driver()
        return True
    except DriverUnavailable as e:
        logger.error(str(e))
        return False


def open_connection(db_path: Union[str, Path]) -> Connection:
    """
    Opens a connection to an existing SQLite file.
    Raises DatabaseNotFound, DriverUnavailable or ConnectionFailed.
    """
    db_path = Path(db_path)
    if not db_path.exists():
        raise DatabaseNotFound(db_path, Path.cwd())

    _load_driver()

    try:
        engine = create_engine(f"{DB_DRIVER}:///{db_path}")
        conn = engine.connect()
    except SQLAlchemyError as e:
        raise ConnectionFailed(f"SQLite connection error: {e}") from e

    logger.info(f"Connection to SQLite database established: {db_path}")
    return conn


def connect(db_path: Union[str, Path]) -> Optional[Connection]:
    """Opens a connection, logging any failure and returning None instead of raising."""
    try:
        return open_connection(db_path)
    except DatabaseNotFound as e:
        logger.error(f"Database file does not exist: {e.path}")
        logger.error(f"Working directory: {e.working_dir}")
    except DatabaseError as e:
        logger.error(str(e))
    return None


def disconnect(conn: Optional[Connection]) -> bool:
    """Closes the connection and disposes its engine. Returns False for a missing handle or a failed close."""
    if conn is None:
        return False

    try:
        engine = conn.engine
        conn.close()
        engine.dispose()
    except SQLAlchemyError as e:
        logger.error(f"Error closing SQLite connection: {e}")
        return False

    logger.info("Connection to SQLite database closed.")
    return True


def check_connection(db_path: Union[str, Path]) -> bool:
    """Opens a throwaway connection, logs the SQLite version and always closes it again."""
    logger.info("Testing SQLite connection...")
    conn = connect(db_path)
    if conn is None:
        logger.error("Test connection failed.")
        return False

    try:
        version = conn.exec_driver_sql("SELECT sqlite_version()").scalar()
        logger.info("Connection successful!")
        logger.info(f"SQLite Version: {version}")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Test connection failed: {e}")
        return False
    finally:
        disconnect(conn)


def _type_name(column_type) -> str:
    # Columns declared without a type reflect as NullType, which has no DDL name
    if isinstance(column_type, NullType):
        return ""
    return str(column_type)


def display_database_schema(conn: Connection) -> None:
    """Prints every user table with its columns, declared types and nullability."""
    try:
        inspector = inspect(conn)
        table_names = inspector.get_table_names()

        print("\n===== DATABASE SCHEMA =====")
        for table_name in table_names:
            if table_name in SKIPPED_TABLES:
                continue

            print(f"\nTABLE: {table_name}")
            print("---------------------")
            print("Column Name\t\tData Type\t\tNullable")
            print("-----------\t\t---------\t\t--------")

            for column in inspector.get_columns(table_name):
                nullable = "NULL" if column["nullable"] else "NOT NULL"
                print(f"{column['name']:<20}\t{_type_name(column['type']):<20}\t{nullable}")

        print("\n==========================")
    except SQLAlchemyError as e:
        logger.error(f"Error displaying schema: {e}")
