"""
Result Formatter.
Prints a cursor as tab-aligned text and returns the number of rows rendered (-1 when there is no cursor).
"""
import logging
from typing import Optional, Sequence

# --- Third Party Libraries ---
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import SQLAlchemyError

from db_models import GAMES_COLUMNS, ColumnSpec

# --- Configuration ---
try:
    from config import COLUMN_SEPARATOR, NO_RESULTS_TEXT, NULL_TEXT
except ImportError:
    raise ImportError("Configuration file 'config.py' not found or missing required variables.")


# --- Logging ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


def _format_value(value) -> str:
    return NULL_TEXT if value is None else str(value)


def _print_table_header(title: str, labels: Sequence[str]):
    print("")
    print(title)
    print("")
    print(COLUMN_SEPARATOR.join(labels))
    print(COLUMN_SEPARATOR.join("-" * len(label) for label in labels))


def render_generic(title: str, cursor: Optional[CursorResult]) -> int:
    """Renders any result using the column names reported by the cursor."""
    if cursor is None:
        print(NO_RESULTS_TEXT)
        return -1

    row_count = 0
    try:
        column_names = list(cursor.keys())
        _print_table_header(title, column_names)

        for row in cursor:
            row_count += 1
            print(COLUMN_SEPARATOR.join(_format_value(value) for value in row))

        print(f"\nTotal rows: {row_count}")
    except SQLAlchemyError as e:
        logger.error(f"Error displaying query results: {e}")

    return row_count


def render_fixed_schema(title: str, cursor: Optional[CursorResult], column_spec: Sequence[ColumnSpec]) -> int:
    """
    Renders a result with a known layout. Header labels come from column_spec,
    values are looked up by column name and coerced to each column's kind.
    """
    if cursor is None:
        print(NO_RESULTS_TEXT)
        return -1

    row_count = 0
    _print_table_header(title, [column.label for column in column_spec])

    try:
        for row in cursor:
            values = row._mapping
            line = COLUMN_SEPARATOR.join(
                _format_value(column.coerce(values[column.name])) for column in column_spec
            )
            row_count += 1
            print(line)

        print(f"\nTotal rows: {row_count}")
    except (SQLAlchemyError, KeyError, ValueError) as e:
        logger.error(f"Error displaying '{title}': {e}")

    return row_count


def render_all_games(title: str, cursor: Optional[CursorResult]) -> int:
    """Output of SELECT * FROM games with the fixed Games columns."""
    return render_fixed_schema(title, cursor, GAMES_COLUMNS)


# Aliases of render_generic, one per kind of query
render_aggregation = render_generic
render_subquery = render_generic
render_case_expression = render_generic
render_cte = render_generic
render_view = render_generic


def print_query_header(query_number: int, description: str):
    print("\n/*************************************************************************/")
    print(f"/* QUERY {query_number}: {description}")
    print("/*************************************************************************/")
