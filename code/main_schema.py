"""
Second demonstration program, against db/database.sqlite.
Prints the schema first, lists the games with the fixed Games layout and only
counts the rows of the prepared statement query.
"""
import logging
from pathlib import Path

# --- Third Party Libraries ---
from sqlalchemy.exc import SQLAlchemyError

from db_command import execute_prepared_query, execute_query
from db_connect import connect, disconnect, display_database_schema, is_driver_available, resolve_path
from db_output_formatter import render_all_games, render_generic

# --- Configuration ---
try:
    from config import DB_FILE_SCHEMA_DEMO
except ImportError:
    raise ImportError("Configuration file 'config.py' not found or missing required variables.")


# --- Logging ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


class SchemaQueryDemo:

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.conn = None

    def run(self) -> bool:
        if not is_driver_available():
            logger.error("SQLite driver not available. Install SQLAlchemy with the pysqlite DBAPI.")
            return False

        self.conn = connect(self.db_path)
        if self.conn is None:
            logger.info("Trying with absolute path...")
            self.conn = connect(resolve_path(self.db_path))
            if self.conn is None:
                logger.error("Failed to connect to the database. Exiting application.")
                return False

        try:
            display_database_schema(self.conn)

            self.execute_simple_select_query()
            self.execute_join_query()
            self.execute_prepared_statement_query()
        finally:
            disconnect(self.conn)
            self.conn = None
        return True

    def execute_simple_select_query(self) -> int:
        result = execute_query(self.conn, "SELECT * FROM games")
        return render_all_games("Query 1: Simple SELECT", result)

    def execute_join_query(self) -> int:
        query = (
            "SELECT Players.FirstName, PlayerGames.Score, Games.GameName "
            "FROM Players "
            "JOIN PlayerGames ON Players.PlayerID = PlayerGames.PlayerID "
            "JOIN Games ON PlayerGames.GameID = Games.GameID "
            "ORDER BY Players.FirstName ASC"
        )
        result = execute_query(self.conn, query)
        return render_generic("Query 2: JOIN Query", result)

    def execute_prepared_statement_query(self) -> int:
        """Reports only how many rows matched; there is no dedicated layout for this query."""
        query = "SELECT * FROM Games WHERE Genre = ? AND ReleaseDate > ?"
        params = ("Action", "2020-01-01")

        result = execute_prepared_query(self.conn, query, params)
        print(f"\nExecuted prepared statement query: {query}")

        count = 0
        try:
            if result is not None:
                count = len(result.fetchall())
        except SQLAlchemyError as e:
            logger.error(f"Error processing result set: {e}")
        print(f"Results: {count} rows returned")
        return count


def main():
    SchemaQueryDemo(DB_FILE_SCHEMA_DEMO).run()


# --- Main execution ---
if __name__ == "__main__":
    main()
