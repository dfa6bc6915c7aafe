"""
Demonstration program: connects to the sample games database and runs
a simple SELECT, a three-table JOIN and a prepared statement query.
"""
import logging
from pathlib import Path

from db_command import execute_prepared_query, execute_query
from db_connect import check_connection, connect, disconnect
from db_output_formatter import print_query_header, render_generic

# --- Configuration ---
try:
    from config import DB_FILE_SAMPLE
except ImportError:
    raise ImportError("Configuration file 'config.py' not found or missing required variables.")


# --- Logging ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


class GamesQueryDemo:
    """Runs the fixed query sequence against one database file."""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.conn = None

    def start(self):
        self.conn = connect(self.db_path)
        if self.conn is None:
            logger.error("Failed to connect to the database, no queries were run.")
            return

        try:
            print_query_header(1, "Simple SELECT Query")
            self.execute_simple_select_query()

            print_query_header(2, "JOIN Query - Players, PlayerGames and Games")
            self.execute_join_query()

            print_query_header(3, "Prepared Statement Query - Games by Genre and Release Date")
            self.execute_prepared_statement_query()
        finally:
            disconnect(self.conn)
            self.conn = None

    def execute_simple_select_query(self) -> int:
        query = "SELECT * FROM games"
        result = execute_query(self.conn, query)
        return render_generic("All table content", result)

    def execute_join_query(self) -> int:
        query = (
            "SELECT Players.FirstName, PlayerGames.Score, Games.GameName "
            "FROM Players "
            "JOIN PlayerGames ON Players.PlayerID = PlayerGames.PlayerID "
            "JOIN Games ON PlayerGames.GameID = Games.GameID "
            "ORDER BY Players.FirstName ASC"
        )
        result = execute_query(self.conn, query)
        return render_generic("Players' Scores by Game", result)

    def execute_prepared_statement_query(self) -> int:
        query = "SELECT * FROM Games WHERE Genre = ? AND ReleaseDate > ?"
        params = ("Action-Adventure", "1985-01-01")
        result = execute_prepared_query(self.conn, query, params)
        return render_generic("Action-Adventure Games Released After 1985", result)


def main():
    demo = GamesQueryDemo(DB_FILE_SAMPLE)

    print("\nTesting connection...\n")
    check_connection(DB_FILE_SAMPLE)

    print("\nRun queries...\n")
    demo.start()

    print("\nGoodbye...\n")


# --- Main execution ---
if __name__ == "__main__":
    main()
