from pathlib import Path

# --- Database Files ---
DB_FILE_SAMPLE = Path("db/sample_database.sqlite")
DB_FILE_SCHEMA_DEMO = Path("db/database.sqlite")

# --- Driver ---
# SQLAlchemy dialect+DBAPI name, used as the URL scheme: sqlite+pysqlite:///<path>
DB_DRIVER = "sqlite+pysqlite"

# --- Output Formatting ---
COLUMN_SEPARATOR = "\t\t"
NULL_TEXT = "NULL"
NO_RESULTS_TEXT = "No results were returned!"

# Internal SQLite bookkeeping tables, hidden from the schema listing
SKIPPED_TABLES = [
    "sqlite_sequence",
    # "sqlite_stat1",   # only present after ANALYZE, uncomment to hide it too
]
