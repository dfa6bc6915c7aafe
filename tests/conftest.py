import logging
import sqlite3

import pytest

from db_connect import connect, disconnect


SCHEMA = """
CREATE TABLE Games (
    GameID INTEGER PRIMARY KEY AUTOINCREMENT,
    GameName TEXT NOT NULL,
    ReleaseDate DATE,
    Genre TEXT
);
CREATE TABLE Players (
    PlayerID INTEGER PRIMARY KEY AUTOINCREMENT,
    FirstName TEXT NOT NULL,
    LastName TEXT
);
CREATE TABLE PlayerGames (
    PlayerGameID INTEGER PRIMARY KEY AUTOINCREMENT,
    PlayerID INTEGER NOT NULL REFERENCES Players(PlayerID),
    GameID INTEGER NOT NULL REFERENCES Games(GameID),
    Score INTEGER
);
"""

GAMES = [
    (1, "The Legend of Zelda", "1986-02-21", "Action-Adventure"),
    (2, "Super Mario Bros.", "1985-09-13", "Platformer"),
    (3, "Ghostly Keep", "1984-06-01", "Action-Adventure"),
    (4, "Neon Drift", "2021-03-15", "Action"),
    (5, "Untitled Prototype", None, "Puzzle"),
]

PLAYERS = [
    (1, "Alice", "Smith"),
    (2, "Bob", "Jones"),
    (3, "Cara", "Doyle"),
]

PLAYER_GAMES = [
    (1, 1, 1, 5000),
    (2, 2, 2, 7200),
    (3, 1, 4, 1500),
    (4, 3, 5, None),
]


def pytest_configure(config):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


@pytest.fixture
def games_db(tmp_path):
    """A SQLite file with the Games / Players / PlayerGames schema and a few rows."""
    db_path = tmp_path / "sample_database.sqlite"
    conn = sqlite3.connect(db_path)
    try:
        conn.executescript(SCHEMA)
        conn.executemany("INSERT INTO Games VALUES (?, ?, ?, ?)", GAMES)
        conn.executemany("INSERT INTO Players VALUES (?, ?, ?)", PLAYERS)
        conn.executemany("INSERT INTO PlayerGames VALUES (?, ?, ?, ?)", PLAYER_GAMES)
        conn.commit()
    finally:
        conn.close()
    return db_path


@pytest.fixture
def conn(games_db):
    handle = connect(games_db)
    assert handle is not None
    yield handle
    disconnect(handle)
