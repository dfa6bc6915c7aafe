import logging

import db_connect
from db_connect import connect, disconnect
from main import GamesQueryDemo
from main_schema import SchemaQueryDemo


class TestGamesQueryDemo:

    def test_runs_all_queries_and_disconnects(self, games_db, capsys, caplog):
        demo = GamesQueryDemo(games_db)

        with caplog.at_level(logging.INFO):
            demo.start()

        out = capsys.readouterr().out
        assert "/* QUERY 1: Simple SELECT Query" in out
        assert "/* QUERY 2: JOIN Query - Players, PlayerGames and Games" in out
        assert "/* QUERY 3: Prepared Statement Query - Games by Genre and Release Date" in out
        assert "All table content" in out
        assert "Players' Scores by Game" in out
        assert "Action-Adventure Games Released After 1985" in out
        assert "Total rows: 5" in out
        assert "Total rows: 4" in out
        assert "Total rows: 1" in out

        assert demo.conn is None
        assert "Connection to SQLite database closed." in caplog.text

    def test_each_query_returns_its_row_count(self, games_db):
        demo = GamesQueryDemo(games_db)

        demo.conn = connect(games_db)
        try:
            assert demo.execute_simple_select_query() == 5
            assert demo.execute_join_query() == 4
            assert demo.execute_prepared_statement_query() == 1
        finally:
            disconnect(demo.conn)

    def test_missing_database_runs_nothing(self, tmp_path, capsys, caplog):
        demo = GamesQueryDemo(tmp_path / "missing.sqlite")

        with caplog.at_level(logging.ERROR):
            demo.start()

        assert "QUERY 1" not in capsys.readouterr().out
        assert "Failed to connect to the database" in caplog.text


class TestSchemaQueryDemo:

    def test_run(self, games_db, capsys):
        assert SchemaQueryDemo(games_db).run() is True

        out = capsys.readouterr().out
        assert "===== DATABASE SCHEMA =====" in out
        assert "Query 1: Simple SELECT" in out
        assert "Game ID\t\tGame Name\t\tRelease Date\t\tGenre" in out
        assert "Query 2: JOIN Query" in out
        assert "Executed prepared statement query: SELECT * FROM Games WHERE Genre = ? AND ReleaseDate > ?" in out
        assert "Results: 1 rows returned" in out

    def test_missing_database_after_absolute_retry(self, tmp_path, caplog):
        with caplog.at_level(logging.INFO):
            assert SchemaQueryDemo(tmp_path / "missing.sqlite").run() is False

        assert "Trying with absolute path..." in caplog.text
        assert "Failed to connect to the database. Exiting application." in caplog.text

    def test_missing_driver_aborts(self, games_db, monkeypatch, caplog):
        monkeypatch.setattr(db_connect, "DB_DRIVER", "nosuchdb+nodriver")

        with caplog.at_level(logging.ERROR):
            assert SchemaQueryDemo(games_db).run() is False
        assert "SQLite driver not available" in caplog.text
