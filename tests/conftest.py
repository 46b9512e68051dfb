"""Shared pytest fixtures for NBA Query tests."""

import sqlite3

import duckdb
import pytest

from nba_query.data.store import DuckDBStore, SQLiteStore


PLAYERS = [
    (1, "Stephen Curry"),
    (2, "Seth Curry"),
    (3, "LeBron James"),
    (4, "Bronny James"),
    (5, "Kevin Durant"),
    (6, "Kevin Love"),
    (7, "Kevin Garnett"),
    (8, "Kevin Martin"),
    (9, "Kevin McHale"),
    (10, "Kevin Porter"),
    (11, "Kevin Porter Jr."),
    (12, "Jayson Tatum"),
]

BOX_SCORE_COLUMNS = (
    "game_id", "player_id", "player_name", "team_abbr", "opponent_abbr",
    "game_date", "season", "season_type",
    "MIN", "PTS", "FGM", "FGA", "FG_PCT", "FG3M", "FG3A", "FG3_PCT",
    "FTM", "FTA", "FT_PCT", "REB", "AST", "STL", "BLK", "TOV",
)


def box(game_id, player_id, team, opp, game_date, season_type, pts, fg_pct=50.0, fg3_pct=40.0):
    """One box-score row with fixed filler for the stats tests don't check."""
    name = dict(PLAYERS)[player_id]
    return (
        game_id, player_id, name, team, opp,
        game_date, int(game_date[:4]), season_type,
        34.0, pts, 10, 20, fg_pct, 4, 10, fg3_pct,
        5, 6, 83.3, 5, 6, 1, 0, 3,
    )


BOX_SCORES = [
    # Stephen Curry: seven games against Boston, newest last
    box("g01", 1, "GSW", "BOS", "2015-02-01", "Regular Season", 22),
    box("g02", 1, "GSW", "CLE", "2016-06-10", "Playoffs", 38),
    box("g03", 1, "GSW", "BOS", "2017-03-05", "Regular Season", 18),
    box("g04", 1, "GSW", "HOU", "2018-05-20", "Playoffs", 28),
    box("g05", 1, "GSW", "BOS", "2019-01-10", "Regular Season", 35),
    box("g06", 1, "GSW", "LAL", "2020-01-15", "Regular Season", 26),
    box("g07", 1, "GSW", "BOS", "2021-04-01", "Regular Season", 25),
    box("g08", 1, "GSW", "BOS", "2022-06-16", "Playoffs", 40),
    box("g09", 1, "GSW", "BOS", "2023-11-20", "Regular Season", 20),
    box("g10", 1, "GSW", "BKN", "2024-02-05", "Regular Season", 37),
    box("g11", 1, "GSW", "BOS", "2024-03-10", "Regular Season", 30),
    # LeBron James: four playoff games, two regular season
    box("g20", 3, "CLE", "NJN", "2009-11-10", "Regular Season", 34, fg_pct=55.0),
    box("g21", 3, "MIA", "OKC", "2012-06-21", "Playoffs", 26, fg_pct=48.0),
    box("g22", 3, "CLE", "GSW", "2016-06-19", "Playoffs", 27, fg_pct=38.0),
    box("g23", 3, "CLE", "GSW", "2016-12-25", "Regular Season", 31, fg_pct=60.0),
    box("g24", 3, "CLE", "BOS", "2018-05-27", "Playoffs", 35, fg_pct=52.0),
    box("g25", 3, "LAL", "MIA", "2020-10-11", "Playoffs", 28, fg_pct=50.0),
]

PLAYERS_DDL = "CREATE TABLE players(player_id INTEGER PRIMARY KEY, player_name TEXT NOT NULL)"

BOX_SCORES_DDL = """
CREATE TABLE box_scores(
    game_id TEXT, player_id INTEGER, player_name TEXT,
    team_abbr TEXT, opponent_abbr TEXT, game_date TEXT,
    season INTEGER, season_type TEXT,
    "MIN" DOUBLE, PTS DOUBLE, FGM DOUBLE, FGA DOUBLE, FG_PCT DOUBLE,
    FG3M DOUBLE, FG3A DOUBLE, FG3_PCT DOUBLE, FTM DOUBLE, FTA DOUBLE, FT_PCT DOUBLE,
    REB DOUBLE, AST DOUBLE, STL DOUBLE, BLK DOUBLE, TOV DOUBLE
)
"""


def _populate(conn, box_scores_ddl=BOX_SCORES_DDL, columns=BOX_SCORE_COLUMNS, rows=BOX_SCORES):
    conn.execute(PLAYERS_DDL)
    conn.executemany("INSERT INTO players VALUES (?, ?)", PLAYERS)
    if box_scores_ddl:
        conn.execute(box_scores_ddl)
        quoted = ", ".join(f'"{c}"' for c in columns)
        marks = ", ".join("?" for _ in columns)
        conn.executemany(f"INSERT INTO box_scores ({quoted}) VALUES ({marks})", rows)


def _sqlite_db(path, **kwargs):
    conn = sqlite3.connect(path)
    try:
        _populate(conn, **kwargs)
        conn.commit()
    finally:
        conn.close()
    return SQLiteStore(path)


@pytest.fixture
def sqlite_store(tmp_path):
    """SQLite serving database with the full box_scores schema."""
    return _sqlite_db(str(tmp_path / "nba.sqlite"))


@pytest.fixture
def duckdb_store(tmp_path):
    """DuckDB warehouse with the same tables and rows."""
    path = str(tmp_path / "warehouse.duckdb")
    conn = duckdb.connect(path)
    try:
        _populate(conn)
    finally:
        conn.close()
    return DuckDBStore(path)


@pytest.fixture
def no_season_type_store(tmp_path):
    """SQLite database whose box_scores has no season-type column at all."""
    columns = tuple(c for c in BOX_SCORE_COLUMNS if c not in ("season", "season_type"))
    ddl = BOX_SCORES_DDL.replace("season INTEGER, season_type TEXT,", "")
    rows = [r[:6] + r[8:] for r in BOX_SCORES]
    return _sqlite_db(
        str(tmp_path / "no_season_type.sqlite"),
        box_scores_ddl=ddl,
        columns=columns,
        rows=rows,
    )


@pytest.fixture
def players_only_store(tmp_path):
    """SQLite database missing the box_scores table."""
    return _sqlite_db(str(tmp_path / "players_only.sqlite"), box_scores_ddl=None)
