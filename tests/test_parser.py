"""
Tests for the free-text question parser.

Run with: pytest tests/test_parser.py -v
"""

from datetime import date

import pytest

from nba_query.nlq.parser import (
    DEFAULT_WINDOW,
    MAX_WINDOW,
    ParsedQuery,
    detect_date_range,
    detect_opponent,
    detect_season_type,
    detect_stat_focus,
    detect_window,
    extract_player_name,
    parse_input,
)


# ============================================================================
# WINDOW
# ============================================================================


@pytest.mark.parametrize("n", [1, 2, 7, 25, 82, 399, 400])
def test_last_n_digits(n):
    parsed = parse_input(f"Curry last {n} games")
    assert parsed.window_size == n
    assert parsed.explicit_window is True


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Curry last 0", 1),
        ("Curry last 401", MAX_WINDOW),
        ("Curry last 99999 games", MAX_WINDOW),
    ],
)
def test_last_n_clamped(text, expected):
    assert parse_input(text).window_size == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("last five games", 5),
        ("last twelve", 12),
        ("last twenty five games", 25),
        ("last twenty-five", 25),
        ("last ninety ninety ninety ninety ninety", MAX_WINDOW),
    ],
)
def test_last_n_words(text, expected):
    assert detect_window(text) == (expected, True)


def test_last_unknown_word_falls_back_to_default():
    assert detect_window("last season") == (DEFAULT_WINDOW, False)


def test_default_window():
    parsed = parse_input("Stephen Curry")
    assert parsed.window_size == DEFAULT_WINDOW
    assert parsed.explicit_window is False
    assert not parsed.is_career


def test_career_overrides_last_n():
    assert detect_window("career last 5") == (None, False)
    parsed = parse_input("Curry career last 5")
    assert parsed.window_size is None
    assert parsed.is_career


# ============================================================================
# SEASON TYPE / STAT FOCUS
# ============================================================================


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Curry playoffs", "playoffs"),
        ("Curry playoff run", "playoffs"),
        ("Curry regular season", "regular"),
        ("Curry playoffs and regular season", "regular"),
        ("Curry last 10", None),
    ],
)
def test_season_type(text, expected):
    assert detect_season_type(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Curry 3P%", "fg3_pct"),
        ("Curry 3pt pct", "fg3_pct"),
        ("Curry three-point percentage", "fg3_pct"),
        ("Curry FG%", "fg_pct"),
        ("Curry field goal percentage", "fg_pct"),
        ("Curry FT%", "ft_pct"),
        ("Curry free throw pct", "ft_pct"),
        ("Curry points", "ppg"),
        ("Curry pts", "ppg"),
        ("Curry rebounds", "rpg"),
        ("Curry assists", "apg"),
        ("Curry steals", "spg"),
        ("Curry blocks", "bpg"),
        ("Curry turnovers", "tov"),
        ("Curry last 10", None),
    ],
)
def test_stat_focus(text, expected):
    assert detect_stat_focus(text) == expected


def test_three_point_beats_field_goal():
    assert detect_stat_focus("Curry 3P% and FG%") == "fg3_pct"


# ============================================================================
# OPPONENT
# ============================================================================


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Curry vs Celtics", ("BOS",)),
        ("Curry vs. Celtics last 3", ("BOS",)),
        ("Curry against the Lakers playoffs", ("LAL",)),
        ("Curry vs the Nets career", ("BKN", "NJN")),
        ("Curry vs Golden State since 2018", ("GSW",)),
        ("Curry vs Narnia", None),
        ("Curry last 3", None),
    ],
)
def test_detect_opponent(text, expected):
    assert detect_opponent(text) == expected


def test_unknown_opponent_does_not_fail_parse():
    parsed = parse_input("Curry vs Narnia last 3")
    assert parsed.opponent_codes is None
    assert parsed.player_name == "Curry"


# ============================================================================
# DATE RANGE
# ============================================================================


def test_since_year():
    assert detect_date_range("since 2018") == (date(2018, 1, 1), None)


def test_between_is_order_independent():
    expected = (date(2005, 1, 1), date(2010, 12, 31))
    assert detect_date_range("between 2005 and 2010") == expected
    assert detect_date_range("between 2010 and 2005") == expected


def test_date_range_clears_default_window():
    parsed = parse_input("Curry since 2018")
    assert parsed.window_size is None
    assert parsed.has_date_range
    assert not parsed.is_career


def test_explicit_window_survives_date_range():
    parsed = parse_input("Curry since 2018 last 20")
    assert parsed.window_size == 20
    assert parsed.date_from == date(2018, 1, 1)


def test_word_window_survives_date_range():
    parsed = parse_input("Curry since 2018 last twenty")
    assert parsed.window_size == 20


# ============================================================================
# PLAYER NAME
# ============================================================================


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Stephen Curry vs Celtics last 5 games", "Stephen Curry"),
        ("LeBron James career", "LeBron James"),
        ("Nikola Jokic playoffs", "Nikola Jokic"),
        ("Kobe Bryant since 2005", "Kobe Bryant"),
        ("Kobe Bryant between 2005 and 2010", "Kobe Bryant"),
        ("Curry points last 10", "Curry"),
        ("Curry field goal", "Curry"),
        ("Chris Paul", "Chris Paul"),
    ],
)
def test_extract_player_name(text, expected):
    assert extract_player_name(text) == expected


def test_parse_collapses_whitespace():
    parsed = parse_input("  Stephen    Curry   vs  Celtics ")
    assert parsed.player_name == "Stephen Curry"
    assert parsed.opponent_codes == ("BOS",)
    assert parsed.raw_query == "  Stephen    Curry   vs  Celtics "


def test_parse_is_deterministic():
    text = "LeBron career playoffs FG%"
    assert parse_input(text) == parse_input(text)


def test_to_dict():
    parsed = parse_input("Kevin Durant vs Nets between 2010 and 2012")
    result = parsed.to_dict()

    assert result["player_name"] == "Kevin Durant"
    assert result["opponent_codes"] == ["BKN", "NJN"]
    assert result["date_from"] == "2010-01-01"
    assert result["date_to"] == "2012-12-31"
    assert result["window_size"] is None
    assert isinstance(parsed, ParsedQuery)


def test_spelled_out_window_survives_date_range():
    parsed = parse_input("Curry last five since 2018")
    assert parsed.window_size == 5
    assert parsed.explicit_window is True
    assert parsed.date_from == date(2018, 1, 1)
