"""
Tests for player resolution and autocomplete.

Run with: pytest tests/test_entity_resolver.py -v
"""

import pytest

from nba_query.api.entity_resolver import (
    MAX_CANDIDATES,
    find_candidates,
    resolve_player,
    suggest_players,
)
from nba_query.api.errors import AmbiguousPlayerError, ErrorCode, PlayerNotFoundError


def test_exact_match_short_circuits(sqlite_store):
    # "Kevin Porter" also matches "Kevin Porter Jr." by tokens
    player = resolve_player(sqlite_store, "Kevin Porter")
    assert player.name == "Kevin Porter"
    assert player.id == 10


@pytest.mark.parametrize(
    "name,expected",
    [
        ("stephen curry", "Stephen Curry"),
        ("Steph", "Stephen Curry"),
        ("curry steph", "Stephen Curry"),
        ("bron", "LeBron James"),
        ("lebron", "LeBron James"),
        ("tatum", "Jayson Tatum"),
    ],
)
def test_fuzzy_single_match(sqlite_store, name, expected):
    assert resolve_player(sqlite_store, name).name == expected


def test_ambiguous_lists_candidates_in_name_order(sqlite_store):
    with pytest.raises(AmbiguousPlayerError) as exc_info:
        resolve_player(sqlite_store, "Curry")

    err = exc_info.value
    assert err.candidates == ["Seth Curry", "Stephen Curry"]
    assert err.code == ErrorCode.AMBIGUOUS_PLAYER
    assert "Try one of:" in err.message
    assert "  - Seth Curry" in err.message


def test_ambiguous_is_capped(sqlite_store):
    with pytest.raises(AmbiguousPlayerError) as exc_info:
        resolve_player(sqlite_store, "kd")

    candidates = exc_info.value.candidates
    assert len(candidates) == MAX_CANDIDATES
    assert candidates == sorted(candidates)
    assert "Kevin Porter Jr." not in candidates


def test_not_found(sqlite_store):
    with pytest.raises(PlayerNotFoundError) as exc_info:
        resolve_player(sqlite_store, "Wilt Chamberlain")

    assert exc_info.value.message == 'No player found matching "Wilt Chamberlain".'
    assert exc_info.value.user_correctable


def test_find_candidates_all_tokens_must_match(duckdb_store):
    names = [p.name for p in find_candidates(duckdb_store, "james lebron")]
    assert names == ["LeBron James"]
    assert find_candidates(duckdb_store, "   ") == []


def test_suggest_players(sqlite_store):
    assert suggest_players(sqlite_store, "CURR") == ["Seth Curry", "Stephen Curry"]
    assert suggest_players(sqlite_store, "  ") == []
    assert len(suggest_players(sqlite_store, "e")) == 8
