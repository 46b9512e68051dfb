# nba_query/api/entity_resolver.py
"""
Player resolution against the ``players`` table.

Resolves a free-text player name to exactly one stored player:
- Exact (case-sensitive) name match first
- Otherwise every normalized name token must appear in the stored name

Ambiguity is reported as a typed error carrying the candidates so the caller
can show a "try one of" menu.
"""

import logging
from typing import List

from ..data.store import TabularStore
from .errors import AmbiguousPlayerError, PlayerNotFoundError
from .models import Player
from .name_variations import normalize_name_tokens

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 6
MAX_SUGGESTIONS = 8


def _to_player(row) -> Player:
    return Player(id=row["player_id"], name=row["player_name"])


def find_candidates(store: TabularStore, name: str, limit: int = MAX_CANDIDATES) -> List[Player]:
    """
    Players whose name contains every normalized token of ``name``.

    Args:
        store: Tabular store holding the ``players`` table
        name: Raw player name ("steph curry")
        limit: Maximum candidates returned

    Returns:
        Up to ``limit`` players ordered by name
    """
    tokens = normalize_name_tokens(name)
    if not tokens:
        return []

    where = " AND ".join(f"lower(player_name) LIKE :t{i}" for i in range(len(tokens)))
    params = {f"t{i}": f"%{token}%" for i, token in enumerate(tokens)}
    params["limit"] = limit

    rows = store.fetch_all(
        f"""SELECT player_id, player_name
            FROM players
            WHERE {where}
            ORDER BY player_name
            LIMIT :limit""",
        params,
    )
    return [_to_player(row) for row in rows]


def resolve_player(store: TabularStore, name: str) -> Player:
    """
    Resolve a player name to exactly one stored player.

    Args:
        store: Tabular store holding the ``players`` table
        name: Player name as extracted from the query

    Returns:
        The matching Player

    Raises:
        PlayerNotFoundError: No stored player matches, even fuzzily
        AmbiguousPlayerError: Two or more fuzzy matches and no exact match
    """
    exact = store.fetch_one(
        "SELECT player_id, player_name FROM players WHERE player_name = :name LIMIT 1",
        {"name": name},
    )
    if exact:
        logger.debug(f"Exact player match for '{name}'")
        return _to_player(exact)

    candidates = find_candidates(store, name)

    if not candidates:
        raise PlayerNotFoundError(name)
    if len(candidates) == 1:
        logger.debug(f"Fuzzy player match '{name}' -> '{candidates[0].name}'")
        return candidates[0]

    logger.info(f"Ambiguous player '{name}': {len(candidates)} candidates")
    raise AmbiguousPlayerError(name, [c.name for c in candidates])


def suggest_players(store: TabularStore, query: str, limit: int = MAX_SUGGESTIONS) -> List[str]:
    """
    Autocomplete player names containing ``query`` (case-insensitive).

    Args:
        store: Tabular store holding the ``players`` table
        query: Partial name typed so far
        limit: Number of suggestions to return

    Returns:
        Player names ordered alphabetically; empty for a blank query
    """
    needle = query.strip().lower()
    if not needle:
        return []

    rows = store.fetch_all(
        """SELECT player_name
           FROM players
           WHERE lower(player_name) LIKE :needle
           ORDER BY player_name
           LIMIT :limit""",
        {"needle": f"%{needle}%", "limit": limit},
    )
    return [row["player_name"] for row in rows]
