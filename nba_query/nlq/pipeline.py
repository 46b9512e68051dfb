# nba_query/nlq/pipeline.py
"""
Complete NLQ Pipeline Interface.

Public operations for free-text player stat questions:

- summarize:  "LeBron career playoffs FG%" -> one formatted answer
- list_games: same question -> per-game rows, most recent first
- suggest:    "cur" -> matching player names plus example questions

Each call parses, resolves the player, plans, executes and formats, holding
no state between calls.
"""

import asyncio
import logging
from typing import List, Optional

from ..api.entity_resolver import suggest_players
from ..api.errors import EmptyInputError
from ..api.models import GameList, Suggestions
from ..config import get_store
from ..data.store import TabularStore
from .executor import run_games, run_summary
from .parser import parse_input
from .planner import QueryPlan, plan_query
from .synthesizer import format_summary

logger = logging.getLogger(__name__)

DEFAULT_GAMES_LIMIT = 25


# ============================================================================
# MAIN PIPELINE
# ============================================================================


def _require_text(text: str) -> None:
    if not text or not text.strip():
        raise EmptyInputError()


async def _plan(text: str, store: TabularStore) -> QueryPlan:
    parsed = parse_input(text.strip())
    return await plan_query(parsed, store)


async def summarize(text: str, store: Optional[TabularStore] = None) -> str:
    """
    Answer a player stat question with a formatted summary.

    Args:
        text: Free-text question, e.g. "Stephen Curry vs Celtics last 5 games"
        store: Tabular store; defaults to the configured one

    Returns:
        Summary text, or the "No games found for ..." sentence when no rows
        match

    Raises:
        EmptyInputError: Blank question
        PlayerNotFoundError: No player matches the name in the question
        AmbiguousPlayerError: Several players match; carries the candidates
        QueryExecutionError: The store call failed
    """
    logger.info(f"Processing stats question: '{text}'")
    _require_text(text)
    store = store or get_store()
    plan = await _plan(text, store)
    stats = await run_summary(plan, store)
    return format_summary(plan.player.name, plan.context, stats, plan.parsed.stat_focus)


async def list_games(
    text: str, limit: int = DEFAULT_GAMES_LIMIT, store: Optional[TabularStore] = None
) -> GameList:
    """
    Per-game rows for a player stat question.

    Args:
        text: Free-text question
        limit: Row cap when the question has no "last N" window (max 400)
        store: Tabular store; defaults to the configured one

    Returns:
        GameList(player, rows, career)

    Raises:
        Same as summarize
    """
    logger.info(f"Listing games for: '{text}' (limit={limit})")
    _require_text(text)
    store = store or get_store()
    plan = await _plan(text, store)
    return await run_games(plan, store, limit)


def query_ideas(player_name: str) -> List[str]:
    """Example questions for a player, shown next to autocomplete results."""
    return [
        f"{player_name} career playoffs",
        f"{player_name} vs BOS last 10",
        f"{player_name} vs GSW playoffs",
        f"{player_name} since 2018",
    ]


async def suggest(prefix: str, store: Optional[TabularStore] = None) -> Suggestions:
    """
    Autocomplete player names and propose questions for the top match.

    Args:
        prefix: Partial player name
        store: Tabular store; defaults to the configured one

    Returns:
        Suggestions with up to 8 names; empty for a blank prefix
    """
    if not prefix or not prefix.strip():
        return Suggestions()

    store = store or get_store()
    players = await asyncio.to_thread(suggest_players, store, prefix)
    ideas = query_ideas(players[0]) if players else []
    return Suggestions(players=players, ideas=ideas)
