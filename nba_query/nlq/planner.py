# nba_query/nlq/planner.py
"""
Query Planner for player stat questions.

Turns a ParsedQuery plus the resolved player into a QueryPlan: one ordered
predicate list and parameter bag shared by the aggregate and per-game
queries, and a short context fragment describing the filters.

Season-type filtering adapts to the fact table: the planner probes which of
the known season-type columns exist and filters on those only.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from ..api.entity_resolver import resolve_player
from ..api.models import Player
from ..data.store import TabularStore
from .parser import ParsedQuery

logger = logging.getLogger(__name__)

BOX_SCORES_TABLE = "box_scores"

# Columns that may carry "Regular Season" / "Playoffs", in probe order
SEASON_TYPE_COLUMNS = ("season_type", "type", "season", "stage")


# ============================================================================
# QUERY PLAN
# ============================================================================


@dataclass
class QueryPlan:
    """Filters for one request, ready to render as SQL."""

    player: Player
    parsed: ParsedQuery
    predicates: List[str] = field(default_factory=list)
    params: Dict[str, Any] = field(default_factory=dict)
    context: str = ""

    @property
    def window_size(self) -> Optional[int]:
        return self.parsed.window_size

    @property
    def career(self) -> bool:
        return self.parsed.is_career

    @property
    def where_clause(self) -> str:
        return " AND ".join(self.predicates)

    def selection_sql(self) -> str:
        """
        Row selection shared by the summary and detail queries.

        Window mode keeps only the most recent ``:n`` games; career and
        date-range mode keep every matching row.
        """
        sql = f"SELECT * FROM {BOX_SCORES_TABLE} WHERE {self.where_clause}"
        if self.window_size is None:
            return sql
        return f"{sql} ORDER BY game_date DESC LIMIT :n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": self.player.model_dump(),
            "predicates": self.predicates,
            "params": self.params,
            "context": self.context,
            "sql": self.selection_sql(),
        }


# ============================================================================
# PREDICATES
# ============================================================================


def season_type_predicate(
    season_type: str, columns: Set[str], params: Dict[str, Any]
) -> Optional[str]:
    """
    Case-insensitive substring match on every season-type column present.

    Args:
        season_type: "playoffs" or "regular"
        columns: Lower-cased column names of the fact table
        params: Parameter bag, extended in place

    Returns:
        Predicate SQL, or None when the table has none of the columns
    """
    present = [c for c in SEASON_TYPE_COLUMNS if c in columns]
    if not present:
        logger.debug(f"No season-type column in {BOX_SCORES_TABLE}, skipping filter")
        return None

    like = "%playoff%" if season_type == "playoffs" else "%regular%"
    clauses = []
    for i, column in enumerate(present):
        params[f"season_like_{i}"] = like
        clauses.append(f'lower(CAST("{column}" AS VARCHAR)) LIKE :season_like_{i}')

    return clauses[0] if len(clauses) == 1 else f"({' OR '.join(clauses)})"


def describe_filters(parsed: ParsedQuery) -> str:
    """
    Human-readable context fragment, e.g. "vs BKN/NJN (career) playoffs".
    """
    parts: List[str] = []
    if parsed.opponent_codes:
        parts.append(f"vs {'/'.join(parsed.opponent_codes)}")
    # Any unbounded game count, with or without a date range
    if parsed.window_size is None:
        parts.append("(career)")
    if parsed.season_type:
        parts.append(parsed.season_type)
    if parsed.date_from and parsed.date_to:
        parts.append(f"between {parsed.date_from.year}-{parsed.date_to.year}")
    elif parsed.date_from:
        parts.append(f"since {parsed.date_from.year}")
    elif parsed.date_to:
        parts.append(f"through {parsed.date_to.year}")
    return " ".join(parts)


def build_query(parsed: ParsedQuery, player: Player, columns: Set[str]) -> QueryPlan:
    """
    Combine parsed intent and the resolved player into a QueryPlan.

    Args:
        parsed: Output of parse_input
        player: Resolved player
        columns: Lower-cased column names of the fact table

    Returns:
        QueryPlan with predicates in a fixed order: player, opponent,
        season type, date bounds
    """
    predicates = ["player_id = :pid"]
    params: Dict[str, Any] = {"pid": player.id}

    if parsed.opponent_codes:
        placeholders = ", ".join(f":opp{i}" for i in range(len(parsed.opponent_codes)))
        predicates.append(f"opponent_abbr IN ({placeholders})")
        params.update({f"opp{i}": code for i, code in enumerate(parsed.opponent_codes)})

    if parsed.season_type:
        predicate = season_type_predicate(parsed.season_type, columns, params)
        if predicate:
            predicates.append(predicate)

    if parsed.date_from:
        predicates.append("game_date >= :date_from")
        params["date_from"] = parsed.date_from.isoformat()
    if parsed.date_to:
        predicates.append("game_date <= :date_to")
        params["date_to"] = parsed.date_to.isoformat()

    if parsed.window_size is not None:
        params["n"] = parsed.window_size

    return QueryPlan(
        player=player,
        parsed=parsed,
        predicates=predicates,
        params=params,
        context=describe_filters(parsed),
    )


async def plan_query(parsed: ParsedQuery, store: TabularStore) -> QueryPlan:
    """
    Resolve the player, probe the fact table schema, and build the plan.

    Raises:
        PlayerNotFoundError / AmbiguousPlayerError: From player resolution
        QueryExecutionError: If the store call fails
    """
    player = await asyncio.to_thread(resolve_player, store, parsed.player_name)
    columns = await asyncio.to_thread(store.columns, BOX_SCORES_TABLE)
    plan = build_query(parsed, player, columns)
    logger.debug(f"Plan for '{parsed.raw_query}': {plan.to_dict()}")
    return plan
