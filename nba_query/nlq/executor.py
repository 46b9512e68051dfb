# nba_query/nlq/executor.py
"""
Query Executor for player stat questions.

Runs the two queries that share a QueryPlan's row selection:
- the aggregate query (game count + per-stat averages) for the summary
- the per-game detail query, most recent first

Store calls block, so each runs in a worker thread. Failures surface as
QueryExecutionError from the store and are not retried.
"""

import asyncio
import logging
import time

from ..api.models import GameList, GameRow, StatLine
from ..config import clamp_limit
from ..data.store import TabularStore
from .planner import QueryPlan

logger = logging.getLogger(__name__)

AGGREGATE_COLUMNS = """
    COUNT(*) AS games,
    AVG(PTS) AS ppg,
    AVG(REB) AS rpg,
    AVG(AST) AS apg,
    AVG(STL) AS spg,
    AVG(BLK) AS bpg,
    AVG(TOV) AS tov,
    AVG(FG_PCT) AS fg_pct,
    AVG(FG3_PCT) AS fg3_pct,
    AVG(FT_PCT) AS ft_pct,
    AVG(FGM) AS fgm, AVG(FGA) AS fga,
    AVG(FG3M) AS fg3m, AVG(FG3A) AS fg3a,
    AVG(FTM) AS ftm, AVG(FTA) AS fta
"""

GAME_COLUMNS = """
    game_date, opponent_abbr, team_abbr,
    "MIN" AS "min", PTS AS pts, REB AS reb, AST AS ast,
    STL AS stl, BLK AS blk, TOV AS tov,
    FG_PCT AS fg_pct, FG3_PCT AS fg3_pct, FT_PCT AS ft_pct
"""


async def run_summary(plan: QueryPlan, store: TabularStore) -> StatLine:
    """
    Aggregate the plan's rows into one StatLine.

    Returns:
        StatLine; ``games == 0`` when nothing matched
    """
    start_time = time.time()
    sql = f"SELECT {AGGREGATE_COLUMNS} FROM ({plan.selection_sql()}) AS t"
    row = await asyncio.to_thread(store.fetch_one, sql, plan.params)

    stats = StatLine(**row) if row else StatLine()
    logger.info(
        f"Aggregated {stats.games} games for {plan.player.name} "
        f"in {(time.time() - start_time) * 1000:.1f}ms"
    )
    return stats


async def run_games(plan: QueryPlan, store: TabularStore, limit: int = 25) -> GameList:
    """
    Fetch per-game rows for the plan, most recent first.

    Args:
        plan: Query plan
        store: Tabular store
        limit: Row cap used outside window mode; a "last N" window uses N

    Returns:
        GameList with ``career`` set for unbounded, undated queries
    """
    effective_limit = clamp_limit(plan.window_size if plan.window_size is not None else limit)
    sql = (
        f"SELECT {GAME_COLUMNS} FROM ({plan.selection_sql()}) AS t "
        f"ORDER BY game_date DESC LIMIT :lim"
    )
    rows = await asyncio.to_thread(
        store.fetch_all, sql, {**plan.params, "lim": effective_limit}
    )
    logger.info(f"Fetched {len(rows)} game rows for {plan.player.name}")

    return GameList(
        player=plan.player.name,
        rows=[GameRow(**row) for row in rows],
        career=plan.career,
    )
