# nba_query/nba_server.py
"""
FastMCP server and one-shot CLI for NBA Query.

Tools:
- answer_stats_question: summary text for a free-text question
- get_player_game_log: per-game markdown table for the same kind of question
- suggest_player_queries: player-name autocomplete plus example questions

``--ask "<question>"`` answers a single question on the terminal instead of
starting the server.
"""

import argparse
import asyncio
import logging
import os
import sys
import time
from typing import List, Optional

from mcp.server.fastmcp import FastMCP
from rich.console import Console
from rich.table import Table

from nba_query.api.errors import ErrorCode, NBAQueryError
from nba_query.api.models import GameList, error_response, success_response
from nba_query.config import clamp_limit, get_settings
from nba_query.nlq.pipeline import list_games, suggest, summarize
from nba_query.nlq.synthesizer import fmt_number, fmt_pct, format_games_table

logger = logging.getLogger(__name__)

settings = get_settings()

HOST = os.getenv("MCP_HOST", "127.0.0.1")

mcp_server = FastMCP(name="nba_query", host=HOST, port=settings.port)
mcp = mcp_server  # Alias so the FastMCP CLI can auto-discover the server


# ============================================================================
# TOOLS
# ============================================================================


@mcp_server.tool()
async def answer_stats_question(question: str) -> str:
    """
    Answer a free-text question about an NBA player's box-score stats.

    Args:
        question: e.g. "Stephen Curry vs Celtics last 5 games",
            "LeBron career playoffs FG%", "Dame since 2018 points"

    Returns:
        Formatted summary, a "No games found" sentence, or a message asking
        the user to pick one of several matching players
    """
    start_time = time.time()
    try:
        answer = await summarize(question)
        logger.info(f"Answered in {(time.time() - start_time) * 1000:.1f}ms")
        return answer
    except NBAQueryError as e:
        if not e.user_correctable:
            logger.error(f"Store failure for '{question}': {e.message}")
        return e.message
    except Exception as e:
        logger.exception("Unexpected error in answer_stats_question")
        return f"Sorry, the question could not be answered: {e}"


@mcp_server.tool()
async def get_player_game_log(question: str, limit: int = 25) -> str:
    """
    Per-game rows for a free-text player question, most recent first.

    Args:
        question: e.g. "Jokic vs Lakers playoffs"
        limit: Maximum rows when the question has no "last N" window (1-400)

    Returns:
        Markdown table of games
    """
    try:
        games = await list_games(question, limit=clamp_limit(limit))
        return format_games_table(games)
    except NBAQueryError as e:
        if not e.user_correctable:
            logger.error(f"Store failure for '{question}': {e.message}")
        return e.message
    except Exception as e:
        logger.exception("Unexpected error in get_player_game_log")
        return f"Sorry, the game log could not be loaded: {e}"


@mcp_server.tool()
async def suggest_player_queries(prefix: str) -> str:
    """
    Autocomplete a player name and propose example questions.

    Args:
        prefix: Part of a player name, e.g. "curr"

    Returns:
        JSON envelope with ``players`` (up to 8 names) and ``ideas``
    """
    start_time = time.time()
    try:
        suggestions = await suggest(prefix)
        return success_response(
            data=suggestions.model_dump(),
            execution_time_ms=(time.time() - start_time) * 1000,
        ).to_json_string()
    except NBAQueryError as e:
        return error_response(e.code, e.message, e.details).to_json_string()
    except Exception as e:
        logger.exception("Unexpected error in suggest_player_queries")
        return error_response(ErrorCode.INTERNAL_ERROR, str(e)).to_json_string()


# ============================================================================
# ONE-SHOT CLI
# ============================================================================


def games_table(games: GameList) -> Table:
    """Rich table for terminal output."""
    title = f"{games.player} ({'career' if games.career else f'{len(games.rows)} games'})"
    table = Table(title=title)
    for header in ("Date", "Opp", "Team", "MIN", "PTS", "REB", "AST", "STL", "BLK", "TOV", "FG%", "3P%", "FT%"):
        table.add_column(header, justify="left" if header in ("Date", "Opp", "Team") else "right")
    for row in games.rows:
        minutes = row.min if isinstance(row.min, str) else fmt_number(row.min)
        table.add_row(
            row.game_date.isoformat(),
            row.opponent_abbr or "-",
            row.team_abbr or "-",
            minutes,
            fmt_number(row.pts, 0),
            fmt_number(row.reb, 0),
            fmt_number(row.ast, 0),
            fmt_number(row.stl, 0),
            fmt_number(row.blk, 0),
            fmt_number(row.tov, 0),
            fmt_pct(row.fg_pct),
            fmt_pct(row.fg3_pct),
            fmt_pct(row.ft_pct),
        )
    return table


def ask(question: str, show_games: bool = False, limit: int = 25) -> int:
    """Answer one question on stdout. Returns a process exit code."""
    console = Console()
    try:
        console.print(f"\n{asyncio.run(summarize(question))}\n")
        if show_games:
            games = asyncio.run(list_games(question, limit=clamp_limit(limit)))
            if games.rows:
                console.print(games_table(games))
    except NBAQueryError as e:
        console.print(f"[red]{e.message}[/red]")
        return 1
    return 0


# ============================================================================
# ENTRY POINT
# ============================================================================


def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI args, then answer one question or start the FastMCP server."""
    parser = argparse.ArgumentParser(prog="nba-query")
    parser.add_argument(
        "--ask",
        metavar="QUESTION",
        help='Answer one question and exit, e.g. --ask "Curry career 3P%%"',
    )
    parser.add_argument(
        "--games",
        action="store_true",
        help="With --ask, also print the per-game table",
    )
    parser.add_argument("--limit", type=int, default=settings.default_limit)
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.getenv("MCP_TRANSPORT", "stdio"),
        help="MCP transport to use",
    )
    parser.add_argument("--host", default=HOST, help="Host to bind for SSE")
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE (default NBA_QUERY_PORT)",
    )
    args = parser.parse_args(argv)
    logging.getLogger("nba_query").setLevel(settings.log_level)

    if args.ask:
        sys.exit(ask(args.ask, show_games=args.games, limit=args.limit))

    mcp_server.settings.host = args.host
    if args.port:
        mcp_server.settings.port = args.port

    try:
        if args.transport == "stdio":
            logger.info("Starting FastMCP server on STDIO")
            mcp_server.run()
        else:
            logger.info(
                f"Starting FastMCP server on sse://{args.host}:{mcp_server.settings.port}"
            )
            mcp_server.run(transport=args.transport)
    except Exception:
        logger.exception(f"Failed to start MCP server (transport={args.transport})")
        sys.exit(1)


if __name__ == "__main__":
    main()
