# nba_query/nlq/synthesizer.py
"""
Response Synthesizer for player stat questions.

Formats executed queries into fixed-template text:
- a one-line answer when a single stat was asked for
- a three-line block of averages and shooting splits otherwise
- a "No games found" sentence for an empty row set
- a markdown table of per-game rows
"""

import logging
from typing import Dict, Optional

from tabulate import tabulate

from ..api.models import GameList, StatLine
from .parser import StatKey

logger = logging.getLogger(__name__)


STAT_LABELS: Dict[StatKey, str] = {
    "fg_pct": "FG%",
    "fg3_pct": "3P%",
    "ft_pct": "FT%",
    "ppg": "PPG",
    "rpg": "RPG",
    "apg": "APG",
    "spg": "SPG",
    "bpg": "BPG",
    "tov": "TOV",
}

PERCENT_STATS = frozenset({"fg_pct", "fg3_pct", "ft_pct"})

GAME_TABLE_HEADERS = {
    "game_date": "Date",
    "opponent_abbr": "Opp",
    "team_abbr": "Team",
    "min": "MIN",
    "pts": "PTS",
    "reb": "REB",
    "ast": "AST",
    "stl": "STL",
    "blk": "BLK",
    "tov": "TOV",
    "fg_pct": "FG%",
    "fg3_pct": "3P%",
    "ft_pct": "FT%",
}


# ============================================================================
# VALUE FORMATTING
# ============================================================================


def fmt_number(value: Optional[float], digits: int = 1) -> str:
    """One-decimal number, or "-" when missing."""
    return "-" if value is None else f"{float(value):.{digits}f}"


def fmt_pct(value: Optional[float]) -> str:
    """One-decimal percentage, or "-" when missing."""
    return "-" if value is None else f"{float(value):.1f}%"


def format_stat(stat: StatKey, stats: StatLine) -> str:
    value = getattr(stats, stat)
    return fmt_pct(value) if stat in PERCENT_STATS else fmt_number(value)


def _subject(player_name: str, context: str) -> str:
    return f"{player_name} {context}" if context else player_name


# ============================================================================
# SUMMARY
# ============================================================================


def format_no_games(player_name: str, context: str) -> str:
    return f"No games found for {_subject(player_name, context)}."


def format_summary(
    player_name: str,
    context: str,
    stats: StatLine,
    stat_focus: Optional[StatKey] = None,
) -> str:
    """
    Format an aggregated StatLine.

    Args:
        player_name: Resolved player name
        context: Filter description from the plan ("vs BOS playoffs")
        stats: Aggregate row
        stat_focus: Single stat to report, or None for the full block

    Returns:
        Text answer. Zero games gives the "No games found" sentence.

    Examples:
        >>> format_summary("Stephen Curry", "(career)", StatLine(games=3, fg3_pct=42.123), "fg3_pct")
        'Stephen Curry (career) (3 games): 3P% 42.1%'
    """
    if stats.games == 0:
        return format_no_games(player_name, context)

    header = f"{_subject(player_name, context)} ({stats.games} games)"

    if stat_focus:
        return f"{header}: {STAT_LABELS[stat_focus]} {format_stat(stat_focus, stats)}"

    return (
        f"{header}:\n"
        f"PPG {fmt_number(stats.ppg)} | APG {fmt_number(stats.apg)} | "
        f"RPG {fmt_number(stats.rpg)} | SPG {fmt_number(stats.spg)} | "
        f"BPG {fmt_number(stats.bpg)} | TOV {fmt_number(stats.tov)}\n"
        f"FG% {fmt_pct(stats.fg_pct)} | 3P% {fmt_pct(stats.fg3_pct)} | "
        f"FT% {fmt_pct(stats.ft_pct)}\n"
        f"FGM/FGA {fmt_number(stats.fgm)}/{fmt_number(stats.fga)}, "
        f"3PM/3PA {fmt_number(stats.fg3m)}/{fmt_number(stats.fg3a)}, "
        f"FTM/FTA {fmt_number(stats.ftm)}/{fmt_number(stats.fta)}"
    )


# ============================================================================
# PER-GAME TABLE
# ============================================================================


def format_games_table(games: GameList) -> str:
    """
    Render per-game rows as a GitHub-style markdown table.

    Returns:
        Heading plus table, or a "No games found" line for an empty list
    """
    if not games.rows:
        return f"No games found for {games.player}."
    span = "career" if games.career else f"{len(games.rows)} games"

    df = games.to_frame().rename(columns=GAME_TABLE_HEADERS)
    df["Date"] = df["Date"].astype(str)
    df = df.astype(object).where(df.notna(), None)
    table = tabulate(df, headers="keys", tablefmt="github", showindex=False, missingval="-")
    return f"### {games.player} ({span})\n\n{table}"
