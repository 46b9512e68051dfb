# nba_query/nlq/parser.py
"""
Natural Language Query Parser for player stat questions.

Extracts structured components from free text such as
"Stephen Curry vs Celtics last 5 games" or "LeBron career playoffs FG%":

- Stat focus (a single stat, or None for the multi-stat summary)
- Season type (playoffs / regular)
- Recency window ("last 10", "last twenty five") or career
- Opponent (team nickname, city or code -> stored team codes)
- Date range ("since 2018", "between 2005 and 2010")
- Player name (the text in front of the first control keyword)

Parsing is pure pattern matching: no I/O, deterministic, case-insensitive.
Extraction order matters because the player name is sliced at the earliest
keyword position found by the other steps.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Literal, Optional, Pattern, Tuple

from ..api.name_variations import WORD_NUMBERS, normalize_opponent, parse_word_number

logger = logging.getLogger(__name__)

StatKey = Literal[
    "fg_pct", "fg3_pct", "ft_pct", "ppg", "rpg", "apg", "spg", "bpg", "tov"
]
SeasonType = Literal["playoffs", "regular"]

DEFAULT_WINDOW = 10
MIN_WINDOW = 1
MAX_WINDOW = 400


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass
class ParsedQuery:
    """Structured representation of a player stat question."""

    raw_query: str
    player_name: str
    opponent_codes: Optional[Tuple[str, ...]] = None  # None = any opponent
    window_size: Optional[int] = DEFAULT_WINDOW  # None = career / date range
    season_type: Optional[SeasonType] = None
    date_from: Optional[date] = None  # inclusive
    date_to: Optional[date] = None  # inclusive
    stat_focus: Optional[StatKey] = None  # None = multi-stat summary
    explicit_window: bool = False  # "last N" was typed

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    @property
    def is_career(self) -> bool:
        """Unbounded by both a game count and a date range."""
        return self.window_size is None and not self.has_date_range

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_query": self.raw_query,
            "player_name": self.player_name,
            "opponent_codes": list(self.opponent_codes) if self.opponent_codes else None,
            "window_size": self.window_size,
            "season_type": self.season_type,
            "date_from": self.date_from.isoformat() if self.date_from else None,
            "date_to": self.date_to.isoformat() if self.date_to else None,
            "stat_focus": self.stat_focus,
            "explicit_window": self.explicit_window,
        }


# ============================================================================
# STAT FOCUS
# ============================================================================
# Ordered, first match wins. Three-point patterns come before the field goal
# patterns so "3P%" is never read as FG%.

STAT_PATTERNS: Tuple[Tuple[StatKey, Tuple[Pattern[str], ...]], ...] = tuple(
    (key, tuple(re.compile(p, re.IGNORECASE) for p in patterns))
    for key, patterns in (
        ("fg3_pct", (r"\b(?:three[-\s]?point|3p|3pt)\s*(?:percentage|pct|%)?\b",)),
        ("fg_pct", (r"\bfg\s*%?\b", r"\bfield\s*goal\s*(?:percentage|pct|%)\b")),
        ("ft_pct", (r"\bft\s*%?\b", r"\bfree\s*throw\s*(?:percentage|pct|%)\b")),
        ("ppg", (r"\bpoints?\b", r"\bpts\b", r"\bppg\b")),
        ("rpg", (r"\brebounds?\b", r"\breb\b", r"\brpg\b")),
        ("apg", (r"\bassists?\b", r"\bast\b", r"\bapg\b")),
        ("spg", (r"\bsteals?\b", r"\bstl\b", r"\bspg\b")),
        ("bpg", (r"\bblocks?\b", r"\bblk\b", r"\bbpg\b")),
        ("tov", (r"\bturnovers?\b", r"\btov\b")),
    )
)

# Stat words that may trail a bare player name ("Curry points")
_TRAILING_STAT = re.compile(
    r"\b(?:three[-\s]?point|3p|3pt|fg|field\s*goal|free\s*throw|ft|points?|pts|"
    r"rebounds?|reb|assists?|ast|steals?|stl|blocks?|blk|turnovers?|tov)"
    r"\s*(?:percentage|pct|%)?$",
    re.IGNORECASE,
)


def detect_stat_focus(text: str) -> Optional[StatKey]:
    """Return the first stat key whose patterns match ``text``."""
    for key, patterns in STAT_PATTERNS:
        if any(p.search(text) for p in patterns):
            return key
    return None


def _first_stat_phrase(text: str) -> Optional[int]:
    """Start index of the earliest stat phrase anywhere in ``text``."""
    starts = [
        m.start()
        for _, patterns in STAT_PATTERNS
        for p in patterns
        for m in [p.search(text)]
        if m
    ]
    return min(starts) if starts else None


# ============================================================================
# SEASON TYPE / WINDOW
# ============================================================================

_PLAYOFFS = re.compile(r"\bplayoffs?\b", re.IGNORECASE)
_REGULAR = re.compile(r"\bregular\b", re.IGNORECASE)
_CAREER = re.compile(r"\bcareer\b", re.IGNORECASE)
_LAST_DIGITS = re.compile(r"\blast\s+(\d+)(?:\s+games?)?\b", re.IGNORECASE)
_LAST_WORDS = re.compile(r"\blast\s+([a-z][a-z\s-]*)", re.IGNORECASE)


def detect_season_type(text: str) -> Optional[SeasonType]:
    """
    Playoffs or regular season filter.

    When both words appear, regular wins.
    """
    season_type: Optional[SeasonType] = None
    if _PLAYOFFS.search(text):
        season_type = "playoffs"
    if _REGULAR.search(text):
        season_type = "regular"
    return season_type


def clamp_window(n: int) -> int:
    return max(MIN_WINDOW, min(MAX_WINDOW, n))


def detect_window(text: str) -> Tuple[Optional[int], bool]:
    """
    Parse the recency window.

    Returns:
        (window_size, explicit) where window_size is None for career queries
        and explicit is True when a "last N" count was given.

    Examples:
        "last 8 games"          -> (8, True)
        "last twenty-five"      -> (25, True)
        "career"                -> (None, False)
        "" (nothing)            -> (10, False)
    """
    if _CAREER.search(text):
        return None, False

    digits = _LAST_DIGITS.search(text)
    if digits:
        return clamp_window(int(digits.group(1))), True

    words = _LAST_WORDS.search(text)
    if words:
        run: List[str] = []
        for word in words.group(1).replace("-", " ").lower().split():
            if word not in WORD_NUMBERS:
                break
            run.append(word)
        n = parse_word_number(" ".join(run)) if run else None
        if n is not None:
            # A spelled-out count is explicit too and survives a date range
            return clamp_window(n), True

    return DEFAULT_WINDOW, False


# ============================================================================
# OPPONENT
# ============================================================================

# Non-greedy phrase that stops at the next control word or end of string
_OPPONENT = re.compile(
    r"\b(?:vs\.?|against)\s+([A-Za-z.\s]{2,30}?)"
    r"(?=\s+(?:last|career|playoffs?|regular|since|between)\b|$)",
    re.IGNORECASE,
)


def detect_opponent(text: str) -> Optional[Tuple[str, ...]]:
    """Opponent team codes, or None when absent or unrecognized."""
    match = _OPPONENT.search(text)
    if not match:
        return None
    phrase = re.sub(r"^the\s+", "", match.group(1).strip(), flags=re.IGNORECASE)
    return normalize_opponent(phrase)


# ============================================================================
# DATE RANGE
# ============================================================================

_SINCE = re.compile(r"\bsince\s+(\d{4})\b", re.IGNORECASE)
_BETWEEN = re.compile(r"\bbetween\s+(\d{4})\s+and\s+(\d{4})\b", re.IGNORECASE)


def detect_date_range(text: str) -> Tuple[Optional[date], Optional[date]]:
    """
    Inclusive date bounds from "since YYYY" / "between YYYY and YYYY".

    "between" is order-independent: the smaller year is always the lower
    bound. Year 0000 is not a valid date and is ignored.
    """
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    since = _SINCE.search(text)
    if since and int(since.group(1)) > 0:
        date_from = date(int(since.group(1)), 1, 1)

    between = _BETWEEN.search(text)
    if between:
        low, high = sorted((int(between.group(1)), int(between.group(2))))
        if low > 0:
            date_from = date(low, 1, 1)
            date_to = date(high, 12, 31)

    return date_from, date_to


# ============================================================================
# PLAYER NAME
# ============================================================================
# Each control keyword marks where the player name ends.

NAME_BOUNDARIES: Tuple[Tuple[str, Pattern[str]], ...] = tuple(
    (tag, re.compile(p, re.IGNORECASE))
    for tag, p in (
        ("opponent", r"\s+vs\.?\s+"),
        ("opponent", r"\s+against\s+"),
        ("window", r"\s+last\s+"),
        ("career", r"\s+career\b"),
        ("season_type", r"\s+playoffs?\b"),
        ("season_type", r"\s+regular\b"),
        ("date", r"\s+since\s+"),
        ("date", r"\s+between\s+"),
    )
)


def extract_player_name(text: str) -> str:
    """
    Slice the player name off the front of the query.

    The name is everything before the earliest control keyword or stat
    phrase. When no keyword is present, a trailing stat word is stripped
    ("Curry field goal" -> "Curry").
    """
    cuts = [m.start() for _, p in NAME_BOUNDARIES for m in [p.search(text)] if m]
    stat_start = _first_stat_phrase(text)
    if stat_start is not None:
        cuts.append(stat_start)

    if not cuts:
        return _TRAILING_STAT.sub("", text).strip()
    return text[: min(cuts)].strip()


# ============================================================================
# MAIN PARSER
# ============================================================================


def parse_input(text: str) -> ParsedQuery:
    """
    Parse a free-text player stat question.

    Args:
        text: Query such as "Stephen Curry vs Celtics last 5 games"

    Returns:
        ParsedQuery. The player name is raw text; resolution to a stored
        player happens later.

    Examples:
        >>> q = parse_input("Stephen Curry vs Celtics last 5 games")
        >>> (q.player_name, q.opponent_codes, q.window_size)
        ('Stephen Curry', ('BOS',), 5)

        >>> q = parse_input("X between 2010 and 2005")
        >>> (q.date_from.isoformat(), q.date_to.isoformat(), q.window_size)
        ('2005-01-01', '2010-12-31', None)
    """
    s = " ".join(text.split())

    stat_focus = detect_stat_focus(s)
    season_type = detect_season_type(s)
    window_size, explicit_window = detect_window(s)
    opponent_codes = detect_opponent(s)
    date_from, date_to = detect_date_range(s)

    # A date range bounds the rows by itself unless a count was also typed
    if (date_from or date_to) and not explicit_window:
        window_size = None

    parsed = ParsedQuery(
        raw_query=text,
        player_name=extract_player_name(s),
        opponent_codes=opponent_codes,
        window_size=window_size,
        season_type=season_type,
        date_from=date_from,
        date_to=date_to,
        stat_focus=stat_focus,
        explicit_window=explicit_window,
    )
    logger.debug(f"Parsed '{text}' -> {parsed.to_dict()}")
    return parsed
