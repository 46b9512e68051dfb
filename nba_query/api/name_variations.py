"""
Name Variations for NBA Teams and Players

Static alias tables used to normalize the free-text pieces of a query:

- Player first-name nicknames ("steph" -> "stephen")
- Team nicknames, cities and abbreviations -> every historical code the
  franchise has been stored under (relocations and renames)
- Spelled-out numbers ("twenty five" -> 25)

The tables are built once at import and exposed read-only.
"""

import logging
import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# ============================================================================
# PLAYER NICKNAMES
# ============================================================================
# Maps nickname token -> canonical first-name token (all lowercase)

PLAYER_NICKNAMES: Mapping[str, str] = MappingProxyType({
    "steph": "stephen",
    "bron": "lebron",
    "mike": "michael",
    "kd": "kevin",
    "dame": "damian",
    "cp3": "chris",
    "book": "devin",
    "pg": "paul",
    "tatum": "jayson",
})

# ============================================================================
# TEAM ALIASES
# ============================================================================
# Maps uppercase key -> ordered tuple of stored team codes.
# A relocated/renamed franchise lists every code it was stored under, current
# code first unless the key names the historical team.

_WAS = ("WAS", "WSB")
_WSB = ("WSB", "WAS")
_BKN = ("BKN", "NJN")
_NJN = ("NJN", "BKN")
_CHA = ("CHA", "CHH")
_NOP = ("NOP", "NOH", "NOK")
_MEM = ("MEM", "VAN")
_VAN = ("VAN", "MEM")
_OKC = ("OKC", "SEA")
_SEA = ("SEA", "OKC")

TEAM_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # Warriors
    "GSW": ("GSW",), "WARRIORS": ("GSW",), "GOLDEN STATE": ("GSW",),
    # Wizards / Bullets
    "WAS": _WAS, "WIZARDS": _WAS, "WASHINGTON WIZARDS": _WAS, "WASHINGTON": _WAS,
    "WSB": _WSB, "BULLETS": _WSB,
    # Lakers / Clippers
    "LAL": ("LAL",), "LAKERS": ("LAL",), "LOS ANGELES LAKERS": ("LAL",),
    "LAC": ("LAC",), "CLIPPERS": ("LAC",), "LOS ANGELES CLIPPERS": ("LAC",),
    # Celtics / Bulls / Knicks
    "BOS": ("BOS",), "CELTICS": ("BOS",), "BOSTON": ("BOS",),
    "CHI": ("CHI",), "BULLS": ("CHI",), "CHICAGO": ("CHI",),
    "NYK": ("NYK",), "KNICKS": ("NYK",), "NEW YORK": ("NYK",),
    # Nets (Brooklyn / New Jersey)
    "BKN": _BKN, "NETS": _BKN, "BROOKLYN NETS": _BKN, "BROOKLYN": _BKN,
    "NJN": _NJN, "NEW JERSEY NETS": _NJN, "NEW JERSEY": _NJN,
    # Hornets (Charlotte: CHH <-> CHA; Bobcats played as CHA)
    "CHA": _CHA, "HORNETS": _CHA, "CHARLOTTE HORNETS": _CHA, "CHARLOTTE": _CHA,
    "CHH": ("CHH", "CHA"), "BOBCATS": _CHA,
    # Pelicans (New Orleans: NOP <-> NOH/NOK)
    "NOP": _NOP, "PELICANS": _NOP, "NEW ORLEANS": _NOP,
    "NOH": ("NOH", "NOP", "NOK"), "NOK": ("NOK", "NOP", "NOH"),
    # Grizzlies (Memphis / Vancouver)
    "MEM": _MEM, "GRIZZLIES": _MEM, "MEMPHIS": _MEM,
    "VAN": _VAN, "VANCOUVER GRIZZLIES": _VAN, "VANCOUVER": _VAN,
    # Thunder / Sonics
    "OKC": _OKC, "THUNDER": _OKC, "OKLAHOMA CITY": _OKC,
    "SEA": _SEA, "SONICS": _SEA, "SUPERSONICS": _SEA, "SEATTLE": _SEA,
    # Single-code franchises
    "PHX": ("PHX",), "SUNS": ("PHX",), "PHOENIX": ("PHX",),
    "PHI": ("PHI",), "SIXERS": ("PHI",), "76ERS": ("PHI",), "PHI76ERS": ("PHI",),
    "PHILADELPHIA": ("PHI",),
    "POR": ("POR",), "TRAIL BLAZERS": ("POR",), "BLAZERS": ("POR",), "PORTLAND": ("POR",),
    "CLE": ("CLE",), "CAVS": ("CLE",), "CAVALIERS": ("CLE",), "CLEVELAND": ("CLE",),
    "MIA": ("MIA",), "HEAT": ("MIA",), "MIAMI": ("MIA",),
    "SAS": ("SAS",), "SPURS": ("SAS",), "SAN ANTONIO": ("SAS",),
    "DAL": ("DAL",), "MAVS": ("DAL",), "MAVERICKS": ("DAL",), "DALLAS": ("DAL",),
    "DEN": ("DEN",), "NUGGETS": ("DEN",), "DENVER": ("DEN",),
    "HOU": ("HOU",), "ROCKETS": ("HOU",), "HOUSTON": ("HOU",),
    "MIL": ("MIL",), "BUCKS": ("MIL",), "MILWAUKEE": ("MIL",),
    "TOR": ("TOR",), "RAPTORS": ("TOR",), "TORONTO": ("TOR",),
    "ORL": ("ORL",), "MAGIC": ("ORL",), "ORLANDO": ("ORL",),
    "DET": ("DET",), "PISTONS": ("DET",), "DETROIT": ("DET",),
    "IND": ("IND",), "PACERS": ("IND",), "INDIANA": ("IND",),
    "ATL": ("ATL",), "HAWKS": ("ATL",), "ATLANTA": ("ATL",),
    "UTA": ("UTA",), "JAZZ": ("UTA",), "UTAH": ("UTA",),
    "MIN": ("MIN",), "TIMBERWOLVES": ("MIN",), "WOLVES": ("MIN",), "MINNESOTA": ("MIN",),
    "SAC": ("SAC",), "KINGS": ("SAC",), "SACRAMENTO": ("SAC",),
})

# ============================================================================
# NUMBER WORDS
# ============================================================================

WORD_NUMBERS: Mapping[str, int] = MappingProxyType({
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14, "fifteen": 15,
    "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
})

_BARE_CODE = re.compile(r"^[A-Z]{2,4}$")


# ============================================================================
# NORMALIZERS
# ============================================================================


def normalize_name_tokens(name: str) -> List[str]:
    """
    Split a player name into lowercase tokens with nicknames expanded.

    The tokens are AND-matched as substrings, so their order only matters
    for display.

    Examples:
        >>> normalize_name_tokens("Steph  Curry")
        ['stephen', 'curry']
    """
    tokens = " ".join(name.lower().split()).split(" ")
    return [PLAYER_NICKNAMES.get(token, token) for token in tokens if token]


def _lookup(key: str) -> Optional[Tuple[str, ...]]:
    hit = TEAM_ALIASES.get(key)
    if hit is None and key.endswith("S"):
        hit = TEAM_ALIASES.get(key[:-1])
    return hit


def normalize_opponent(raw: Optional[str]) -> Optional[Tuple[str, ...]]:
    """
    Resolve an opponent phrase to the team codes it may be stored under.

    Fallback chain: exact key, de-pluralized key, last word of the phrase,
    then a bare 2-4 letter code taken verbatim.

    Args:
        raw: Opponent phrase as typed ("the Celtics", "N.J. Nets", "bos")

    Returns:
        Tuple of team codes, or None when the phrase is empty or unknown.
        Unknown phrases drop the opponent filter instead of failing the query.
    """
    if not raw:
        return None

    key = " ".join(raw.upper().replace(".", "").split())
    key = re.sub(r"^THE\s+", "", key)
    key = re.sub(r"\s+TEAM$", "", key)

    hit = _lookup(key)
    if hit is None:
        # "boston celtics" -> "CELTICS"; "nj nets" -> "NETS"
        hit = _lookup(key.split(" ")[-1])
    if hit is None and _BARE_CODE.match(key):
        hit = (key,)

    if hit is None:
        logger.debug(f"Opponent '{raw}' not recognized, dropping opponent filter")
    return hit


def parse_word_number(text: str) -> Optional[int]:
    """
    Sum a run of number words: "twenty five" -> 25, "ninety ninety" -> 180.

    Hyphenated compounds must already be split into words.

    Returns:
        The sum, or None if any word is unknown or the total is zero.
    """
    total = 0
    for word in text.lower().split():
        if word not in WORD_NUMBERS:
            return None
        total += WORD_NUMBERS[word]
    return total or None
