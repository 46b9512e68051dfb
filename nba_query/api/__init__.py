from .entity_resolver import resolve_player, suggest_players
from .errors import (
    AmbiguousPlayerError,
    EmptyInputError,
    NBAQueryError,
    PlayerNotFoundError,
    QueryExecutionError,
)
from .models import GameList, GameRow, Player, StatLine, Suggestions

__all__ = [
    'resolve_player',
    'suggest_players',
    'NBAQueryError',
    'EmptyInputError',
    'PlayerNotFoundError',
    'AmbiguousPlayerError',
    'QueryExecutionError',
    'Player',
    'GameRow',
    'GameList',
    'StatLine',
    'Suggestions',
]
