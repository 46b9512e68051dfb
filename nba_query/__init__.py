"""NBA Query: free-text player stat questions over a box-score store."""

from nba_query.nlq.pipeline import list_games, suggest, summarize

__all__ = [
    "summarize",
    "list_games",
    "suggest",
]

__version__ = "0.1.0"
