"""
Data access package for NBA Query.

Modules:
    - store: Read-only tabular store interface with SQLite and DuckDB backends
"""

from nba_query.data.store import DuckDBStore, SQLiteStore, TabularStore, bind_named

__all__ = [
    "TabularStore",
    "SQLiteStore",
    "DuckDBStore",
    "bind_named",
]
