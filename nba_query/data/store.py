# nba_query/data/store.py
"""
Tabular store adapters.

The query core needs three read-only capabilities from the serving database:

1. Schema introspection: column names of a table
2. A parameterized query returning a single row
3. A parameterized query returning zero or more rows

SQL is written with ``:name`` placeholders and bound positionally, so the
same statement text runs on every backend. Each call opens and closes its own
connection; nothing is shared between requests or threads.

Backends:
- SQLiteStore: the exported ``nba.sqlite`` serving file
- DuckDBStore: a DuckDB warehouse file opened read-only
"""

import logging
import re
import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple, Union

import duckdb

from ..api.errors import QueryExecutionError

logger = logging.getLogger(__name__)

Params = Union[Mapping[str, Any], Sequence[Any], None]

_NAMED_PARAM = re.compile(r"(?<![:\w]):([A-Za-z_][A-Za-z0-9_]*)")


def bind_named(sql: str, params: Params = None) -> Tuple[str, List[Any]]:
    """
    Convert ``:name`` placeholders to positional ``?`` markers.

    Args:
        sql: Statement text with ``:name`` placeholders
        params: Mapping of placeholder name -> value, or an already
            positional sequence (returned unchanged)

    Returns:
        (sql with ``?`` markers, argument list in placeholder order)

    Raises:
        QueryExecutionError: If a placeholder has no value in ``params``

    Examples:
        >>> bind_named("SELECT * FROM t WHERE a = :a AND b IN (:b0, :b1)",
        ...            {"a": 1, "b0": "X", "b1": "Y"})
        ('SELECT * FROM t WHERE a = ? AND b IN (?, ?)', [1, 'X', 'Y'])
    """
    if params is None:
        return sql, []
    if not isinstance(params, Mapping):
        return sql, list(params)

    names: List[str] = []

    def _replace(match: "re.Match[str]") -> str:
        names.append(match.group(1))
        return "?"

    positional_sql = _NAMED_PARAM.sub(_replace, sql)
    missing = [name for name in names if name not in params]
    if missing:
        raise QueryExecutionError(
            f"Missing value for SQL parameter(s): {', '.join(missing)}", sql=sql
        )
    return positional_sql, [params[name] for name in names]


# ============================================================================
# STORE INTERFACE
# ============================================================================


class TabularStore(ABC):
    """Read-only access to the ``players`` / ``box_scores`` serving tables."""

    @abstractmethod
    def columns(self, table: str) -> Set[str]:
        """Lower-cased column names of ``table`` (empty if it does not exist)."""

    @abstractmethod
    def fetch_all(self, sql: str, params: Params = None) -> List[Dict[str, Any]]:
        """Run a query and return every row as a dict."""

    def fetch_one(self, sql: str, params: Params = None) -> Optional[Dict[str, Any]]:
        """Run a query and return its first row, or None."""
        rows = self.fetch_all(sql, params)
        return rows[0] if rows else None


# ============================================================================
# SQLITE
# ============================================================================


class SQLiteStore(TabularStore):
    """SQLite implementation of TabularStore."""

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = str(db_path)

    def __repr__(self) -> str:
        return f"SQLiteStore(db_path={self.db_path!r})"

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        # Read-only URI so a missing file fails instead of being created
        uri = f"{Path(self.db_path).resolve().as_uri()}?mode=ro"
        try:
            conn = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            raise QueryExecutionError(
                f"Cannot open SQLite database {self.db_path}: {e}"
            ) from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def columns(self, table: str) -> Set[str]:
        if not re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", table):
            raise QueryExecutionError(f"Invalid table name: {table!r}")
        rows = self.fetch_all(f"PRAGMA table_info({table})")
        return {str(row["name"]).lower() for row in rows}

    def fetch_all(self, sql: str, params: Params = None) -> List[Dict[str, Any]]:
        positional_sql, args = bind_named(sql, params)
        logger.debug(f"SQLite query: {positional_sql} args={args}")
        with self._connect() as conn:
            try:
                cursor = conn.execute(positional_sql, args)
                return [dict(row) for row in cursor.fetchall()]
            except sqlite3.Error as e:
                logger.error(f"SQLite query failed: {e}")
                raise QueryExecutionError(str(e), sql=sql) from e


# ============================================================================
# DUCKDB
# ============================================================================


class DuckDBStore(TabularStore):
    """DuckDB implementation of TabularStore."""

    def __init__(self, db_path: Union[str, Path], read_only: bool = True):
        self.db_path = str(db_path)
        self.read_only = read_only

    def __repr__(self) -> str:
        return f"DuckDBStore(db_path={self.db_path!r}, read_only={self.read_only})"

    @contextmanager
    def _connect(self) -> Iterator["duckdb.DuckDBPyConnection"]:
        try:
            conn = duckdb.connect(self.db_path, read_only=self.read_only)
        except duckdb.Error as e:
            raise QueryExecutionError(
                f"Cannot open DuckDB database {self.db_path}: {e}"
            ) from e
        try:
            yield conn
        finally:
            conn.close()

    def columns(self, table: str) -> Set[str]:
        rows = self.fetch_all(
            "SELECT column_name FROM information_schema.columns WHERE table_name = :table",
            {"table": table},
        )
        return {str(row["column_name"]).lower() for row in rows}

    def fetch_all(self, sql: str, params: Params = None) -> List[Dict[str, Any]]:
        positional_sql, args = bind_named(sql, params)
        logger.debug(f"DuckDB query: {positional_sql} args={args}")
        with self._connect() as conn:
            try:
                cursor = conn.execute(positional_sql, args)
                names = [column[0] for column in cursor.description]
                return [dict(zip(names, row)) for row in cursor.fetchall()]
            except duckdb.Error as e:
                logger.error(f"DuckDB query failed: {e}")
                raise QueryExecutionError(str(e), sql=sql) from e
