"""
Golden parse cases for NBA Query.

Pins the structured reading of representative questions so parser changes
show up as test failures.
"""

from tests.golden.queries import (
    GoldenQuery,
    GOLDEN_QUERIES,
    get_query_by_id,
    get_all_categories,
    get_query_statistics,
)

__all__ = [
    "GoldenQuery",
    "GOLDEN_QUERIES",
    "get_query_by_id",
    "get_all_categories",
    "get_query_statistics",
]
