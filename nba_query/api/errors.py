# nba_query/api/errors.py
"""
Error taxonomy for NBA Query.

Provides:
1. Error code constants for consistent error handling
2. Exception hierarchy for the user-correctable and infrastructure failures
   a free-text stats query can run into

Store failures are wrapped once in QueryExecutionError and propagated as-is;
nothing here retries.
"""

from typing import Any, Dict, List, Optional


# ============================================================================
# ERROR CODES
# ============================================================================


class ErrorCode:
    """Standard error codes for NBA Query."""

    # Client errors (4xx equivalent)
    EMPTY_INPUT = "EMPTY_INPUT"
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    AMBIGUOUS_PLAYER = "AMBIGUOUS_PLAYER"
    INVALID_PARAMETER = "INVALID_PARAMETER"

    # Store errors (5xx equivalent)
    QUERY_EXECUTION_FAILED = "QUERY_EXECUTION_FAILED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# EXCEPTION HIERARCHY
# ============================================================================


class NBAQueryError(Exception):
    """Base exception for all NBA Query errors."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    @property
    def user_correctable(self) -> bool:
        """True when rephrasing the question can fix the failure."""
        return self.code != ErrorCode.QUERY_EXECUTION_FAILED

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class EmptyInputError(NBAQueryError):
    """Raised when the query text is empty after trimming."""

    def __init__(self):
        super().__init__(
            message="Missing text: ask about a player, e.g. 'LeBron James last 10 games'",
            code=ErrorCode.EMPTY_INPUT,
        )


class PlayerNotFoundError(NBAQueryError):
    """Raised when no stored player matches the extracted name, even fuzzily."""

    def __init__(self, name: str):
        super().__init__(
            message=f'No player found matching "{name}".',
            code=ErrorCode.PLAYER_NOT_FOUND,
            details={"query": name},
        )
        self.name = name


class AmbiguousPlayerError(NBAQueryError):
    """Raised when several stored players match the extracted name."""

    def __init__(self, name: str, candidates: List[str]):
        menu = "\n".join(f"  - {candidate}" for candidate in candidates)
        super().__init__(
            message=f'Multiple players matched "{name}". Try one of:\n{menu}',
            code=ErrorCode.AMBIGUOUS_PLAYER,
            details={"query": name, "candidates": list(candidates)},
        )
        self.name = name
        self.candidates = list(candidates)


class InvalidParameterError(NBAQueryError):
    """Raised when configuration or tool parameters are invalid."""

    def __init__(self, param_name: str, param_value: Any, expected: str):
        super().__init__(
            message=f"Invalid parameter '{param_name}': got {param_value}, expected {expected}",
            code=ErrorCode.INVALID_PARAMETER,
            details={
                "param_name": param_name,
                "param_value": str(param_value),
                "expected": expected,
            },
        )


class QueryExecutionError(NBAQueryError):
    """Raised when the tabular store call itself fails (connectivity, bad SQL)."""

    def __init__(self, message: str, sql: Optional[str] = None):
        super().__init__(
            message=message,
            code=ErrorCode.QUERY_EXECUTION_FAILED,
            details={"sql": sql},
        )
