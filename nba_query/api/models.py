# nba_query/api/models.py
"""
Data models for NBA Query.

Pydantic models for the records the core reads from the store and the
payloads it hands back to callers:
1. Player reference rows and per-game rows
2. Aggregated stat lines
3. Response envelope used by the server surface
"""

from datetime import date, datetime, timezone
import json
from typing import Any, Dict, List, Literal, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# RESPONSE ENVELOPE
# ============================================================================


class ErrorDetail(BaseModel):
    """Structured error information."""

    code: str = Field(
        ..., description="Error code (e.g., 'PLAYER_NOT_FOUND', 'AMBIGUOUS_PLAYER')"
    )
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional error context"
    )


class ResponseMetadata(BaseModel):
    """Metadata for every response."""

    version: str = Field(default="v1", description="API version")
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        description="ISO-8601 UTC timestamp",
    )
    execution_time_ms: Optional[float] = Field(
        None, description="Execution time in milliseconds"
    )


class ResponseEnvelope(BaseModel):
    """
    Response envelope for JSON-returning server tools.

    Success and error responses share one shape so callers can branch on
    ``status`` alone.
    """

    status: Literal["success", "error"] = Field(..., description="Response status")
    data: Optional[Any] = Field(None, description="Response payload")
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)
    errors: Optional[List[ErrorDetail]] = Field(
        None, description="Error details (present if status == error)"
    )

    def to_json_string(self, **kwargs) -> str:
        """Serialize to JSON with deterministic key ordering."""
        return json.dumps(self.model_dump(mode="json"), sort_keys=True, **kwargs)


def success_response(
    data: Any, execution_time_ms: Optional[float] = None
) -> ResponseEnvelope:
    """Create a success response envelope."""
    return ResponseEnvelope(
        status="success",
        data=data,
        metadata=ResponseMetadata(execution_time_ms=execution_time_ms),
    )


def error_response(
    error_code: str,
    error_message: str,
    details: Optional[Dict[str, Any]] = None,
) -> ResponseEnvelope:
    """Create an error response envelope."""
    return ResponseEnvelope(
        status="error",
        errors=[ErrorDetail(code=error_code, message=error_message, details=details)],
    )


# ============================================================================
# ENTITY MODELS
# ============================================================================


class Player(BaseModel):
    """Canonical player record from the ``players`` table."""

    id: int = Field(..., description="Store player identifier")
    name: str = Field(..., description="Full canonical name")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"id": 2544, "name": "LeBron James"}},
    )


# ============================================================================
# STATS MODELS
# ============================================================================


class StatLine(BaseModel):
    """Per-game averages over a filtered set of box scores."""

    games: int = 0
    ppg: Optional[float] = None
    rpg: Optional[float] = None
    apg: Optional[float] = None
    spg: Optional[float] = None
    bpg: Optional[float] = None
    tov: Optional[float] = None
    fg_pct: Optional[float] = None
    fg3_pct: Optional[float] = None
    ft_pct: Optional[float] = None
    fgm: Optional[float] = None
    fga: Optional[float] = None
    fg3m: Optional[float] = None
    fg3a: Optional[float] = None
    ftm: Optional[float] = None
    fta: Optional[float] = None


class GameRow(BaseModel):
    """One player's line for one game."""

    game_date: date
    opponent_abbr: Optional[str] = None
    team_abbr: Optional[str] = None
    min: Optional[Union[float, str]] = None
    pts: Optional[float] = None
    reb: Optional[float] = None
    ast: Optional[float] = None
    stl: Optional[float] = None
    blk: Optional[float] = None
    tov: Optional[float] = None
    fg_pct: Optional[float] = None
    fg3_pct: Optional[float] = None
    ft_pct: Optional[float] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "game_date": "2016-06-19",
                "opponent_abbr": "GSW",
                "team_abbr": "CLE",
                "min": 47.0,
                "pts": 27,
                "reb": 11,
                "ast": 11,
                "stl": 2,
                "blk": 3,
                "tov": 5,
                "fg_pct": 37.5,
                "fg3_pct": 16.7,
                "ft_pct": 70.0,
            }
        }
    )


class GameList(BaseModel):
    """Per-game detail for a resolved player, most recent first."""

    player: str
    rows: List[GameRow] = Field(default_factory=list)
    career: bool = False

    def to_frame(self) -> pd.DataFrame:
        """Rows as a DataFrame, one column per GameRow field."""
        columns = list(GameRow.model_fields)
        return pd.DataFrame([row.model_dump() for row in self.rows], columns=columns)


class Suggestions(BaseModel):
    """Autocomplete result: matching player names plus example queries."""

    players: List[str] = Field(default_factory=list)
    ideas: List[str] = Field(default_factory=list)
