"""Data model shared by the autocomplete controllers and their providers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FieldStatus(Enum):
    """Where a location field sits in its suggestion state machine."""

    CLOSED = "closed"
    OPEN = "open"
    OVERRIDDEN = "overridden"


class ResultDisposition(Enum):
    """What happened to a suggestion lookup result when it came back."""

    APPLIED = "applied"
    # A newer query was issued (or the field was cleared) meanwhile.
    STALE_RESULT_DISCARDED = "stale_result_discarded"
    # The query is still current but the field is closed, overridden or
    # waiting on a pending selection.
    FIELD_NOT_OPEN = "field_not_open"


@dataclass(frozen=True)
class Query:
    """A lookup request tagged with the field's sequence number at issue time."""

    text: str
    sequence: int


class Candidate(BaseModel):
    """One suggested place.

    Only ``display_name`` is interpreted; every other field the provider sends
    (coordinates, place ids, address parts) is kept as-is.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    display_name: str = Field(min_length=1)


class Position(BaseModel):
    """A device position in decimal degrees."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def as_text(self) -> str:
        return format_coordinates(self.latitude, self.longitude)


def format_coordinates(latitude: float, longitude: float) -> str:
    """Render coordinates the way they are typed into a location field."""
    return f"{latitude},{longitude}"


@dataclass
class FieldState:
    """Everything the UI needs to render one location field.

    ``suggestions`` is only ever non-empty while the field is OPEN, not
    waiting on a selection, and holds at least ``min_query_length`` characters.
    """

    raw_text: str = ""
    suggestions: list[Candidate] = field(default_factory=list)
    is_selecting: bool = False
    is_overridden: bool = False
    status: FieldStatus = FieldStatus.CLOSED

    def snapshot(self) -> FieldState:
        return replace(self, suggestions=list(self.suggestions))


@dataclass(frozen=True)
class PairState:
    origin: FieldState
    destination: FieldState


@dataclass(frozen=True)
class RouteRequest:
    """The finalized origin/destination pair handed to a route launcher."""

    origin: str
    destination: str
