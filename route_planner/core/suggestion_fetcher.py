"""Turns a tagged Query into validated Candidates via a geocoding provider."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from route_planner.core.errors import FetchError, GeocodeResponseError
from route_planner.core.models import Candidate, Query


if TYPE_CHECKING:
    from route_planner.providers.protocols import GeocodeSuggestionProvider


logger = logging.getLogger(__name__)

DEFAULT_MIN_QUERY_LENGTH = 2
DEFAULT_SUGGESTION_LIMIT = 10


class SuggestionFetcher:
    """Issues suggestion lookups and normalizes their failures into FetchError.

    The fetcher is stateless with respect to fields: it never decides whether
    a result is still wanted. That check belongs to the FieldController, which
    compares the query's sequence number once the awaitable completes.
    """

    def __init__(
        self,
        provider: GeocodeSuggestionProvider,
        *,
        min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> None:
        self._provider = provider
        self.min_query_length = min_query_length
        self.suggestion_limit = suggestion_limit

    async def fetch(self, query: Query) -> list[Candidate]:
        """Look up candidates for ``query``.

        Raises:
            ValueError: If the query is shorter than ``min_query_length``.
            FetchError: If the provider raises anything or returns unusable
                records.
        """
        if len(query.text) < self.min_query_length:
            raise ValueError(
                f"Query {query.text!r} is shorter than "
                f"{self.min_query_length} characters"
            )

        logger.debug("Fetching suggestions for %r (seq=%d)", query.text, query.sequence)
        try:
            records = await self._provider.lookup(query.text)
        except httpx.HTTPError as e:
            raise FetchError(query.text, str(e) or type(e).__name__) from e
        except GeocodeResponseError as e:
            raise FetchError(query.text, str(e)) from e
        except Exception as e:
            raise FetchError(query.text, f"{type(e).__name__}: {e}") from e

        try:
            candidates = [Candidate.model_validate(r) for r in records]
        except (ValidationError, TypeError) as e:
            raise FetchError(query.text, f"malformed candidate: {e}") from e

        return candidates[: self.suggestion_limit]
