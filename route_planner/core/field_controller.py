"""FieldController - drives one location field's autocomplete state machine.

A field moves between three states:
1. CLOSED: no suggestions. Initial state, and after blur, short text,
   selection or swap.
2. OPEN: suggestions may be shown. Entered on keystroke/focus once the text
   is long enough.
3. OVERRIDDEN: the text came from the device location; suggestions stay
   suppressed until the next keystroke.

Keystrokes schedule a debounced lookup. Every lookup is tagged with the
field's sequence number at issue time, and every transition into CLOSED or
OVERRIDDEN advances that number, so a result that comes back for anything
but the latest query is dropped.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from route_planner.core.errors import FetchError
from route_planner.core.models import (
    Candidate,
    FieldState,
    FieldStatus,
    Query,
    ResultDisposition,
    format_coordinates,
)


if TYPE_CHECKING:
    from route_planner.core.debouncer import Debouncer
    from route_planner.core.suggestion_fetcher import SuggestionFetcher


logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_DELAY = 0.3


class FieldController:
    def __init__(
        self,
        name: str,
        *,
        fetcher: SuggestionFetcher,
        debouncer: Debouncer,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
        on_change: Callable[[str, FieldState], None] | None = None,
    ) -> None:
        """Initialize the field controller.

        Args:
            name: Field name, also used as this field's debounce key.
            fetcher: Issues suggestion lookups.
            debouncer: Shared debouncer; keys keep fields independent.
            debounce_delay: Quiet period in seconds before a lookup is issued.
            on_change: Called with (name, state snapshot) after every mutation.
        """
        self.name = name
        self._fetcher = fetcher
        self._debouncer = debouncer
        self._debounce_delay = debounce_delay
        self._on_change = on_change
        self._state = FieldState()
        self._sequence = 0
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> FieldState:
        return self._state.snapshot()

    @property
    def raw_text(self) -> str:
        return self._state.raw_text

    @property
    def sequence(self) -> int:
        """Sequence number of the latest issued (or invalidated) query."""
        return self._sequence

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    @property
    def min_query_length(self) -> int:
        return self._fetcher.min_query_length

    # UI events

    def on_text_change(self, new_text: str) -> None:
        state = self._state
        state.raw_text = new_text
        state.is_overridden = False
        state.is_selecting = False

        if len(new_text) >= self.min_query_length:
            state.status = FieldStatus.OPEN
            self._debouncer.schedule(
                self.name,
                self._debounce_delay,
                lambda: self._issue_fetch(new_text),
            )
        else:
            self._close()
        self._changed()

    def on_focus(self) -> None:
        # Armed until a keystroke or selection, so a blur racing a suggestion
        # click cannot wipe the list first. A list already showing is hidden
        # and not re-requested; the next keystroke schedules a fresh lookup.
        state = self._state
        state.is_selecting = True
        state.suggestions = []
        if not state.is_overridden and len(state.raw_text) >= self.min_query_length:
            state.status = FieldStatus.OPEN
        self._changed()

    def on_blur(self) -> None:
        state = self._state
        if state.is_selecting:
            return
        if state.status is FieldStatus.OVERRIDDEN:
            state.suggestions = []
        else:
            self._close()
        self._changed()

    def on_suggestion_pointer_down(self, candidate: Candidate) -> None:
        state = self._state
        state.raw_text = candidate.display_name
        state.is_selecting = False
        state.is_overridden = False
        self._close()
        self._changed()

    def on_device_location_resolved(self, latitude: float, longitude: float) -> None:
        state = self._state
        state.raw_text = format_coordinates(latitude, longitude)
        state.is_overridden = True
        state.suggestions = []
        state.status = FieldStatus.OVERRIDDEN
        self._invalidate()
        logger.info("%s set from device location: %s", self.name, state.raw_text)
        self._changed()

    def on_fetch_result(
        self, query: Query, result: Sequence[Candidate] | FetchError
    ) -> ResultDisposition:
        """Apply a lookup result if it is still wanted.

        A FetchError that is still current empties the suggestion list.
        """
        state = self._state
        if query.sequence != self._sequence:
            logger.debug(
                "Discarding stale %s result for %r (seq=%d, latest=%d)",
                self.name,
                query.text,
                query.sequence,
                self._sequence,
            )
            return ResultDisposition.STALE_RESULT_DISCARDED

        if state.status is not FieldStatus.OPEN or state.is_selecting:
            return ResultDisposition.FIELD_NOT_OPEN

        state.suggestions = [] if isinstance(result, FetchError) else list(result)
        self._changed()
        return ResultDisposition.APPLIED

    # Coordinator operations

    def set_text(self, text: str) -> None:
        """Replace the text without scheduling a lookup."""
        self._state.raw_text = text
        self._changed()

    def reset(self) -> None:
        """Return to CLOSED with both flags cleared, keeping the text."""
        state = self._state
        state.is_selecting = False
        state.is_overridden = False
        self._close()
        self._changed()

    async def aclose(self) -> None:
        """Cancel the pending debounce and every in-flight lookup."""
        self._invalidate()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    # Internals

    def _close(self) -> None:
        self._state.suggestions = []
        self._state.status = FieldStatus.CLOSED
        self._invalidate()

    def _invalidate(self) -> None:
        self._debouncer.cancel(self.name)
        self._sequence += 1

    def _issue_fetch(self, text: str) -> None:
        self._sequence += 1
        query = Query(text=text, sequence=self._sequence)
        task = asyncio.get_running_loop().create_task(self._run_fetch(query))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_fetch(self, query: Query) -> None:
        result: list[Candidate] | FetchError
        try:
            result = await self._fetcher.fetch(query)
        except FetchError as e:
            logger.warning("%s suggestions unavailable: %s", self.name, e)
            result = e
        self.on_fetch_result(query, result)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.name, self._state.snapshot())
