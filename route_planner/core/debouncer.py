"""Per-key trailing debounce on top of the asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Hashable


logger = logging.getLogger(__name__)


class Debouncer:
    """Coalesces bursts of calls into a single trailing invocation per key.

    Each key owns at most one pending timer handle. Scheduling under a key
    cancels that key's pending handle and replaces it, so origin and
    destination streams can share one Debouncer without interfering.

    Usage:
        debouncer = Debouncer()
        debouncer.schedule("origin", 0.3, lambda: fetch("Berlin"))
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handles: dict[Hashable, asyncio.TimerHandle] = {}

    def schedule(
        self, key: Hashable, delay: float, action: Callable[[], object]
    ) -> None:
        """Run ``action`` once ``delay`` seconds after the last call for ``key``."""
        self.cancel(key)
        loop = self._loop or asyncio.get_running_loop()
        self._handles[key] = loop.call_later(max(delay, 0.0), self._fire, key, action)

    def cancel(self, key: Hashable) -> bool:
        """Drop the pending action for ``key``.

        Returns:
            True if an action was pending and has been cancelled.
        """
        handle = self._handles.pop(key, None)
        if handle is None:
            return False
        handle.cancel()
        logger.debug("Cancelled pending action for %r", key)
        return True

    def cancel_all(self) -> None:
        for key in list(self._handles):
            self.cancel(key)

    def pending(self, key: Hashable) -> bool:
        return key in self._handles

    def _fire(self, key: Hashable, action: Callable[[], object]) -> None:
        self._handles.pop(key, None)
        try:
            action()
        except Exception:
            logger.exception("Debounced action for %r failed", key)
