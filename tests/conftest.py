import asyncio
import os
from typing import Any
from unittest.mock import patch

import pytest

from route_planner.core.debouncer import Debouncer
from route_planner.core.field_controller import FieldController
from route_planner.core.suggestion_fetcher import SuggestionFetcher
from route_planner.stores.planner_settings import ENV_LOCATIONIQ_API_KEY


# Short enough to keep the suite fast, long enough to batch same-tick keystrokes
TEST_DEBOUNCE_DELAY = 0.01


async def settle(seconds: float = 0.05) -> None:
    """Let debounce timers fire and ready tasks run."""
    await asyncio.sleep(seconds)


class GatedSuggestionProvider:
    """In-memory suggestion provider whose lookups can be held open.

    ``hold(text)`` makes the lookup for ``text`` block until ``release(text)``,
    which lets tests decide the order in which results come back.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.responses: dict[str, list[dict[str, Any]] | Exception] = {}
        self._gates: dict[str, asyncio.Event] = {}

    def hold(self, text: str) -> None:
        self._gates[text] = asyncio.Event()

    def release(self, text: str) -> None:
        self._gates[text].set()

    async def lookup(self, text: str) -> list[dict[str, Any]]:
        self.calls.append(text)
        gate = self._gates.get(text)
        if gate is not None:
            await gate.wait()
        response = self.responses.get(text, [{"display_name": f"{text} Place"}])
        if isinstance(response, Exception):
            raise response
        return response

    async def aclose(self) -> None:
        pass


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path):
    """Point persistence at a temp dir and hide any real LocationIQ key."""
    with patch.dict(os.environ, {"ROUTE_PLANNER_DIR": str(tmp_path)}):
        os.environ.pop(ENV_LOCATIONIQ_API_KEY, None)
        yield tmp_path


@pytest.fixture
def provider():
    return GatedSuggestionProvider()


@pytest.fixture
def fetcher(provider):
    return SuggestionFetcher(provider)


@pytest.fixture
def debouncer():
    return Debouncer()


@pytest.fixture
def make_field(fetcher, debouncer):
    def factory(name: str = "origin", **kwargs: Any) -> FieldController:
        return FieldController(
            name,
            fetcher=fetcher,
            debouncer=debouncer,
            debounce_delay=TEST_DEBOUNCE_DELAY,
            **kwargs,
        )

    return factory
