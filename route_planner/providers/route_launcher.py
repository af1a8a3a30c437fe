"""Opens a committed route in Google Maps directions."""

from __future__ import annotations

import logging
import webbrowser
from urllib.parse import urlencode


logger = logging.getLogger(__name__)

DEFAULT_DIRECTIONS_URL = "https://www.google.com/maps/dir/"


def build_directions_url(
    origin: str, destination: str, base_url: str = DEFAULT_DIRECTIONS_URL
) -> str:
    """Build a Google Maps universal directions URL."""
    query = urlencode({"api": 1, "origin": origin, "destination": destination})
    return f"{base_url}?{query}"


class GoogleMapsRouteLauncher:
    def __init__(self, base_url: str = DEFAULT_DIRECTIONS_URL) -> None:
        self.base_url = base_url

    def open(self, origin: str, destination: str) -> None:
        url = build_directions_url(origin, destination, self.base_url)
        if not webbrowser.open_new_tab(url):
            logger.warning("No browser available to open %s", url)
