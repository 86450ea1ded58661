"""Error types raised while fetching items."""

from typing import Optional


class FetchError(Exception):
    """Transport failure or malformed page envelope."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url
