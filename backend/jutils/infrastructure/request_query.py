"""URL Query Provider — QueryProvider implementation over a URL string.

Invariants:
    - search() returns "?" + raw (still percent-encoded) query, or "" when the URL has none
    - The URL is parsed once, at construction
"""

from urllib.parse import urlsplit


class UrlQueryProvider:
    """Exposes the query part of a URL the way a browser's location.search does."""

    def __init__(self, url: str):
        self._query = urlsplit(url).query

    def search(self) -> str:
        return f"?{self._query}" if self._query else ""
