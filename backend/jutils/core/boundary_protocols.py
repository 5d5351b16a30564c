"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Host capabilities (current query string, 2D drawing surface) accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: drawing and query lookup are one-shot, in-memory calls
"""

from typing import Protocol

from jutils.core.domain_types import DataUri


class QueryProvider(Protocol):
    """Read-only access to the current location's query string.

    search() returns the query part including its leading "?" (e.g. "?a=1&b=2"),
    or "" when there is none.
    """
    def search(self) -> str: ...


class DrawingSurface(Protocol):
    """Offscreen 2D surface — the three operations the avatar helper needs."""
    def fill_rect(
        self, x: int, y: int, width: int, height: int, color: str,
    ) -> None: ...
    def draw_centered_text(
        self, text: str, x: float, y: float, color: str,
    ) -> None: ...
    def to_data_uri(self) -> DataUri: ...


class SurfaceFactory(Protocol):
    """Allocates a fresh DrawingSurface of the given pixel size."""
    def __call__(self, width: int, height: int) -> DrawingSurface: ...
