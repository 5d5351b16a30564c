"""Initials Avatar — derive initials from a display name and render them.

Invariants:
    - Initials are at most two characters: first and last word initials, uppercased
    - A single-word name yields one initial (no duplication)
    - Canvas is always AVATAR_SIZE x AVATAR_SIZE, initials centered on both axes
    - Rendering happens only through the DrawingSurface Protocol

Design Decisions:
    - Surface allocated per call via SurfaceFactory: no shared mutable state between avatars
    - Bad colors are the surface's concern: an unparseable color keeps the current fill, nothing raises
"""

import logging

from jutils.core.boundary_protocols import SurfaceFactory
from jutils.core.domain_types import DataUri
from jutils.core.patterns import INITIAL_CHAR_RE

logger = logging.getLogger(__name__)

AVATAR_SIZE = 200


def extract_initials(name: str) -> str:
    """First and last word initials: "Kiarash Soleimanzadeh" -> "KS", "alice" -> "A"."""
    letters = "".join(INITIAL_CHAR_RE.findall(name))
    if len(letters) > 1:
        letters = letters[0] + letters[-1]
    return letters.upper()


def generate_avatar(
    name: str,
    foreground_color: str,
    background_color: str,
    surface_factory: SurfaceFactory,
) -> DataUri:
    """Render the initials of ``name`` on a square background, return a PNG data URI."""
    initials = extract_initials(name)
    surface = surface_factory(AVATAR_SIZE, AVATAR_SIZE)
    surface.fill_rect(0, 0, AVATAR_SIZE, AVATAR_SIZE, background_color)
    surface.draw_centered_text(
        initials, AVATAR_SIZE / 2, AVATAR_SIZE / 2, foreground_color,
    )
    logger.debug(
        f"Rendered avatar {initials!r}", extra={"operation": "generate_avatar"},
    )
    return surface.to_data_uri()
