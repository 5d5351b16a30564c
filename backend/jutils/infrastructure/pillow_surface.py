"""Pillow Drawing Surface — DrawingSurface implementation backed by an RGBA image.

Invariants:
    - Every surface starts fully transparent with an opaque black fill color (same as a fresh HTML canvas)
    - Colors accept CSS names, #rgb/#rrggbb and rgb()/hsl() — anything ImageColor parses
    - An unparseable color keeps the current fill color and logs a warning (never raises)
    - Text is anchored middle-middle ("mm") at the given point
    - to_data_uri() always returns "data:image/png;base64,..."

Design Decisions:
    - Font resolved once per (path, size) via lru_cache; size comes from Settings only
    - Missing/broken font file degrades to Pillow's bundled scalable font with a warning
"""

import base64
import io
import logging
from functools import lru_cache, partial

from PIL import Image, ImageColor, ImageDraw, ImageFont, features

from jutils.config import get_settings
from jutils.core.boundary_protocols import SurfaceFactory
from jutils.core.domain_types import DataUri
from jutils.core.errors import ErrorContext, RenderError

logger = logging.getLogger(__name__)

PNG_DATA_URI_PREFIX = "data:image/png;base64,"
DEFAULT_FILL = (0, 0, 0, 255)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


@lru_cache
def load_font(path: str | None, size: int) -> Font:
    """Load a TrueType font, or Pillow's built-in font at ``size`` when path is None."""
    if path:
        try:
            return ImageFont.truetype(path, size)
        except OSError as e:
            logger.warning(
                f"Cannot load avatar font {path!r}: {e}; using default font",
                extra={"operation": "load_font"},
            )
    return ImageFont.load_default(size=size)


def configured_font() -> Font:
    """Font named by Settings (avatar_font_path / avatar_font_size)."""
    settings = get_settings()
    return load_font(settings.avatar_font_path, settings.avatar_font_size)


def renderer_available() -> bool:
    """True when Pillow was built with FreeType (needed for sized text)."""
    return bool(features.check("freetype2"))


class PillowSurface:
    """Offscreen RGBA image exposing fill_rect / draw_centered_text / to_data_uri."""

    def __init__(self, width: int, height: int, font: Font | None = None):
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self.image)
        self._font = font
        self._fill: tuple[int, ...] = DEFAULT_FILL

    def _set_fill(self, color: str, field: str) -> None:
        try:
            self._fill = ImageColor.getcolor(color, "RGBA")
        except ValueError:
            logger.warning(
                f"Ignoring unrecognized color {color!r}",
                extra={"operation": "generate_avatar", "field": field},
            )

    def fill_rect(
        self, x: int, y: int, width: int, height: int, color: str,
    ) -> None:
        self._set_fill(color, "background_color")
        self._draw.rectangle(
            (x, y, x + width - 1, y + height - 1), fill=self._fill,
        )

    def draw_centered_text(
        self, text: str, x: float, y: float, color: str,
    ) -> None:
        self._set_fill(color, "foreground_color")
        if not text:
            return
        font = self._font or configured_font()
        try:
            self._draw.text((x, y), text, fill=self._fill, font=font, anchor="mm")
        except ValueError as e:
            # bitmap fonts (Pillow without FreeType) reject anchors
            raise RenderError(str(e), ErrorContext(operation="generate_avatar"))

    def to_data_uri(self) -> DataUri:
        buffer = io.BytesIO()
        try:
            self.image.save(buffer, format="PNG")
        except OSError as e:
            raise RenderError(str(e), ErrorContext(operation="generate_avatar"))
        encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
        return DataUri(PNG_DATA_URI_PREFIX + encoded)


def get_surface_factory() -> SurfaceFactory:
    """FastAPI dependency — PillowSurface factory using the configured font."""
    return partial(PillowSurface, font=configured_font())
