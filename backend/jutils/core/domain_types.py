"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - HexColor is always "#" + 6 lowercase hex digits when produced by string_to_color
    - DataUri always starts with "data:image/png;base64,"
    - Operation names exposed over HTTP are encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and validate FastAPI path params without custom code
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

HexColor = NewType("HexColor", str)     # "#rrggbb"
DataUri = NewType("DataUri", str)       # "data:image/png;base64,..."


# ─── Enums ───────────────────────────────────────────────────────

class TextOperation(str, Enum):
    """Text-to-text transforms reachable via POST /api/v1/text/{operation}."""
    MONEY = "money"
    CAMEL_CASE = "camel-case"
    CAPITALIZE = "capitalize"
    TRIM = "trim"
    ESCAPE = "escape"
    UNESCAPE = "unescape"
    MOBILE = "mobile"


class CheckKind(str, Enum):
    """Whole-string validators reachable via POST /api/v1/match/{check}."""
    TIME_24H = "time-24h"
    DATE = "date"
    PROTOCOL = "protocol"
    VERSION = "version"


class ExtractKind(str, Enum):
    """List extractors reachable via POST /api/v1/extract/{kind}."""
    COLORS = "colors"
    IMAGES = "images"
