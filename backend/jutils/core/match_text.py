"""Pattern Matchers — stateless predicates and extractors over free text.

Invariants:
    - Predicates return bool, extractors return list[str] in order of appearance
    - Absent or malformed input yields False / [] (never raises)
    - Validators match the whole string via fullmatch()
"""

from jutils.core.patterns import (
    CHECK_24_TIME_RE,
    CHECK_DATE_RE,
    CHECK_PROTOCOL_RE,
    IMG_SRC_RE,
    MATCH_COLOR_RE,
    VERSION_RE,
)


def is_24_hour_time(text: str) -> bool:
    """Valid: "01:14", "1:1". Invalid: "23:60"."""
    return CHECK_24_TIME_RE.fullmatch(text) is not None


def is_date(text: str) -> bool:
    """YYYY-MM-DD, YYYY.MM.DD or YYYY/MM/DD; mixed separators reject."""
    return CHECK_DATE_RE.fullmatch(text) is not None


def match_colors(text: str) -> list[str]:
    """Every #RGB / #RRGGBB color in text, original casing kept."""
    return MATCH_COLOR_RE.findall(text)


def has_http_protocol(text: str) -> bool:
    """True for http: and https: URLs; protocol-relative "//host" is False."""
    return CHECK_PROTOCOL_RE.match(text) is not None


def is_version(text: str) -> bool:
    """Exactly three dot-separated digit groups: "1.1.1" yes, "1.000.1.1" no."""
    return VERSION_RE.fullmatch(text) is not None


def match_imgs(html: str) -> list[str]:
    """Absolute or protocol-relative src URLs of every <img> tag, in document order.

    Only double-quoted src attributes are recognized.
    """
    return IMG_SRC_RE.findall(html)
