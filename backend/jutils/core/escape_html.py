"""HTML Escaping — the five reserved characters and their named entities.

Invariants:
    - escape() touches only & < > " ' (left to right, non-overlapping)
    - unescape() reverses exactly those five entities; unknown &...; sequences pass through
    - unescape(escape(s)) == s for any entity-free s
"""

from jutils.core.patterns import ENTITY_RE, ESCAPE_RE

_ESCAPE_MAP: dict[str, str] = {
    "&": "amp",
    "<": "lt",
    ">": "gt",
    '"': "quot",
    "'": "#39",
}

_UNESCAPE_MAP: dict[str, str] = {name: char for char, name in _ESCAPE_MAP.items()}


def escape(text: str) -> str:
    """Replace HTML reserved characters with entities: "<div>" -> "&lt;div&gt;"."""
    return ESCAPE_RE.sub(lambda m: f"&{_ESCAPE_MAP[m.group(0)]};", text)


def unescape(text: str) -> str:
    """Replace the five known entities with their characters; leave others untouched."""
    return ENTITY_RE.sub(
        lambda m: _UNESCAPE_MAP.get(m.group(1), m.group(0)), text,
    )
