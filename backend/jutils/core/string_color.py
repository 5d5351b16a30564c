"""String Color — deterministic text-to-#rrggbb mapping.

Invariants:
    - Same text always yields the same color (no seed, no platform dependence)
    - Hash is a signed 32-bit value: hash = code + ((hash << 5) - hash), wrapped every step
    - Byte i of the color is bits [8i, 8i+8) of the hash; output is lowercase, zero-padded
"""

from jutils.core.domain_types import HexColor

_INT32_MASK = 0xFFFFFFFF


def string_hash(text: str) -> int:
    """Signed 32-bit rolling hash over the code points of text."""
    value = 0
    for char in text:
        value = (ord(char) + (value << 5) - value) & _INT32_MASK
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def string_to_color(text: str) -> HexColor:
    """Map text to a stable color, e.g. "a" -> "#610000"."""
    value = string_hash(text)
    return HexColor(
        "#" + "".join(f"{(value >> (i * 8)) & 0xFF:02x}" for i in range(3)),
    )
