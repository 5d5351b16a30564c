"""String color tests — deterministic 32-bit hash to #rrggbb.

Tests cover:
    - Known values for short strings
    - Hash stays within signed 32-bit range for long input
    - Same input → same color
    - Output format (#, six lowercase hex digits)
"""

import re

from jutils.core.string_color import string_hash, string_to_color


def test_empty_string_is_black():
    assert string_to_color("") == "#000000"


def test_single_character():
    # hash("a") == 97 == 0x61 -> low byte first
    assert string_to_color("a") == "#610000"


def test_two_characters():
    # 98 + ((97 << 5) - 97) == 3105 == 0x000c21
    assert string_hash("ab") == 3105
    assert string_to_color("ab") == "#210c00"


def test_hash_is_signed_32_bit():
    value = string_hash("Kiarash Soleimanzadeh" * 50)
    assert -(2 ** 31) <= value < 2 ** 31


def test_deterministic():
    assert string_to_color("Kiarash Soleimanzadeh") == string_to_color("Kiarash Soleimanzadeh")


def test_format():
    for text in ("Kiarash Soleimanzadeh", "x", "ünïcödé", "🙂 emoji"):
        assert re.fullmatch(r"#[0-9a-f]{6}", string_to_color(text))


def test_different_inputs_usually_differ():
    assert string_to_color("alice") != string_to_color("bob")
