"""Text Formatting — pure string transforms (money, camelCase, capitalize, trim, phone).

Invariants:
    - All functions are pure (no IO, no state) and never raise for str input
    - format_money/format_mobile operate on text, not numbers: existing digits are never altered
    - Garbage in, garbage out: non-numeric text passed to format_money is not rejected

Design Decisions:
    - Regexes live in core/patterns.py so they are compiled once and shared with tests
    - format_money does not validate its input; callers pre-validate (documented contract)
"""

from jutils.core.patterns import (
    CAMEL_SEPARATOR_RE,
    MOBILE_RE,
    MONEY_DECIMAL_RE,
    MONEY_INT_RE,
    TRIM_RE,
    WORD_START_RE,
)


def format_money(money: str) -> str:
    """Insert thousands separators into a numeric string.

    "123456789" -> "123,456,789"
    "123456789.123" -> "123,456,789.123"
    """
    pattern = MONEY_DECIMAL_RE if "." in money else MONEY_INT_RE
    return pattern.sub(",", money)


def format_mobile(mobile: str, separator: str = "-") -> str:
    """Split a digit string into groups of four counted from the end.

    "18379836654" -> "183-7983-6654"
    """
    return MOBILE_RE.sub(lambda _: separator, mobile)


def camel_case(text: str) -> str:
    """Collapse -, _ and whitespace runs, uppercasing the character after each run.

    "foo Bar" -> "fooBar", "foo-bar----" -> "fooBar", "foo_bar__" -> "fooBar"
    """
    return CAMEL_SEPARATOR_RE.sub(
        lambda m: m.group(1).upper() if m.group(1) else "", text,
    )


def capitalize(text: str) -> str:
    """Lowercase everything, then uppercase the first letter of each word.

    "hello WORLD" -> "Hello World"
    """
    return WORD_START_RE.sub(lambda m: m.group(0).upper(), text.lower())


def trim_string(text: str) -> str:
    """Remove leading and trailing whitespace (and BOMs); inner whitespace is kept."""
    return TRIM_RE.sub("", text)
