"""Pre-compiled regex patterns shared by the text helpers.

Whole-string validators (time, date, version) are stored unanchored and are
meant to be used with ``fullmatch()``, so a trailing newline never slips
through the way it would with ``$``. Digit classes use ``re.ASCII``.

Usage:
    from jutils.core.patterns import MATCH_COLOR_RE, VERSION_RE

    VERSION_RE.fullmatch("1.2.3")
    MATCH_COLOR_RE.findall("#fff and #123456")
"""

import re

# Thousands separator positions: every 3 digits before "." (decimal text)
# or before the end of the text (integer text). Never at position 0.
MONEY_DECIMAL_RE = re.compile(r"(?!^)(?=(?:\d{3})+\.)", re.ASCII)
MONEY_INT_RE = re.compile(r"(?!^)(?=(?:\d{3})+\Z)", re.ASCII)

# Phone number groups: every 4 digits counted from the end
# 18379836654 -> 183-7983-6654
MOBILE_RE = re.compile(r"(?!^)(?=(?:\d{4})+\Z)", re.ASCII)

# Separator run plus the optional character that follows it (camelCase)
CAMEL_SEPARATOR_RE = re.compile(r"[-_\s]+(.)?")

# First word character of the text and of every whitespace-delimited word
WORD_START_RE = re.compile(r"(?:^|\s+)\w")

# Leading / trailing whitespace, byte-order mark included (JS \s covers U+FEFF)
TRIM_RE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")

# HTML reserved characters and the entity body between "&" and ";"
ESCAPE_RE = re.compile(r"[&<>\"']")
ENTITY_RE = re.compile(r"&([^&;]+);")

# 24-hour clock, H:MM / HH:MM, single-digit minute allowed
# Matches: "01:14", "1:1", "23:59"  Rejects: "23:60", "24:00"
CHECK_24_TIME_RE = re.compile(r"(?:(?:0?|1)\d|2[0-3]):(?:0?|[1-5])\d", re.ASCII)

# YYYY<sep>MM<sep>DD with the same separator (-, . or /) on both sides
CHECK_DATE_RE = re.compile(
    r"\d{4}([-./])(?:0[1-9]|1[0-2])\1(?:0[1-9]|[12]\d|3[01])", re.ASCII,
)

# CSS hex colors: #RGB or #RRGGBB
MATCH_COLOR_RE = re.compile(r"#(?:[\da-fA-F]{6}|[\da-fA-F]{3})", re.ASCII)

# http: / https: prefix (protocol-relative "//" does not count)
CHECK_PROTOCOL_RE = re.compile(r"https?:")

# Three dot-separated digit groups: 1.2.3, 1.000.1
VERSION_RE = re.compile(r"(?:\d+\.){2}\d+", re.ASCII)

# <img ... src="http(s)://..." ...> or src="//..."; captures the URL (group 1)
IMG_SRC_RE = re.compile(r'<img[^>]+src="((?:https?:)?//[^"]+)"[^>]*?>', re.IGNORECASE)

# First non-space character after each word boundary (avatar initials)
INITIAL_CHAR_RE = re.compile(r"\b\S")


def query_param_re(name: str) -> re.Pattern[str]:
    """Build the ``[?&]name=value`` pattern for one parameter; group 1 is the raw value."""
    return re.compile(rf"[?&]{re.escape(name)}=([^&]*)(?:&|\Z)")
