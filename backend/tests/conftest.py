"""Root conftest — shared test configuration."""

import os

# Tests always log as plain text and never pick up a developer's custom font
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.pop("AVATAR_FONT_PATH", None)
