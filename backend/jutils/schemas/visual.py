"""Visual Schemas — avatar and color payloads.

Invariants:
    - AvatarCreate.name: 1-200 chars, stripped, non-empty
    - AvatarCreate colors must parse as CSS colors (names, #hex, rgb()/hsl()) — rejected here with 400
    - background_color None means "derive from name via string_to_color"

Design Decisions:
    - Colors checked at the API boundary; the renderer itself never raises on a bad color
"""

from PIL import ImageColor
from pydantic import BaseModel, Field, field_validator


class AvatarCreate(BaseModel):
    """Avatar request — display name plus optional colors."""
    name: str = Field(min_length=1, max_length=200)
    foreground_color: str = Field("white", min_length=1, max_length=64)
    background_color: str | None = Field(None, min_length=1, max_length=64)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("foreground_color", "background_color")
    @classmethod
    def check_color(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ImageColor.getrgb(v)
        except ValueError:
            raise ValueError(f"unrecognized color: {v!r}")
        return v


class AvatarResponse(BaseModel):
    initials: str
    background_color: str
    data_uri: str


class ColorResponse(BaseModel):
    text: str
    color: str
