"""Text Schemas — bodies and responses for the text, match and extract routes.

Invariants:
    - TextInput.text: 0-100000 chars, kept verbatim (no stripping: whitespace is data here)
    - Responses echo the operation so batched client calls can be correlated
"""

from pydantic import BaseModel, Field

from jutils.core.domain_types import CheckKind, ExtractKind, TextOperation

MAX_TEXT_LENGTH = 100_000


class TextInput(BaseModel):
    """Raw text to transform or inspect."""
    text: str = Field(max_length=MAX_TEXT_LENGTH)


class TextResult(BaseModel):
    operation: TextOperation
    result: str


class CheckResult(BaseModel):
    check: CheckKind
    valid: bool


class ExtractResult(BaseModel):
    kind: ExtractKind
    matches: list[str]


class QueryValue(BaseModel):
    """Decoded query parameter; value is "" when the parameter is absent."""
    name: str
    value: str
