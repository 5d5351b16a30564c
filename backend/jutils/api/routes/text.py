"""Text Routes — formatting, validation and extraction over request text.

Invariants:
    - One core helper per operation; routes add no logic of their own
    - Unknown operation/check/kind path values rejected by enum validation (400)
    - Helpers never raise for text input, so these routes only fail on bad bodies

Design Decisions:
    - Operation tables keyed by Enum: the OpenAPI schema lists every valid value
"""

import logging
from collections.abc import Callable

from fastapi import APIRouter

from jutils.core.domain_types import CheckKind, ExtractKind, TextOperation
from jutils.core.escape_html import escape, unescape
from jutils.core.format_text import (
    camel_case,
    capitalize,
    format_mobile,
    format_money,
    trim_string,
)
from jutils.core.match_text import (
    has_http_protocol,
    is_24_hour_time,
    is_date,
    is_version,
    match_colors,
    match_imgs,
)
from jutils.schemas.text import CheckResult, ExtractResult, TextInput, TextResult

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["text"])

_TRANSFORMS: dict[TextOperation, Callable[[str], str]] = {
    TextOperation.MONEY: format_money,
    TextOperation.CAMEL_CASE: camel_case,
    TextOperation.CAPITALIZE: capitalize,
    TextOperation.TRIM: trim_string,
    TextOperation.ESCAPE: escape,
    TextOperation.UNESCAPE: unescape,
    TextOperation.MOBILE: format_mobile,
}

_CHECKS: dict[CheckKind, Callable[[str], bool]] = {
    CheckKind.TIME_24H: is_24_hour_time,
    CheckKind.DATE: is_date,
    CheckKind.PROTOCOL: has_http_protocol,
    CheckKind.VERSION: is_version,
}

_EXTRACTORS: dict[ExtractKind, Callable[[str], list[str]]] = {
    ExtractKind.COLORS: match_colors,
    ExtractKind.IMAGES: match_imgs,
}


@router.post("/text/{operation}", response_model=TextResult)
async def transform_text(operation: TextOperation, body: TextInput):
    """Apply one text transform (money, camel-case, capitalize, ...)."""
    logger.debug(
        f"Transforming {len(body.text)} chars",
        extra={"operation": operation.value},
    )
    return TextResult(operation=operation, result=_TRANSFORMS[operation](body.text))


@router.post("/match/{check}", response_model=CheckResult)
async def check_text(check: CheckKind, body: TextInput):
    """Validate the whole text against one pattern."""
    return CheckResult(check=check, valid=_CHECKS[check](body.text))


@router.post("/extract/{kind}", response_model=ExtractResult)
async def extract_text(kind: ExtractKind, body: TextInput):
    """Collect every color code / image URL from the text, in order."""
    return ExtractResult(kind=kind, matches=_EXTRACTORS[kind](body.text))
