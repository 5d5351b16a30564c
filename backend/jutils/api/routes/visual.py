"""Visual Routes — initials avatars and deterministic string colors.

Invariants:
    - Omitted background_color falls back to string_to_color(name)
    - Unparseable colors rejected by AvatarCreate (400 VALIDATION_ERROR) before rendering
    - A fresh drawing surface per request (factory injected via Depends)
"""

import logging

from fastapi import APIRouter, Depends, Query

from jutils.core.avatar import extract_initials, generate_avatar
from jutils.core.boundary_protocols import SurfaceFactory
from jutils.core.string_color import string_to_color
from jutils.infrastructure.pillow_surface import get_surface_factory
from jutils.schemas.visual import AvatarCreate, AvatarResponse, ColorResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["visual"])


@router.post("/avatars", response_model=AvatarResponse)
async def create_avatar(
    body: AvatarCreate,
    surface_factory: SurfaceFactory = Depends(get_surface_factory),
):
    """Render a 200x200 PNG avatar with the name's initials."""
    background = body.background_color or string_to_color(body.name)
    data_uri = generate_avatar(
        body.name, body.foreground_color, background, surface_factory,
    )
    logger.info(
        f"Avatar rendered ({len(data_uri)} bytes)",
        extra={"operation": "generate_avatar"},
    )
    return AvatarResponse(
        initials=extract_initials(body.name),
        background_color=background,
        data_uri=data_uri,
    )


@router.get("/colors", response_model=ColorResponse)
async def color_for_text(text: str = Query(..., max_length=10_000)):
    """Stable #rrggbb color for any text."""
    return ColorResponse(text=text, color=string_to_color(text))
