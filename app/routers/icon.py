# =============================================================================
# app/routers/icon.py - Placeholder App Icon
# =============================================================================
# Serves a 1x1 transparent PNG as /icon.png until a real icon ships.
# =============================================================================

import base64

from fastapi import APIRouter
from fastapi.responses import Response

router = APIRouter()

ONE_BY_ONE_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMB/axhVZwAAAAASUVORK5CYII="
)
ICON_PNG = base64.b64decode(ONE_BY_ONE_PNG_BASE64)
ICON_CACHE_CONTROL = "public, max-age=31536000, immutable"


@router.get("/icon.png", include_in_schema=False)
async def icon():
    """Placeholder icon, cacheable for a year."""
    return Response(
        content=ICON_PNG,
        media_type="image/png",
        headers={"Cache-Control": ICON_CACHE_CONTROL},
    )
