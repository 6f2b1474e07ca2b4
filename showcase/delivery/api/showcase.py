# showcase/delivery/api/showcase.py
from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import JSONResponse
from showcase.delivery.schemas.body import (
    PatternCatalogResponse,
    PatternOut,
    ShowcaseRequest,
    ShowcaseResponse,
    SlotDefOut,
)
from showcase.config.settings import settings
import logging
import traceback

router = APIRouter()
logger = logging.getLogger("uvicorn.error")

def _get_builder(request: Request):
    builder = getattr(request.app.state, "showcase_builder", None)
    if builder is None:
        logger.error("Showcase builder not initialized")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service is not ready. Please try again in a moment.",
        )
    return builder

# Plain def: FastAPI runs it in the threadpool, the build itself is CPU-only
@router.post("/showcase", response_model=ShowcaseResponse)
def build_showcase(request: Request, body: ShowcaseRequest):
    seed_key = body.seed_key
    photo_count = len(body.photos)
    logger.info(f"=== SHOWCASE START for '{seed_key}' ({photo_count} photos) ===")

    if photo_count > settings.MAX_PHOTOS_PER_REQUEST:
        logger.warning(f"[{seed_key}] Rejected: {photo_count} photos exceeds limit of {settings.MAX_PHOTOS_PER_REQUEST}")
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Too many photos: at most {settings.MAX_PHOTOS_PER_REQUEST} per request.",
        )

    try:
        builder = _get_builder(request)
        panels = builder.build_json(body.photos, seed_key)
        logger.info(f"=== SHOWCASE SUCCESS for '{seed_key}': {len(panels)} panels ===")
        return JSONResponse(
            status_code=200,
            content={
                "seed_key": seed_key,
                "photo_count": photo_count,
                "panel_count": len(panels),
                "panels": panels,
            },
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"=== SHOWCASE ERROR for '{seed_key}': {e} ===\n{traceback.format_exc()}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error while building the showcase.",
        )

@router.get("/patterns", response_model=PatternCatalogResponse)
def list_patterns(request: Request):
    builder = _get_builder(request)
    patterns = [
        PatternOut(
            name=p.name,
            slots_needed=p.slots_needed,
            preferred_aspect=p.preferred_aspect.value,
            slots=[
                SlotDefOut(x=s.x, y=s.y, w=s.w, h=s.h, z=s.z, rot=s.rot)
                for s in p.slot_defs
            ],
        )
        for p in builder.patterns
    ]
    return PatternCatalogResponse(patterns=patterns)
