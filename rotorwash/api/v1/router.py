"""
API v1 Router - aggregates the settings page and theme fragment endpoints
"""
from fastapi import APIRouter

from rotorwash.api.v1 import settings, theme

router = APIRouter(
    responses={
        422: {"description": "Validation Error"},
        503: {"description": "Settings storage unavailable"},
    }
)

router.include_router(settings.router)
router.include_router(theme.router)


@router.get("/health", tags=["Health"])
def health() -> dict:
    return {"status": "ok"}
