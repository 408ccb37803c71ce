"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter, Depends

from api.deps import get_settings
from backend.settings import Settings

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


def _document_store_kind(settings: Settings) -> str:
    if settings.use_in_memory_store:
        return "in-memory"
    return "firestore" if settings.firestore_project_id else "unconfigured"


@router.get("/health/ready")
def readiness(settings: Settings = Depends(get_settings)):
    """
    Readiness endpoint: reports which backends are configured.

    Does not contact the backends.
    """
    return {
        "status": "ok",
        "environment": settings.environment,
        "document_store": _document_store_kind(settings),
        "photo_storage": "supabase" if settings.supabase_url and settings.supabase_key else "unconfigured",
    }
