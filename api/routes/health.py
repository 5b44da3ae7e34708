"""Health check route"""

from fastapi import APIRouter
import logging

from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("recipebox.api.health")


@router.get("/health")
def health_check():
    """Basic liveness check; does not touch the database."""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment.value,
    }
