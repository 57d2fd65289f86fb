"""Health check endpoint."""

from fastapi import APIRouter

from appraisal.config import settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    The appraisal engine has no external dependencies, so a running API is
    a healthy one.

    Returns:
        dict: Health status with API status and environment
    """
    return {
        "status": "healthy",
        "api": "healthy",
        "environment": settings.ENVIRONMENT,
    }
