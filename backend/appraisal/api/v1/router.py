"""API v1 router configuration."""

from fastapi import APIRouter

from appraisal.api.v1.endpoints import appraisals, health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    appraisals.router,
    prefix="/appraisals",
    tags=["appraisals"],
)
