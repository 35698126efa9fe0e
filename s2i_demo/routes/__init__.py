from fastapi import APIRouter
from .home_route import router as home_router
from .health_route import router as health_router
from .info_route import router as info_router

# Main router that combines all route modules
router = APIRouter()

# Paths are exact; anything else falls through to the framework 404
router.include_router(home_router, tags=["Home"])
router.include_router(health_router, tags=["Health"])
router.include_router(info_router, prefix="/api", tags=["Info"])

__all__ = ["router"]
