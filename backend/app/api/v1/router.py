"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from .featured_products import router as featured_products_router
from .health import router as health_router
from .printify_cache import router as printify_cache_router

router = APIRouter(prefix="/api/v1")

router.include_router(health_router)
router.include_router(featured_products_router)
router.include_router(printify_cache_router)
