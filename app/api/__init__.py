"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api import debug, health, users, welcome

router = APIRouter()
router.include_router(users.router, tags=["users"])
router.include_router(welcome.router, tags=["welcome"])
router.include_router(debug.router, tags=["debug"])
router.include_router(health.router, prefix="/health", tags=["health"])
