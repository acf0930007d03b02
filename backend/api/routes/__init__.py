"""API Routes."""

from fastapi import APIRouter

from .admin import router as admin_router
from .articles import router as articles_router
from .auth import router as auth_router

# Create main API router
api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(articles_router)
api_router.include_router(admin_router)
