"""
API v1 Router
Aggregates all v1 API routes
"""
from fastapi import APIRouter

from app.api.v1.scripts import router as scripts_router
from app.api.v1.thumbnails import router as thumbnails_router

# Main v1 router
api_router = APIRouter(prefix="/api/v1")

# Include sub-routers
api_router.include_router(scripts_router)
api_router.include_router(thumbnails_router)
