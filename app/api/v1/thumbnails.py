"""
Thumbnail API endpoints
"""
from fastapi import APIRouter, HTTPException, status
import asyncio
import logging

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.schemas.thumbnail import (
    GeneratedThumbnail,
    ThumbnailOptionsResponse,
    ThumbnailRequest,
)
from app.services.thumbnail_service import ThumbnailGenerationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/thumbnails", tags=["Thumbnails"])

# Initialize service
thumbnail_service = ThumbnailGenerationService()


@router.get("/options", response_model=ThumbnailOptionsResponse)
async def get_thumbnail_options():
    """List moods and color schemes with their palettes"""
    return thumbnail_service.describe_options()


@router.post("/generate", response_model=GeneratedThumbnail, status_code=status.HTTP_201_CREATED)
async def generate_thumbnail(request: ThumbnailRequest):
    """
    Generate four thumbnail variations for a topic, mood and color scheme
    """
    logger.info(f"Thumbnail generation request: topic={request.topic!r}, mood={request.mood.value}, colorScheme={request.colorScheme.value}")

    await asyncio.sleep(settings.THUMBNAIL_LATENCY_SECONDS)

    try:
        return thumbnail_service.generate_thumbnail(request)
    except ValidationError:
        raise
    except Exception as e:
        logger.error(f"Error generating thumbnail: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate thumbnail: {str(e)}",
        )
