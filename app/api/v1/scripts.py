"""
Script API endpoints
Endpoints for generating and exporting video scripts
"""
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response
import asyncio
import logging

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.schemas.script import (
    GeneratedScript,
    ScriptOptionsResponse,
    ScriptRequest,
)
from app.services.export_service import ExportService
from app.services.script_service import ScriptGenerationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scripts", tags=["Scripts"])

# Initialize services
script_service = ScriptGenerationService()
export_service = ExportService()


@router.get("/options", response_model=ScriptOptionsResponse)
async def get_script_options():
    """
    List the allowed values for every script request field,
    including the word count, duration and point count of each length.
    """
    return script_service.describe_options()


@router.post(
    "/generate",
    response_model=GeneratedScript,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Empty topic"},
        422: {"description": "Invalid request"},
        500: {"description": "Server error"},
    },
)
async def generate_script(request: ScriptRequest):
    """
    Generate a video script.

    - **topic**: Topic of the video (required, non-empty)
    - **length**: short, medium or long
    - **tone**: professional, casual, educational or entertaining
    - **contentType**: tutorial, analysis, story, review or interview
    - **targetAudience**: beginner, intermediate, advanced or general

    Returns the script sections with word count, estimated duration,
    SEO keywords and chapter timestamps.
    """
    logger.info(f"Script generation request: topic={request.topic!r}, length={request.length.value}, contentType={request.contentType}")

    await asyncio.sleep(settings.SCRIPT_LATENCY_SECONDS)

    try:
        script = script_service.generate_script(request)
        logger.info(f"Script generated: title={script.title!r}, mainPoints={len(script.mainPoints)}")
        return script
    except ValidationError:
        raise
    except Exception as e:
        logger.error(f"Error generating script: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate script: {str(e)}",
        )


@router.post(
    "/export",
    response_class=Response,
    responses={
        200: {"content": {"text/plain": {}}, "description": "Script as a text document"},
        400: {"description": "Empty topic"},
    },
)
async def export_script(request: ScriptRequest):
    """
    Generate a script and return it as a downloadable text document.
    """
    logger.info(f"Script export request: topic={request.topic!r}")

    await asyncio.sleep(settings.SCRIPT_LATENCY_SECONDS)

    try:
        script = script_service.generate_script(request)
        content = export_service.script_to_text(script, request.topic, request)
        filename = export_service.script_filename(script)

        headers = {
            "Content-Disposition": f'attachment; filename="{filename}"',
        }
        return Response(
            content=content,
            media_type="text/plain; charset=utf-8",
            headers=headers,
        )
    except ValidationError:
        raise
    except Exception as e:
        logger.error(f"Error exporting script: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export script: {str(e)}",
        )
