"""
Thumbnail Generation Service
Builds four described thumbnail variations for a topic. No pixels are
rendered here; each variation carries a placeholder image reference and the
palette, font and motif tags a renderer needs.
"""
from typing import Optional
import logging

from app.core.config import settings
from app.core.exceptions import require_topic
from app.schemas.thumbnail import (
    ColorScheme,
    ColorSchemeOption,
    GeneratedThumbnail,
    MoodOption,
    ThumbnailMood,
    ThumbnailOptionsResponse,
    ThumbnailRequest,
    ThumbnailVariation,
)
from app.services.thumbnail_catalog import (
    COLOR_SCHEMES,
    MOOD_STYLES,
    VARIATION_LAYOUTS,
    MoodStyle,
    get_color_scheme,
    get_mood_style,
)
from app.services.export_service import ExportService

logger = logging.getLogger(__name__)

PLACEHOLDER_QUERY = "auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1"


class ThumbnailGenerationService:
    """Service for generating thumbnail variations"""

    def __init__(self, placeholder_base_url: Optional[str] = None) -> None:
        self.placeholder_base_url = (placeholder_base_url or settings.THUMBNAIL_PLACEHOLDER_BASE_URL).rstrip("/")
        self.exporter = ExportService()

    def generate_thumbnail(self, request: ThumbnailRequest) -> GeneratedThumbnail:
        """
        Generate exactly four variations for the request.

        Raises:
            ValidationError: if the topic is empty or whitespace-only
        """
        topic = require_topic(request.topic)
        mood = ThumbnailMood(request.mood)
        scheme = ColorScheme(request.colorScheme)

        mood_style = get_mood_style(mood)
        palette = list(get_color_scheme(scheme))
        overlay_text = self.build_overlay_text(topic, mood_style, request.textOverlay, request.includeEmoji)

        variations = [
            ThumbnailVariation(
                url=self._placeholder_url(layout.photo_id),
                style=layout.style.format(mood=mood.value, scheme=scheme.value),
                description=layout.description.format(mood=mood.value, scheme=scheme.value),
                palette=list(palette),
                accentColors=list(mood_style.colors),
                fonts=list(mood_style.fonts),
                motifs=list(mood_style.elements),
                overlayText=overlay_text,
                fileName=self.exporter.thumbnail_filename(topic, index),
            )
            for index, layout in enumerate(VARIATION_LAYOUTS)
        ]
        logger.debug(f"Built {len(variations)} thumbnail variations: mood={mood.value}, colorScheme={scheme.value}")

        return GeneratedThumbnail(
            variations=variations,
            alt=f"Thumbnail variations for {topic}",
            mood=mood,
            colorScheme=scheme,
        )

    def build_overlay_text(
        self,
        topic: str,
        mood_style: MoodStyle,
        text_overlay: Optional[str] = None,
        include_emoji: bool = True,
    ) -> str:
        """Overlay text defaults to the topic; the mood emoji is appended on request"""
        text = text_overlay if text_overlay and text_overlay.strip() else topic
        if include_emoji:
            return f"{text} {mood_style.emoji}"
        return text

    def describe_options(self) -> ThumbnailOptionsResponse:
        """Available moods and color schemes with their palettes"""
        return ThumbnailOptionsResponse(
            moods=[
                MoodOption(
                    mood=mood,
                    colors=list(style.colors),
                    fonts=list(style.fonts),
                    elements=list(style.elements),
                )
                for mood, style in MOOD_STYLES.items()
            ],
            colorSchemes=[
                ColorSchemeOption(colorScheme=scheme, colors=list(colors))
                for scheme, colors in COLOR_SCHEMES.items()
            ],
        )

    def _placeholder_url(self, photo_id: str) -> str:
        return f"{self.placeholder_base_url}/{photo_id}/pexels-photo-{photo_id}.jpeg?{PLACEHOLDER_QUERY}"
