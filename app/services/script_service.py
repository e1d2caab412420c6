"""
Script Generation Service
Assembles a complete video script from the fixed template catalog.
"""
from typing import List, Optional
import logging
import random

from app.core.config import settings
from app.core.exceptions import require_topic
from app.schemas.script import (
    ContentType,
    GeneratedScript,
    LengthProfileResponse,
    ScriptOptionsResponse,
    ScriptRequest,
    ScriptTone,
    TargetAudience,
    Timestamp,
)
from app.services.script_catalog import (
    LENGTH_PROFILES,
    SEO_KEYWORD_TEMPLATES,
    ContentTemplate,
    LengthProfile,
    get_content_template,
    get_length_profile,
    get_title_templates,
)

logger = logging.getLogger(__name__)

# Fixed anchor for the start of the main content
MAIN_CONTENT_ANCHOR = "1:30"


class ScriptGenerationService:
    """Service for generating video scripts from templates"""

    def __init__(self, rng: Optional[random.Random] = None, seo_year: Optional[int] = None) -> None:
        # Title choice is the only randomized field; tests inject a seeded Random
        self.rng = rng or random.Random()
        self.seo_year = seo_year if seo_year is not None else settings.SEO_KEYWORD_YEAR

    def generate_script(self, request: ScriptRequest) -> GeneratedScript:
        """
        Generate a script for the request.

        Raises:
            ValidationError: if the topic is empty or whitespace-only
        """
        topic = require_topic(request.topic)

        content_type = ContentType.resolve(request.contentType)
        if content_type.value != request.contentType:
            logger.debug(f"Unknown content type '{request.contentType}', using '{content_type.value}' templates")

        profile = get_length_profile(request.length)
        template = get_content_template(content_type)
        fields = {
            "topic": topic,
            "audience": TargetAudience(request.targetAudience).value,
            "duration": profile.duration_label,
        }

        main_points = self._render_main_points(template, profile, fields)

        return GeneratedScript(
            title=self._choose_title(topic, content_type),
            hook=template.hook.format(**fields),
            intro=template.intro.format(**fields),
            mainPoints=main_points,
            keyTakeaways=[takeaway.format(**fields) for takeaway in template.key_takeaways],
            outro=template.outro.format(**fields),
            callToAction=template.call_to_action.format(**fields),
            estimatedDuration=profile.duration_label,
            wordCount=profile.word_count,
            seoKeywords=self.build_seo_keywords(topic),
            timestamps=self.build_timestamps(profile),
        )

    def build_seo_keywords(self, topic: str) -> List[str]:
        """Six keyword strings derived from the topic, always in the same order"""
        return [keyword.format(topic=topic, year=self.seo_year) for keyword in SEO_KEYWORD_TEMPLATES]

    def build_timestamps(self, profile: LengthProfile) -> List[Timestamp]:
        """
        Chapter markers for a length profile.

        Main points are spread evenly over the lower bound of the duration
        range; takeaways and call to action sit 2 and 1 minutes before it.
        """
        segment_count = profile.point_count + 2
        timestamps = [
            Timestamp(time="0:00", section="Hook & Introduction"),
            Timestamp(time=MAIN_CONTENT_ANCHOR, section="Main Content Begins"),
        ]
        for index in range(profile.point_count):
            minute = (index + 2) * profile.min_minutes // segment_count
            timestamps.append(Timestamp(time=f"{minute}:00", section=f"Point {index + 1}"))
        timestamps.append(Timestamp(time=f"{profile.min_minutes - 2}:00", section="Key Takeaways"))
        timestamps.append(Timestamp(time=f"{profile.min_minutes - 1}:00", section="Call to Action"))
        return timestamps

    def title_candidates(self, topic: str, content_type: ContentType) -> List[str]:
        """All four title phrasings for a content type"""
        return [title.format(topic=topic, year=self.seo_year) for title in get_title_templates(content_type)]

    def describe_options(self) -> ScriptOptionsResponse:
        """Allowed request values, with the length profile table"""
        return ScriptOptionsResponse(
            lengths=[
                LengthProfileResponse(
                    length=length,
                    wordCount=profile.word_count,
                    estimatedDuration=profile.duration_label,
                    pointCount=profile.point_count,
                )
                for length, profile in LENGTH_PROFILES.items()
            ],
            tones=list(ScriptTone),
            contentTypes=list(ContentType),
            targetAudiences=list(TargetAudience),
        )

    def _choose_title(self, topic: str, content_type: ContentType) -> str:
        return self.rng.choice(self.title_candidates(topic, content_type))

    def _render_main_points(self, template: ContentTemplate, profile: LengthProfile, fields: dict) -> List[str]:
        return [point.format(**fields) for point in template.main_points[:profile.point_count]]
