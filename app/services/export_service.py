"""
Export Service
Serializes generated scripts into a plain-text document and builds download
file names for scripts and thumbnails.
"""
from typing import List, Optional
import logging
import re

from app.schemas.script import ContentType, GeneratedScript, ScriptRequest

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9]")


def slugify(text: str) -> str:
    """Replace every character outside ASCII letters and digits with '_', then lowercase"""
    return _UNSAFE_FILENAME_CHARS.sub("_", text).lower()


class ExportService:
    """Service for exporting generated content"""

    def script_to_text(
        self,
        script: GeneratedScript,
        topic: str,
        request: Optional[ScriptRequest] = None,
    ) -> str:
        """Flat human-readable rendition of a script"""
        lines: List[str] = [
            script.title,
            "",
            "HOOK:",
            script.hook,
            "",
            "INTRO:",
            script.intro,
            "",
            "MAIN POINTS:",
            "\n\n".join(f"{index}. {point}" for index, point in enumerate(script.mainPoints, start=1)),
            "",
            "KEY TAKEAWAYS:",
            *[f"- {takeaway}" for takeaway in script.keyTakeaways],
            "",
            "OUTRO:",
            script.outro,
            "",
            "CALL TO ACTION:",
            script.callToAction,
            "",
            "TIMESTAMPS:",
            *[f"{stamp.time} - {stamp.section}" for stamp in script.timestamps],
            "",
            "SEO KEYWORDS:",
            ", ".join(script.seoKeywords),
            "",
            "---",
            f"Estimated Duration: {script.estimatedDuration}",
            f"Word Count: {script.wordCount} words",
        ]

        if request is not None:
            lines.extend([
                f"Content Type: {ContentType.resolve(request.contentType).value}",
                f"Tone: {request.tone.value}",
                f"Target Audience: {request.targetAudience.value}",
            ])

        lines.append(f"Generated for: {topic}")
        text = "\n".join(lines)
        logger.debug(f"Exported script '{script.title}': {len(text)} characters")
        return text

    def script_filename(self, script: GeneratedScript) -> str:
        return f"{slugify(script.title)}_script.txt"

    def thumbnail_filename(self, topic: str, index: int) -> str:
        return f"{slugify(topic)}_thumbnail_{index + 1}.png"
