"""
Pydantic schemas for Script generation API
"""
import enum
from typing import List, Union

from pydantic import BaseModel, Field


class ScriptLength(str, enum.Enum):
    """Target video length"""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class ScriptTone(str, enum.Enum):
    """Narration tone"""
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    EDUCATIONAL = "educational"
    ENTERTAINING = "entertaining"


class ContentType(str, enum.Enum):
    """Script format, selects the template bucket and title phrasings"""
    TUTORIAL = "tutorial"
    ANALYSIS = "analysis"
    STORY = "story"
    REVIEW = "review"
    INTERVIEW = "interview"

    @classmethod
    def resolve(cls, value: Union[str, "ContentType"]) -> "ContentType":
        """Map any value onto a member, falling back to TUTORIAL"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.TUTORIAL


class TargetAudience(str, enum.Enum):
    """Viewer experience level"""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    GENERAL = "general"


class ScriptRequest(BaseModel):
    """Request schema for generating a video script"""
    topic: str = Field(..., description="Topic of the video, used verbatim in the script")
    length: ScriptLength = Field(..., description="short, medium or long")
    tone: ScriptTone = Field(..., description="Narration tone")
    contentType: str = Field(
        ...,
        description="tutorial, analysis, story, review or interview (unknown values fall back to tutorial)",
    )
    targetAudience: TargetAudience = Field(..., description="Intended audience level")

    class Config:
        frozen = True


class Timestamp(BaseModel):
    """Chapter marker"""
    time: str = Field(..., description="Chapter start (e.g. '1:30')")
    section: str = Field(..., description="Chapter title")


class GeneratedScript(BaseModel):
    """Response schema for a generated video script"""
    title: str
    hook: str
    intro: str
    mainPoints: List[str]
    keyTakeaways: List[str]
    outro: str
    callToAction: str
    estimatedDuration: str
    wordCount: int
    seoKeywords: List[str]
    timestamps: List[Timestamp]


class LengthProfileResponse(BaseModel):
    """One row of the length profile table"""
    length: ScriptLength
    wordCount: int
    estimatedDuration: str
    pointCount: int


class ScriptOptionsResponse(BaseModel):
    """Allowed values for every script request field"""
    lengths: List[LengthProfileResponse]
    tones: List[ScriptTone]
    contentTypes: List[ContentType]
    targetAudiences: List[TargetAudience]
