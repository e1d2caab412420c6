"""
Pydantic schemas for Thumbnail generation API
"""
import enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ThumbnailMood(str, enum.Enum):
    """Overall visual mood"""
    ENERGETIC = "energetic"
    PROFESSIONAL = "professional"
    MYSTERIOUS = "mysterious"
    EDUCATIONAL = "educational"
    EMOTIONAL = "emotional"
    TRENDY = "trendy"


class ColorScheme(str, enum.Enum):
    """Background palette family"""
    VIBRANT = "vibrant"
    MONOCHROME = "monochrome"
    PASTEL = "pastel"
    NEON = "neon"
    EARTH = "earth"
    GRADIENT = "gradient"


class ThumbnailRequest(BaseModel):
    """Request schema for generating thumbnail variations"""
    topic: str = Field(..., description="Topic of the video")
    mood: ThumbnailMood = Field(..., description="Visual mood")
    colorScheme: ColorScheme = Field(..., description="Color scheme")
    textOverlay: Optional[str] = Field(None, description="Text drawn over the image (defaults to the topic)")
    includeEmoji: bool = Field(default=True, description="Append the mood emoji to the overlay text")

    class Config:
        frozen = True


class ThumbnailVariation(BaseModel):
    """One candidate thumbnail plus the metadata a renderer needs to draw it"""
    url: str = Field(..., description="Placeholder image reference")
    style: str
    description: str
    palette: List[str] = Field(..., description="Background colors from the color scheme")
    accentColors: List[str] = Field(..., description="Accent colors from the mood")
    fonts: List[str] = Field(..., description="Font style tags")
    motifs: List[str] = Field(..., description="Graphic motif tags")
    overlayText: str
    fileName: str = Field(..., description="Suggested download file name for the rendered image")


class GeneratedThumbnail(BaseModel):
    """Response schema for generated thumbnail variations"""
    variations: List[ThumbnailVariation]
    alt: str
    mood: ThumbnailMood
    colorScheme: ColorScheme


class MoodOption(BaseModel):
    mood: ThumbnailMood
    colors: List[str]
    fonts: List[str]
    elements: List[str]


class ColorSchemeOption(BaseModel):
    colorScheme: ColorScheme
    colors: List[str]


class ThumbnailOptionsResponse(BaseModel):
    """Available moods and color schemes with their palettes"""
    moods: List[MoodOption]
    colorSchemes: List[ColorSchemeOption]
