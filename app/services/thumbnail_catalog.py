"""
Thumbnail Style Catalog
Mood styles, color scheme palettes and the four variation layouts.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from app.schemas.thumbnail import ColorScheme, ThumbnailMood


@dataclass(frozen=True)
class MoodStyle:
    colors: Tuple[str, ...]
    fonts: Tuple[str, ...]
    elements: Tuple[str, ...]
    emoji: str


@dataclass(frozen=True)
class VariationLayout:
    """Style/description skeleton for one thumbnail variation"""
    style: str
    description: str
    photo_id: str


MOOD_STYLES: Dict[ThumbnailMood, MoodStyle] = {
    ThumbnailMood.ENERGETIC: MoodStyle(
        colors=("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7"),
        fonts=("bold", "dynamic"),
        elements=("lightning", "arrows", "burst"),
        emoji="⚡",
    ),
    ThumbnailMood.PROFESSIONAL: MoodStyle(
        colors=("#2C3E50", "#34495E", "#3498DB", "#E74C3C", "#F39C12"),
        fonts=("clean", "modern"),
        elements=("geometric", "minimal", "corporate"),
        emoji="💼",
    ),
    ThumbnailMood.MYSTERIOUS: MoodStyle(
        colors=("#2C2C54", "#40407A", "#706FD3", "#FF5252", "#33D9B2"),
        fonts=("dramatic", "shadow"),
        elements=("shadows", "gradients", "dark"),
        emoji="🔮",
    ),
    ThumbnailMood.EDUCATIONAL: MoodStyle(
        colors=("#3742FA", "#2ED573", "#FF6348", "#FFA502", "#747D8C"),
        fonts=("readable", "friendly"),
        elements=("icons", "diagrams", "clean"),
        emoji="📚",
    ),
    ThumbnailMood.EMOTIONAL: MoodStyle(
        colors=("#FF6B9D", "#C44569", "#F8B500", "#6C5CE7", "#A29BFE"),
        fonts=("expressive", "warm"),
        elements=("hearts", "soft", "organic"),
        emoji="❤️",
    ),
    ThumbnailMood.TRENDY: MoodStyle(
        colors=("#00D2FF", "#3A47D5", "#FF0080", "#7209B7", "#560BAD"),
        fonts=("modern", "stylish"),
        elements=("gradients", "neon", "contemporary"),
        emoji="🔥",
    ),
}


COLOR_SCHEMES: Dict[ColorScheme, Tuple[str, ...]] = {
    ColorScheme.VIBRANT: ("#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA726", "#AB47BC"),
    ColorScheme.MONOCHROME: ("#212121", "#424242", "#616161", "#757575", "#9E9E9E"),
    ColorScheme.PASTEL: ("#FFB3BA", "#FFDFBA", "#FFFFBA", "#BAFFC9", "#BAE1FF"),
    ColorScheme.NEON: ("#FF073A", "#39FF14", "#FF073A", "#FFFF33", "#BF00FF"),
    ColorScheme.EARTH: ("#8D6E63", "#A1887F", "#BCAAA4", "#D7CCC8", "#EFEBE9"),
    ColorScheme.GRADIENT: (
        "linear-gradient(45deg, #667eea 0%, #764ba2 100%)",
        "linear-gradient(45deg, #f093fb 0%, #f5576c 100%)",
    ),
}


# Order matters: the first layout is the main thumbnail
VARIATION_LAYOUTS: Tuple[VariationLayout, ...] = (
    VariationLayout(
        style="{mood} with {scheme} colors",
        description="Main thumbnail with bold text overlay and {mood} mood styling",
        photo_id="3184299",
    ),
    VariationLayout(
        style="Alternative {mood} design",
        description="Variation with different composition and {scheme} color scheme",
        photo_id="3184306",
    ),
    VariationLayout(
        style="Minimalist {mood}",
        description="Clean, minimal {mood} version focusing on typography and negative space",
        photo_id="3184338",
    ),
    VariationLayout(
        style="Dynamic {mood}",
        description="High-energy {mood} version with dynamic elements, {scheme} accents and strong visual hierarchy",
        photo_id="3184465",
    ),
)


def get_mood_style(mood: ThumbnailMood) -> MoodStyle:
    return MOOD_STYLES[ThumbnailMood(mood)]


def get_color_scheme(scheme: ColorScheme) -> Tuple[str, ...]:
    return COLOR_SCHEMES[ColorScheme(scheme)]
