from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from app.services.matching import ALL


@dataclass(frozen=True)
class LanguageInfo:
    code: str
    name: str
    native_name: str
    flag: str | None = None


@dataclass(frozen=True)
class FilterOption:
    id: str
    name: str
    icon: str | None = None
    color: str | None = None


LANGUAGES: dict[str, LanguageInfo] = {
    "en": LanguageInfo("en", "English", "English", "🇺🇸"),
    "es": LanguageInfo("es", "Spanish", "Español", "🇪🇸"),
    "de": LanguageInfo("de", "German", "Deutsch", "🇩🇪"),
    "fr": LanguageInfo("fr", "French", "Français", "🇫🇷"),
    "it": LanguageInfo("it", "Italian", "Italiano", "🇮🇹"),
    "pt": LanguageInfo("pt", "Portuguese", "Português", "🇵🇹"),
    "ru": LanguageInfo("ru", "Russian", "Русский", "🇷🇺"),
}

DEFAULT_CATEGORY_ICON = "📚"
CATEGORY_ICONS: dict[str, str] = {
    "connectors": "🔗",
    "places": "📍",
    "abstract": "💭",
    "daily life": "🏠",
    "people": "👥",
    "communication": "💬",
    "emotions": "😊",
    "time": "⏰",
    "transport": "🚗",
    "art": "🎨",
    "animals": "🐾",
    "food": "🍎",
    "clothes & accessories": "👕",
    "body": "💪",
    "travel": "✈️",
    "education": "🎓",
    "sport": "⚽",
    "money": "💰",
    "household": "🏡",
    "colors": "🎨",
    "relationships": "❤️",
    "work": "💼",
    "technology": "💻",
    "weather": "☀️",
    "drinks": "🥤",
    "numbers": "🔢",
    "health": "🏥",
    "nature": "🌿",
    "geography": "🗺️",
    "plants": "🌱",
    "environment": "🌍",
    "astronomy": "✨",
    "science": "🔬",
}

DEFAULT_LEVEL_COLOR = "#4299e1"
LEVEL_COLORS: dict[str, str] = {
    "A1": "#48bb78",
    "A2": "#38a169",
    "B1": "#d69e2e",
    "B2": "#ed8936",
    "C1": "#e53e3e",
    "C2": "#9b2c2c",
}

LEVEL_DISPLAY_NAMES: dict[str, str] = {
    "A1": "Beginner (A1)",
    "A2": "Elementary (A2)",
    "B1": "Intermediate (B1)",
    "B2": "Upper Intermediate (B2)",
    "C1": "Advanced (C1)",
    "C2": "Proficient (C2)",
}


def language_info(code: str) -> LanguageInfo:
    info = LANGUAGES.get(code)
    if info is not None:
        return info
    return LanguageInfo(code=code, name=code.upper(), native_name=code.upper())


def category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, DEFAULT_CATEGORY_ICON)


def level_color(level: str) -> str:
    return LEVEL_COLORS.get(level, DEFAULT_LEVEL_COLOR)


def level_display_name(level: str) -> str:
    return LEVEL_DISPLAY_NAMES.get(level, level)


def level_options(levels: Iterable[str]) -> list[FilterOption]:
    """Selection options for ``levels``, led by the catch-all entry."""
    return [
        FilterOption(id=ALL, name="All Levels", color=DEFAULT_LEVEL_COLOR),
        *(
            FilterOption(id=level, name=level_display_name(level), color=level_color(level))
            for level in levels
        ),
    ]


def category_options(categories: Iterable[str]) -> list[FilterOption]:
    return [
        FilterOption(id=ALL, name="All Categories", icon=DEFAULT_CATEGORY_ICON),
        *(
            FilterOption(id=category, name=category, icon=category_icon(category))
            for category in categories
        ),
    ]
