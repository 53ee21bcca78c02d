"""Bulletin data models: date context, prompts, parsed sections, artifacts."""

from dataclasses import dataclass
from datetime import date
from pathlib import Path

NO_FORECAST_FALLBACK = "No forecast data extracted."
NO_IMMEDIATE_FALLBACK = "No immediate actions extracted."
NO_MONITORING_FALLBACK = "No 5-day monitoring actions extracted."


@dataclass(frozen=True)
class DateContext:
    today: date
    header_range: str  # "March 1, 2024 - March 5, 2024"
    context_label: str  # "Friday, March 1, 2024"


@dataclass(frozen=True)
class ForecastRequest:
    system_prompt: str
    user_prompt: str


@dataclass(frozen=True)
class ParsedSections:
    forecast_html: str = NO_FORECAST_FALLBACK
    immediate_items: tuple[str, ...] = (NO_IMMEDIATE_FALLBACK,)
    monitoring_items: tuple[str, ...] = (NO_MONITORING_FALLBACK,)
    forecast_extracted: bool = False
    immediate_extracted: bool = False
    monitoring_extracted: bool = False


@dataclass(frozen=True)
class RenderedArtifact:
    html: str
    png_path: Path
