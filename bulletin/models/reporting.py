"""Run reporting model."""

from dataclasses import dataclass, field


@dataclass
class RunSummary:
    run_id: str
    report_date: str  # YYYY-MM-DD
    header_range: str = ""
    source: str = "provider"  # "provider" or "file"
    response_chars: int = 0
    forecast_extracted: bool = False
    immediate_items: int = 0
    monitoring_items: int = 0
    html_path: str = ""
    png_path: str = ""
    index_path: str = ""
    duration_seconds: float = 0.0
    errors: list[str] = field(default_factory=list)
