"""Run summarizer: aggregates pipeline outputs into a RunSummary."""

from pathlib import Path

from bulletin.models.report import DateContext, ParsedSections
from bulletin.models.reporting import RunSummary


class RunSummarizer:
    def __init__(self, run_id: str, report_date: str):
        self.summary = RunSummary(run_id=run_id, report_date=report_date)

    def record_dates(self, ctx: DateContext) -> None:
        self.summary.report_date = ctx.today.isoformat()
        self.summary.header_range = ctx.header_range

    def record_response(self, raw_text: str, source: str) -> None:
        self.summary.response_chars = len(raw_text)
        self.summary.source = source

    def record_sections(self, sections: ParsedSections) -> None:
        self.summary.forecast_extracted = sections.forecast_extracted
        self.summary.immediate_items = (
            len(sections.immediate_items) if sections.immediate_extracted else 0
        )
        self.summary.monitoring_items = (
            len(sections.monitoring_items) if sections.monitoring_extracted else 0
        )

    def record_html(self, path: Path) -> None:
        self.summary.html_path = str(path)

    def record_png(self, path: Path) -> None:
        self.summary.png_path = str(path)

    def record_index(self, path: Path) -> None:
        self.summary.index_path = str(path)

    def record_duration(self, seconds: float) -> None:
        self.summary.duration_seconds = seconds

    def record_error(self, error: str) -> None:
        self.summary.errors.append(error)

    def finalize(self) -> RunSummary:
        return self.summary
