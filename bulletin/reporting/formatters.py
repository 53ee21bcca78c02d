"""Output formatters for run summaries."""

import json
from dataclasses import asdict

from bulletin.models.reporting import RunSummary


def format_summary_text(s: RunSummary) -> str:
    """Plain text summary for logging."""
    status = "FAILED" if s.errors else "OK"
    lines = [
        f"=== Bulletin {status} | {s.report_date} | Run {s.run_id[:8]} ===",
        f"Window: {s.header_range or '-'}",
        f"Response: {s.response_chars} chars from {s.source}",
        f"Sections: forecast={'yes' if s.forecast_extracted else 'fallback'}, "
        f"immediate={s.immediate_items} items, monitoring={s.monitoring_items} items",
    ]
    for label, path in (
        ("HTML", s.html_path),
        ("PNG", s.png_path),
        ("Index", s.index_path),
    ):
        if path:
            lines.append(f"{label}: {path}")
    if s.errors:
        lines.append(f"Errors: {len(s.errors)}")
        lines.extend(f"  - {e}" for e in s.errors)
    lines.append(f"Duration: {s.duration_seconds:.1f}s")
    return "\n".join(lines)


def format_summary_json(s: RunSummary) -> str:
    """JSON summary for programmatic consumption."""
    return json.dumps(asdict(s), indent=2)
