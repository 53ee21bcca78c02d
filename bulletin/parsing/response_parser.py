"""Split the provider's free-text reply into styled bulletin sections.

Each section is extracted independently. A missing or empty section keeps
its fallback value; parsing never raises.
"""

import logging
import re
from datetime import date, timedelta

from bulletin.ingest.prompt import (
    FORECAST_LABEL,
    IMMEDIATE_LABEL,
    MONITORING_LABEL,
    SECTION_LABELS,
)
from bulletin.models.common import short_weekday_date
from bulletin.models.report import ParsedSections
from bulletin.parsing.styling import style_text

logger = logging.getLogger(__name__)

NO_THREATS_MARKER = "no significant weather threats"

# "LABEL:" with optional markdown bold, e.g. "**REPORT_FORECAST:**"; a bare
# label name in prose is not a boundary
_LABEL_RES = {
    label: re.compile(rf"\**\b{label}\b\**[ \t]*:\**") for label in SECTION_LABELS
}

_DAY_RE = re.compile(r"\bDay\s*(\d+)", re.IGNORECASE)
# timedelta caps at 999999999 days, so longer tokens can never be a date
_MAX_DAY_DIGITS = 10

# "-", "*" or "3." at the start of a line; "1.5 inches" is not a delimiter
_LIST_DELIMITER_RE = re.compile(r"^[ \t]*(?:[-*]|\d+\.(?!\d))[ \t]*", re.MULTILINE)


def extract_section(text: str, label: str) -> str | None:
    """Return the trimmed text after `label` up to the next section label.

    Returns None when the label is absent or the region is blank.
    """
    m = _LABEL_RES[label].search(text)
    if m is None:
        return None
    start = m.end()
    end = len(text)
    for other, regex in _LABEL_RES.items():
        if other == label:
            continue
        nxt = regex.search(text, start)
        if nxt is not None and nxt.start() < end:
            end = nxt.start()
    region = text[start:end].strip()
    return region or None


def rewrite_day_references(text: str, today: date) -> str:
    """Rewrite "Day N" as "Day N (Ddd, Mon D)" with Day 1 = today.

    N is not bounded; "Day 47" becomes a date 46 days out. A date beyond
    the calendar's range leaves the token as written.
    """
    def _replace(m: re.Match) -> str:
        digits = m.group(1)
        # int() refuses digit strings past sys.get_int_max_str_digits()
        if len(digits) > _MAX_DAY_DIGITS:
            logger.warning("Day token with %d digits left as-is", len(digits))
            return m.group(0)
        day_num = int(digits)
        try:
            threat_date = today + timedelta(days=day_num - 1)
        except OverflowError:
            logger.warning("Day %d is outside the calendar range, left as-is", day_num)
            return m.group(0)
        return f"<strong>Day {day_num} ({short_weekday_date(threat_date)})</strong>"

    return _DAY_RE.sub(_replace, text)


def split_list_items(text: str) -> list[str]:
    """Split bulleted or numbered text into trimmed, non-empty items."""
    items = _LIST_DELIMITER_RE.split(text.strip())
    return [item.strip() for item in items if item.strip()]


def parse_forecast(region: str, today: date) -> str:
    styled = style_text(rewrite_day_references(region, today))
    if NO_THREATS_MARKER in region.lower():
        return f"<p>{styled}</p>"
    return styled


def parse_response(raw_text: str, today: date) -> ParsedSections:
    """Build ParsedSections from the raw reply, falling back per field."""
    fields: dict = {}
    raw_text = raw_text or ""

    forecast = extract_section(raw_text, FORECAST_LABEL)
    if forecast is not None:
        fields["forecast_html"] = parse_forecast(forecast, today)
        fields["forecast_extracted"] = True
    else:
        logger.warning("No %s section found; using fallback", FORECAST_LABEL)

    for label, items_key, flag_key in (
        (IMMEDIATE_LABEL, "immediate_items", "immediate_extracted"),
        (MONITORING_LABEL, "monitoring_items", "monitoring_extracted"),
    ):
        region = extract_section(raw_text, label)
        items = split_list_items(region) if region is not None else []
        if items:
            fields[items_key] = tuple(style_text(item) for item in items)
            fields[flag_key] = True
        else:
            logger.warning("No items found in %s; using fallback", label)

    return ParsedSections(**fields)
