"""Common date helpers and the reporting window shown in prompts and headers."""

from datetime import date, timedelta

from bulletin.models.report import DateContext

REPORT_SPAN_DAYS = 5

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def long_date(d: date) -> str:
    """'March 1, 2024' (no zero padding)."""
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def long_weekday_date(d: date) -> str:
    """'Friday, March 1, 2024'."""
    return f"{WEEKDAY_NAMES[d.weekday()]}, {long_date(d)}"


def short_weekday_date(d: date) -> str:
    """'Fri, Mar 1'."""
    return f"{WEEKDAY_NAMES[d.weekday()][:3]}, {MONTH_NAMES[d.month - 1][:3]} {d.day}"


def build_date_context(today: date | None = None) -> DateContext:
    """Build the reporting window: today through today + 4 days."""
    if today is None:
        today = date.today()
    last_day = today + timedelta(days=REPORT_SPAN_DAYS - 1)
    return DateContext(
        today=today,
        header_range=f"{long_date(today)} - {long_date(last_day)}",
        context_label=long_weekday_date(today),
    )
