"""Prompt contract for the 5-day severe weather risk report."""

from collections.abc import Sequence

from bulletin.config.defaults import DEFAULT_STATES, DEFAULT_TERRITORY
from bulletin.models.report import ForecastRequest

# Section labels the model must emit, in order
FORECAST_LABEL = "REPORT_FORECAST"
IMMEDIATE_LABEL = "RECOMMENDATIONS_IMMEDIATE_ACTIONS"
MONITORING_LABEL = "RECOMMENDATIONS_5_DAY_MONITORING"
SECTION_LABELS = (FORECAST_LABEL, IMMEDIATE_LABEL, MONITORING_LABEL)

ALLOWED_RISK_LABELS = ("ENHANCED", "SLIGHT", "MARGINAL")

NO_THREATS_PHRASE = "No significant weather threats are currently forecast..."

_SYSTEM_TEMPLATE = """\
You are an expert weather forecaster preparing a concise 5-day severe weather risk report for emergency management in the southeastern US. Today is {today}.
Focus ONLY on official-source-style information (NWS, SPC, WPC, NHC type outlooks).
Do NOT include seasonal commentary, historical context, speculation, or third-party sources.
Cover potential threats from SPC Day 1-3 Convective Outlooks, Day 4-8 Fire Weather Outlooks (if significant), WPC excessive rainfall, and NHC tropical outlooks.
States to cover: {states}. Include {territory} ONLY if a significant tropical threat exists.

Output Structure (Use these exact headings and then provide the information as plain text):
{forecast_label}:
[For each identified threat over the next 5 days (today is Day 1), provide:
1.  A descriptive title (e.g., "SPC Day 1 Convective Outlook", "WPC Day 2 Excessive Rainfall Risk", "NHC Tropical Update - Area 1").
2.  The specific Day number (e.g., "Day 1", "Day 2").
3.  Timing (e.g., "Afternoon and Evening", "All Day").
4.  Affected Areas (list specific regions/states).
5.  Primary Hazards (e.g., "Damaging winds (58+ mph), large hail (up to 1.5 inches), a few tornadoes possible").
6.  Categorical Risk Level (Use ONLY: {risk_labels}. For tropical/other, describe threat level if these don't apply).
Format each distinct threat clearly. If no threats, state within this section: "{no_threats}"]

{immediate_label}:
[Based on the forecast above, list 3-5 bulleted immediate action recommendations. If no significant threats, provide general preparedness advice.]

{monitoring_label}:
[Based on the forecast above, list 3-5 bulleted 5-day monitoring recommendations. If no significant threats, provide general monitoring advice.]

Ensure Day 1 corresponds to today's date ({today}). Output as plain text only, respecting the heading structure."""

_USER_TEMPLATE = (
    "Provide the 5-day weather risk report for today, {today}, following all "
    "instructions and the specified output structure ({labels})."
)


def build_system_prompt(
    context_label: str,
    states: Sequence[str] = DEFAULT_STATES,
    territory: str = DEFAULT_TERRITORY,
) -> str:
    return _SYSTEM_TEMPLATE.format(
        today=context_label,
        states=", ".join(states),
        territory=territory,
        forecast_label=FORECAST_LABEL,
        immediate_label=IMMEDIATE_LABEL,
        monitoring_label=MONITORING_LABEL,
        risk_labels=", ".join(ALLOWED_RISK_LABELS),
        no_threats=NO_THREATS_PHRASE,
    )


def build_user_prompt(context_label: str) -> str:
    return _USER_TEMPLATE.format(
        today=context_label, labels=", ".join(SECTION_LABELS)
    )


def build_forecast_request(
    context_label: str,
    states: Sequence[str] = DEFAULT_STATES,
    territory: str = DEFAULT_TERRITORY,
) -> ForecastRequest:
    """Assemble the system and user prompts for one bulletin run."""
    return ForecastRequest(
        system_prompt=build_system_prompt(context_label, states, territory),
        user_prompt=build_user_prompt(context_label),
    )
