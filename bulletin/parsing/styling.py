"""Inline emphasis for hazard phrases and categorical risk levels.

Styling wraps text, it never rewrites it: removing the emphasis spans from
the output yields the input again. Provider text is NOT HTML-escaped; any
markup it contains passes through unchanged.
"""

import re
from types import MappingProxyType

# Regex phrase patterns, bolded case-insensitively as whole words.
# Order matters: later patterns may re-wrap spans bolded by earlier ones.
HAZARD_PATTERNS: tuple[str, ...] = (
    # wind
    r"damaging winds (?:\(58\+\s*mph\))?",
    r"damaging wind gusts",
    r"severe wind gusts",
    r"58\+\s*mph winds",
    r"60\+\s*mph winds",
    r"70\+\s*mph winds",
    # hail
    r"large hail",
    r"hail up to",
    r"hail \(up to",
    r"significant hail",
    r"golf ball sized hail",
    r"baseball sized hail",
    r"small hail",
    r"pea sized hail",
    # tornado
    r"tornadoes possible",
    r"a few tornadoes",
    r"isolated tornadoes",
    r"tornado risk",
    r"potential for tornadoes",
    r"tornadoes",
    r"tornado watch",
    r"tornado warning",
    # flood
    r"flooding possible",
    r"localized flooding",
    r"flash flooding",
    r"flash flood warning",
    r"flash flood watch",
    r"river flooding",
    r"coastal flooding",
    r"urban flooding",
    r"significant flooding",
    r"moderate flooding",
    r"major flooding",
    # rain
    r"heavy rainfall",
    r"heavy rain",
    r"excessive rainfall",
    r"torrential rain",
    r"inches of rain",
    # thunderstorm
    r"strong thunderstorms",
    r"severe thunderstorms",
    r"scattered thunderstorms",
    r"isolated thunderstorms",
    r"thunderstorm risk",
    # non-convective wind
    r"high winds",
    r"strong winds",
    r"gusty winds",
    r"wind advisory",
    r"high wind warning",
    # fire weather
    r"critical fire weather",
    r"extreme fire weather",
    r"elevated fire weather",
    r"red flag warning",
    r"fire weather watch",
    # tropical
    r"tropical storm conditions",
    r"tropical storm warning",
    r"tropical storm watch",
    r"hurricane conditions",
    r"hurricane warning",
    r"hurricane watch",
    # surge
    r"storm surge warning",
    r"storm surge watch",
    r"storm surge",
    r"life-threatening storm surge",
    r"tropical depression",
    r"tropical storm",
    r"hurricane",
    r"major hurricane",
    r"tropical disturbance",
    r"area of interest",
    r"potential tropical cyclone",
    # marine
    r"dangerous surf",
    r"rip currents",
    r"high surf advisory",
    # fog
    r"dense fog",
    r"visibility near zero",
    r"dense fog advisory",
    # winter
    r"winter storm",
    r"blizzard",
    r"heavy snow",
    r"ice storm",
    r"freezing rain",
    r"sleet",
)

# Categorical risk level -> highlight color
RISK_LEVEL_COLORS = MappingProxyType({
    "ENHANCED": "#cc0000",
    "SLIGHT": "#e67300",
    "MARGINAL": "#ffcc00",
    "HIGH": "#FF00FF",  # WPC excessive rainfall, fire weather
    "MODERATE": "#DC143C",
    "CRITICAL": "#FF4500",  # fire weather
    "EXTREME": "#8B0000",  # fire weather
})

BOLD_OPEN = '<span style="font-weight:bold;">'
SPAN_CLOSE = "</span>"
LINE_BREAK = "<br />"

_HAZARD_RES = tuple(
    re.compile(rf"\b({pattern})\b", re.IGNORECASE) for pattern in HAZARD_PATTERNS
)
# Case sensitive; "MARGINALLY" and "HIGH-END" are not risk levels
_RISK_RES = tuple(
    (
        re.compile(rf"\b({level})(?!\w|-)"),
        f'<span style="color:{color}; font-weight:bold;">{level}</span>',
    )
    for level, color in RISK_LEVEL_COLORS.items()
)

_EMPHASIS_TAG_RE = re.compile(
    r'<span style="(?:color:#[0-9A-Fa-f]{6}; )?font-weight:bold;">|</span>|</?strong>'
)


def bold_hazards(text: str) -> str:
    for regex in _HAZARD_RES:
        text = regex.sub(lambda m: f"{BOLD_OPEN}{m.group(0)}{SPAN_CLOSE}", text)
    return text


def highlight_risk_levels(text: str) -> str:
    for regex, replacement in _RISK_RES:
        text = regex.sub(replacement, text)
    return text


def style_text(text: str) -> str:
    """Apply hazard bolding, then risk-level colors, then line breaks."""
    if not text:
        return ""
    styled = bold_hazards(text)
    styled = highlight_risk_levels(styled)
    return styled.replace("\n", LINE_BREAK)


def strip_emphasis(html: str) -> str:
    """Remove the markup added by style_text and restore newlines."""
    return _EMPHASIS_TAG_RE.sub("", html).replace(LINE_BREAK, "\n")
