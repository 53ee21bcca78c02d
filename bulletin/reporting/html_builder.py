"""HTML templates for the bulletin document and the redirect page."""

from bulletin.config.defaults import DEFAULT_CONTAINER_ID
from bulletin.models.report import ParsedSections

ATTRIBUTION = (
    '<p style="font-size:14px; color:#666;">Sources: Information synthesized '
    "based on official forecast agency outlooks (NWS Storm Prediction Center, "
    "NOAA, FEMA, and state emergency management agencies).</p>"
)

_STYLE = """\
    body {{ margin: 0; padding: 0; }}
    #{cid} {{ background-color:#ffffff; font-family:Arial, Helvetica, sans-serif; color:#333333; font-size:16px; line-height:1.6; padding:24px; margin:0 auto; width: 700px; border: 1px solid #ccc; }}
    #{cid} h2 {{ color:#990000; font-weight:bold; margin-top:0; padding-bottom: 5px; border-bottom: 2px solid #990000; }}
    #{cid} h3 {{ color:#990000; font-weight:bold; margin-top: 20px; margin-bottom: 10px; border-bottom: 1px solid #eee; padding-bottom: 5px; }}
    #{cid} h4 {{ color:#990000; font-weight:bold; margin-top: 15px; margin-bottom: 5px; }}
    #{cid} ul {{ margin-top: 0; padding-left: 20px; }}
    #{cid} li {{ margin-bottom: 5px; }}
    #{cid} p {{ margin-top: 0; margin-bottom: 10px; }}
    #{cid} .forecast-section p {{ margin-bottom: 1em; }}"""

_DOCUMENT = """\
<!DOCTYPE html><html lang="en"><head><meta charset="UTF-8"><meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Weather Risk Report | {header_range}</title>
<style>
{style}
</style></head><body>
    <div id="{cid}">
        <h2>{header_range}</h2>
        <h3>Severe Weather Threats (5-Day Outlook)</h3>
        <div class="forecast-section">{forecast}</div>
        <h3>Recommendations</h3>
        <h4>Immediate Actions</h4>
        <ul>{immediate}</ul>
        <h4>5-Day Monitoring</h4>
        <ul>{monitoring}</ul>
        <br/>
        {attribution}
    </div>
</body></html>
"""

_REDIRECT = (
    "<!DOCTYPE html><html><head><title>Weather Alert</title>"
    '<meta http-equiv="refresh" content="0; url={png}">'
    "<style> body {{ margin: 20px; font-family: Arial, sans-serif; text-align: center;}} "
    "img {{ max-width: 100%; height: auto; border: 1px solid #ccc; }} </style></head>"
    "<body><h1>Weather Alert</h1><p>If you are not redirected, "
    '<a href="{png}">click here to view the weather alert image</a>.</p>'
    '<img src="{png}" alt="Daily Weather Alert"></body></html>'
)


def render_list_items(items: tuple[str, ...] | list[str]) -> str:
    return "".join(f"<li>{item}</li>" for item in items)


def build_report_html(
    header_range: str,
    sections: ParsedSections,
    container_id: str = DEFAULT_CONTAINER_ID,
) -> str:
    """Embed the styled sections into the full bulletin document."""
    return _DOCUMENT.format(
        header_range=header_range,
        style=_STYLE.format(cid=container_id),
        cid=container_id,
        forecast=sections.forecast_html,
        immediate=render_list_items(sections.immediate_items),
        monitoring=render_list_items(sections.monitoring_items),
        attribution=ATTRIBUTION,
    )


def build_redirect_page(png_filename: str) -> str:
    """Page that forwards the viewer straight to the bulletin image."""
    return _REDIRECT.format(png=png_filename)
