"""Default coverage area, provider, renderer and output settings."""

# Southeastern states covered by every bulletin
DEFAULT_STATES: tuple[str, ...] = ("TN", "MS", "GA", "AL", "FL", "NC", "SC")

# Included only when a significant tropical threat exists
DEFAULT_TERRITORY = "USVI"

# Provider
OPENAI_API_BASE = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.2
DEFAULT_TIMEOUT_SECONDS = 120.0
DEFAULT_API_KEY_ENV = "OPENAI_API_KEY"

# Renderer
DEFAULT_VIEWPORT_WIDTH = 800
DEFAULT_VIEWPORT_HEIGHT = 600
DEFAULT_DEVICE_SCALE_FACTOR = 1.5
DEFAULT_CONTAINER_ID = "weatherReportContainer"
DEFAULT_WAIT_UNTIL = "networkidle"

DEFAULT_BROWSER_ARGS: tuple[str, ...] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--font-render-hinting=medium",
)

# Output
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_HTML_FILENAME = "weather-report.html"
DEFAULT_PNG_FILENAME = "weather-alert.png"
DEFAULT_INDEX_FILENAME = "index.html"
DEFAULT_RAW_FILENAME = "raw-response.txt"
