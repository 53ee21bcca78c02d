"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from bulletin.config.defaults import (
    DEFAULT_API_KEY_ENV,
    DEFAULT_BROWSER_ARGS,
    DEFAULT_CONTAINER_ID,
    DEFAULT_DEVICE_SCALE_FACTOR,
    DEFAULT_HTML_FILENAME,
    DEFAULT_INDEX_FILENAME,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PNG_FILENAME,
    DEFAULT_RAW_FILENAME,
    DEFAULT_STATES,
    DEFAULT_TEMPERATURE,
    DEFAULT_TERRITORY,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_WAIT_UNTIL,
    OPENAI_API_BASE,
)


class WaitUntil(StrEnum):
    NETWORK_IDLE = "networkidle"
    LOAD = "load"
    DOM_CONTENT_LOADED = "domcontentloaded"
    COMMIT = "commit"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENAI_API_BASE
    model: str = DEFAULT_MODEL
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, ge=1)
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
    api_key_env: str = DEFAULT_API_KEY_ENV


class RegionConfig(BaseModel):
    model_config = {"extra": "forbid"}

    states: list[str] = Field(default_factory=lambda: list(DEFAULT_STATES), min_length=1)
    territory: str = DEFAULT_TERRITORY


class RenderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    viewport_width: int = Field(default=DEFAULT_VIEWPORT_WIDTH, ge=1)
    viewport_height: int = Field(default=DEFAULT_VIEWPORT_HEIGHT, ge=1)
    device_scale_factor: float = Field(default=DEFAULT_DEVICE_SCALE_FACTOR, gt=0.0)
    container_id: str = Field(default=DEFAULT_CONTAINER_ID, pattern=r"^[A-Za-z][\w-]*$")
    wait_until: WaitUntil = WaitUntil(DEFAULT_WAIT_UNTIL)
    browser_args: list[str] = Field(default_factory=lambda: list(DEFAULT_BROWSER_ARGS))


class OutputConfig(BaseModel):
    model_config = {"extra": "forbid"}

    directory: str = DEFAULT_OUTPUT_DIR
    html_filename: str = DEFAULT_HTML_FILENAME
    png_filename: str = DEFAULT_PNG_FILENAME
    index_filename: str = DEFAULT_INDEX_FILENAME
    raw_filename: str = DEFAULT_RAW_FILENAME
    save_raw_response: bool = False


class BulletinConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    region: RegionConfig = RegionConfig()
    render: RenderConfig = RenderConfig()
    output: OutputConfig = OutputConfig()
