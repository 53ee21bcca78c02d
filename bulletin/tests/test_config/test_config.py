"""Tests for config schema validation, loading and dotted-key lookup."""

import inspect
from pathlib import Path

import pytest
from pydantic import ValidationError

from bulletin.config.defaults import DEFAULT_STATES
from bulletin.config.loader import config_hash, get_config_value, load_config
from bulletin.config.schema import (
    BulletinConfig,
    OutputConfig,
    ProviderConfig,
    RenderConfig,
    WaitUntil,
)
from bulletin.ingest.openai_client import OpenAIClient
from bulletin.publish.publisher import Publisher
from bulletin.render.rasterizer import Rasterizer
from bulletin.reporting.html_builder import build_report_html


class TestBulletinConfig:
    def test_defaults(self):
        config = BulletinConfig()
        assert config.provider.model == "gpt-4o"
        assert config.provider.max_tokens == 2000
        assert config.render.viewport_width == 800
        assert config.render.viewport_height == 600
        assert config.render.device_scale_factor == 1.5
        assert config.render.wait_until == WaitUntil.NETWORK_IDLE
        assert config.output.png_filename == "weather-alert.png"
        assert config.output.index_filename == "index.html"
        assert config.region.states == list(DEFAULT_STATES)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            BulletinConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            BulletinConfig(render={"viewport_depth": 3})

    def test_temperature_bounds(self):
        with pytest.raises(ValidationError):
            ProviderConfig(temperature=3.0)

    def test_container_id_must_be_selector_safe(self):
        with pytest.raises(ValidationError):
            RenderConfig(container_id="bad id")

    def test_wait_until_choices(self):
        assert RenderConfig(wait_until="load").wait_until == WaitUntil.LOAD
        with pytest.raises(ValidationError):
            RenderConfig(wait_until="whenever")

    def test_states_not_empty(self):
        with pytest.raises(ValidationError):
            BulletinConfig(region={"states": []})


class TestLoadConfig:
    def test_no_path_uses_defaults(self):
        assert load_config(None) == BulletinConfig()

    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.provider.model == "gpt-4o-mini"
        assert config.provider.temperature == 0.1
        assert config.render.viewport_width == 1024
        # untouched sections keep defaults
        assert config.render.viewport_height == 600

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == BulletinConfig()

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml_value(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("provider:\n  max_tokens: 0\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_shipped_default_config(self):
        path = Path(__file__).parents[3] / "ops" / "configs" / "default.yaml"
        config = load_config(path)
        assert config.output.directory == "output"
        assert config == BulletinConfig()


class TestConfigHash:
    def test_deterministic(self):
        assert config_hash(BulletinConfig()) == config_hash(BulletinConfig())

    def test_different_config_different_hash(self):
        c2 = BulletinConfig(provider={"model": "gpt-4o-mini"})
        assert config_hash(BulletinConfig()) != config_hash(c2)


class TestGetConfigValue:
    def test_dotted_key(self):
        assert get_config_value(BulletinConfig(), "render.viewport_width") == 800

    def test_list_index(self):
        assert get_config_value(BulletinConfig(), "region.states.0") == "TN"

    def test_invalid_key(self):
        with pytest.raises(KeyError):
            get_config_value(BulletinConfig(), "nonexistent.key")


class TestComponentDefaultsMatchConfig:
    def test_client_matches_provider_config(self):
        provider = ProviderConfig()
        client = OpenAIClient(api_key="k")
        assert client.base_url == provider.base_url
        assert client.model == provider.model
        assert client.max_tokens == provider.max_tokens
        assert client.temperature == provider.temperature
        assert client.timeout == provider.timeout_seconds

    def test_rasterizer_matches_render_config(self):
        render = RenderConfig()
        rasterizer = Rasterizer()
        assert rasterizer.viewport_width == render.viewport_width
        assert rasterizer.viewport_height == render.viewport_height
        assert rasterizer.device_scale_factor == render.device_scale_factor
        assert rasterizer.wait_until == render.wait_until
        assert rasterizer.browser_args == render.browser_args

    def test_html_container_matches_render_config(self):
        default = inspect.signature(build_report_html).parameters["container_id"].default
        assert default == RenderConfig().container_id

    def test_publisher_matches_output_config(self, tmp_path: Path):
        output = OutputConfig()
        publisher = Publisher(tmp_path)
        assert publisher.html_filename == output.html_filename
        assert publisher.png_filename == output.png_filename
        assert publisher.index_filename == output.index_filename
        assert publisher.raw_filename == output.raw_filename
