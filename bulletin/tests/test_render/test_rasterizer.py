"""Tests for the rasterizer with a fake Playwright driver."""

from pathlib import Path
from unittest.mock import patch

import pytest

from bulletin.render.rasterizer import Rasterizer, RenderTargetNotFound

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeElement:
    def __init__(self):
        self.screenshot_kwargs: dict = {}

    def screenshot(self, path: str, type: str) -> bytes:
        self.screenshot_kwargs = {"path": path, "type": type}
        Path(path).write_bytes(PNG_BYTES)
        return PNG_BYTES


class FakePage:
    def __init__(self, element: FakeElement | None, fail_on_load: bool = False):
        self.element = element
        self.fail_on_load = fail_on_load
        self.content: str | None = None
        self.wait_until: str | None = None
        self.selector: str | None = None

    def set_content(self, html: str, wait_until: str) -> None:
        if self.fail_on_load:
            raise TimeoutError("page never settled")
        self.content = html
        self.wait_until = wait_until

    def query_selector(self, selector: str) -> FakeElement | None:
        self.selector = selector
        return self.element


class FakeBrowser:
    def __init__(self, page: FakePage):
        self.page = page
        self.page_kwargs: dict = {}
        self.closed = False

    def new_page(self, **kwargs) -> FakePage:
        self.page_kwargs = kwargs
        return self.page

    def close(self) -> None:
        self.closed = True


class FakeChromium:
    def __init__(self, browser: FakeBrowser):
        self.browser = browser
        self.launch_kwargs: dict = {}

    def launch(self, **kwargs) -> FakeBrowser:
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    def __init__(self, browser: FakeBrowser):
        self.chromium = FakeChromium(browser)
        self.exited = False

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.exited = True


def _fake(element: FakeElement | None, fail_on_load: bool = False) -> FakePlaywright:
    return FakePlaywright(FakeBrowser(FakePage(element, fail_on_load)))


class TestCapture:
    def test_screenshots_container(self, tmp_path: Path):
        element = FakeElement()
        pw = _fake(element)
        out = tmp_path / "weather-alert.png"

        with patch("bulletin.render.rasterizer.sync_playwright", return_value=pw):
            result = Rasterizer().capture("<div id='c'></div>", out, "c")

        assert result == out
        assert out.read_bytes() == PNG_BYTES
        assert element.screenshot_kwargs == {"path": str(out), "type": "png"}
        browser = pw.chromium.browser
        assert browser.page.selector == "#c"
        assert browser.page.content == "<div id='c'></div>"
        assert browser.closed
        assert pw.exited

    def test_viewport_and_launch_options(self, tmp_path: Path):
        pw = _fake(FakeElement())
        rasterizer = Rasterizer(
            viewport_width=1024,
            viewport_height=768,
            device_scale_factor=2.0,
            browser_args=["--no-sandbox"],
            wait_until="load",
        )
        with patch("bulletin.render.rasterizer.sync_playwright", return_value=pw):
            rasterizer.capture("<p></p>", tmp_path / "x.png", "c")

        assert pw.chromium.launch_kwargs == {"headless": True, "args": ["--no-sandbox"]}
        browser = pw.chromium.browser
        assert browser.page_kwargs == {
            "viewport": {"width": 1024, "height": 768},
            "device_scale_factor": 2.0,
        }
        assert browser.page.wait_until == "load"

    def test_default_viewport(self, tmp_path: Path):
        pw = _fake(FakeElement())
        with patch("bulletin.render.rasterizer.sync_playwright", return_value=pw):
            Rasterizer().capture("<p></p>", tmp_path / "x.png", "c")
        browser = pw.chromium.browser
        assert browser.page_kwargs["viewport"] == {"width": 800, "height": 600}
        assert browser.page_kwargs["device_scale_factor"] == 1.5
        assert browser.page.wait_until == "networkidle"
        assert "--no-sandbox" in pw.chromium.launch_kwargs["args"]

    def test_missing_container_raises_and_closes(self, tmp_path: Path):
        pw = _fake(None)
        out = tmp_path / "x.png"
        with patch("bulletin.render.rasterizer.sync_playwright", return_value=pw):
            with pytest.raises(RenderTargetNotFound, match="#weatherReportContainer"):
                Rasterizer().capture("<p></p>", out, "weatherReportContainer")
        assert pw.chromium.browser.closed
        assert not out.exists()

    def test_load_failure_closes_browser(self, tmp_path: Path):
        pw = _fake(FakeElement(), fail_on_load=True)
        with patch("bulletin.render.rasterizer.sync_playwright", return_value=pw):
            with pytest.raises(TimeoutError):
                Rasterizer().capture("<p></p>", tmp_path / "x.png", "c")
        assert pw.chromium.browser.closed
        assert pw.exited
