"""Headless Chromium screenshot of the bulletin container element."""

import logging
from collections.abc import Sequence
from pathlib import Path

from playwright.sync_api import sync_playwright

from bulletin.config.defaults import (
    DEFAULT_BROWSER_ARGS,
    DEFAULT_DEVICE_SCALE_FACTOR,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_WAIT_UNTIL,
)

logger = logging.getLogger(__name__)


class RenderTargetNotFound(Exception):
    """Raised when the report container is missing from the loaded page."""


class Rasterizer:
    def __init__(
        self,
        viewport_width: int = DEFAULT_VIEWPORT_WIDTH,
        viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
        device_scale_factor: float = DEFAULT_DEVICE_SCALE_FACTOR,
        browser_args: Sequence[str] = DEFAULT_BROWSER_ARGS,
        wait_until: str = DEFAULT_WAIT_UNTIL,
    ):
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.device_scale_factor = device_scale_factor
        self.browser_args = list(browser_args)
        self.wait_until = wait_until

    def capture(self, html: str, output_path: str | Path, container_id: str) -> Path:
        """Load `html` and write a PNG cropped to `#container_id`.

        The browser is closed whether or not the capture succeeds.
        """
        output_path = Path(output_path)
        with sync_playwright() as pw:
            logger.info("Launching headless Chromium")
            browser = pw.chromium.launch(headless=True, args=self.browser_args)
            try:
                page = browser.new_page(
                    viewport={
                        "width": self.viewport_width,
                        "height": self.viewport_height,
                    },
                    device_scale_factor=self.device_scale_factor,
                )
                page.set_content(html, wait_until=self.wait_until)
                element = page.query_selector(f"#{container_id}")
                if element is None:
                    raise RenderTargetNotFound(
                        f"Could not find #{container_id} for screenshotting"
                    )
                element.screenshot(path=str(output_path), type="png")
                logger.info("PNG saved to %s", output_path)
            finally:
                logger.info("Closing headless Chromium")
                browser.close()
        return output_path
