"""Writes bulletin artifacts into the output directory."""

import logging
from pathlib import Path

from bulletin.config.defaults import (
    DEFAULT_HTML_FILENAME,
    DEFAULT_INDEX_FILENAME,
    DEFAULT_PNG_FILENAME,
    DEFAULT_RAW_FILENAME,
)
from bulletin.reporting.html_builder import build_redirect_page

logger = logging.getLogger(__name__)


class Publisher:
    def __init__(
        self,
        output_dir: str | Path,
        html_filename: str = DEFAULT_HTML_FILENAME,
        png_filename: str = DEFAULT_PNG_FILENAME,
        index_filename: str = DEFAULT_INDEX_FILENAME,
        raw_filename: str = DEFAULT_RAW_FILENAME,
    ):
        self.output_dir = Path(output_dir)
        self.html_filename = html_filename
        self.png_filename = png_filename
        self.index_filename = index_filename
        self.raw_filename = raw_filename

    @property
    def png_path(self) -> Path:
        return self.output_dir / self.png_filename

    def ensure_output_dir(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    def _write(self, filename: str, content: str) -> Path:
        path = self.output_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    def write_html(self, html: str) -> Path:
        path = self._write(self.html_filename, html)
        logger.info("HTML report saved to %s", path)
        return path

    def write_redirect(self) -> Path:
        path = self._write(self.index_filename, build_redirect_page(self.png_filename))
        logger.info("Redirect page created at %s", path)
        return path

    def write_raw_response(self, raw_text: str) -> Path:
        path = self._write(self.raw_filename, raw_text)
        logger.info("Raw provider response saved to %s", path)
        return path
