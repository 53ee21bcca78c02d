"""Bulletin pipeline: one request, parse, render and publish cycle."""

import logging
import time
import uuid
from datetime import date

from bulletin.config.loader import config_hash
from bulletin.config.schema import BulletinConfig
from bulletin.ingest.openai_client import OpenAIClient
from bulletin.ingest.prompt import build_forecast_request
from bulletin.models.common import build_date_context
from bulletin.models.report import RenderedArtifact
from bulletin.models.reporting import RunSummary
from bulletin.parsing.response_parser import parse_response
from bulletin.publish.publisher import Publisher
from bulletin.render.rasterizer import Rasterizer
from bulletin.reporting.formatters import format_summary_text
from bulletin.reporting.html_builder import build_report_html
from bulletin.reporting.run_summarizer import RunSummarizer

logger = logging.getLogger(__name__)


class BulletinPipeline:
    def __init__(
        self,
        config: BulletinConfig,
        client: OpenAIClient | None = None,
        rasterizer: Rasterizer | None = None,
        today: date | None = None,
    ):
        self.config = config
        self.client = client
        self.rasterizer = rasterizer
        self.today = today
        self.artifact: RenderedArtifact | None = None

    def _make_client(self) -> OpenAIClient:
        p = self.config.provider
        return OpenAIClient(
            base_url=p.base_url,
            model=p.model,
            max_tokens=p.max_tokens,
            temperature=p.temperature,
            timeout=p.timeout_seconds,
            api_key_env=p.api_key_env,
        )

    def _make_rasterizer(self) -> Rasterizer:
        r = self.config.render
        return Rasterizer(
            viewport_width=r.viewport_width,
            viewport_height=r.viewport_height,
            device_scale_factor=r.device_scale_factor,
            browser_args=r.browser_args,
            wait_until=r.wait_until.value,
        )

    def _make_publisher(self) -> Publisher:
        o = self.config.output
        return Publisher(
            o.directory,
            html_filename=o.html_filename,
            png_filename=o.png_filename,
            index_filename=o.index_filename,
            raw_filename=o.raw_filename,
        )

    def run(self, raw_text: str | None = None) -> RunSummary:
        """Execute the full bulletin cycle.

        With `raw_text` the provider is skipped and the given reply is used.
        """
        start_time = time.monotonic()
        run_id = str(uuid.uuid4())

        # 1. DATES
        ctx = build_date_context(self.today)
        summarizer = RunSummarizer(run_id, ctx.today.isoformat())
        summarizer.record_dates(ctx)
        logger.info(
            "Run %s config=%s window: %s",
            run_id[:8], config_hash(self.config), ctx.header_range,
        )

        try:
            publisher = self._make_publisher()
            publisher.ensure_output_dir()

            # 2. REQUEST
            if raw_text is None:
                request = build_forecast_request(
                    ctx.context_label,
                    self.config.region.states,
                    self.config.region.territory,
                )
                client = self.client or self._make_client()
                raw_text = client.complete(request)
                summarizer.record_response(raw_text, "provider")
            else:
                summarizer.record_response(raw_text, "file")

            logger.info(
                "\n--- Raw provider response ---\n%s\n--- End of raw provider response ---",
                raw_text,
            )
            if self.config.output.save_raw_response:
                publisher.write_raw_response(raw_text)

            # 3. PARSE + ASSEMBLE
            sections = parse_response(raw_text, ctx.today)
            summarizer.record_sections(sections)
            container_id = self.config.render.container_id
            html = build_report_html(ctx.header_range, sections, container_id)
            summarizer.record_html(publisher.write_html(html))

            # 4. RENDER
            rasterizer = self.rasterizer or self._make_rasterizer()
            png_path = rasterizer.capture(html, publisher.png_path, container_id)
            summarizer.record_png(png_path)
            self.artifact = RenderedArtifact(html=html, png_path=png_path)

            # 5. PUBLISH
            summarizer.record_index(publisher.write_redirect())

        except Exception as e:
            logger.exception("Bulletin pipeline failed")
            summarizer.record_error(f"{type(e).__name__}: {e}")

        summarizer.record_duration(time.monotonic() - start_time)
        summary = summarizer.finalize()
        logger.info("\n%s", format_summary_text(summary))
        return summary
