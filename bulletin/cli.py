"""CLI entry point for the severe weather risk bulletin."""

import argparse
import json
import logging
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from bulletin.config.loader import get_config_value, load_config
from bulletin.ingest.openai_client import CredentialError, resolve_api_key
from bulletin.ingest.prompt import build_forecast_request
from bulletin.models.common import build_date_context
from bulletin.pipeline.bulletin_pipeline import BulletinPipeline
from bulletin.reporting.formatters import format_summary_json

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "ops/configs/default.yaml"


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (want YYYY-MM-DD): {value}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bulletin",
        description="Daily severe weather risk bulletin generator",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # run
    run_p = sub.add_parser("run", help="Request, render and publish the bulletin")
    run_p.add_argument("--output-dir", help="Override output directory")
    run_p.add_argument("--date", type=_iso_date, help="Report date (YYYY-MM-DD)")
    run_p.add_argument("--json", action="store_true", help="Print JSON summary")

    # render
    render_p = sub.add_parser(
        "render", help="Render and publish from a saved provider response"
    )
    render_p.add_argument("raw_file", help="Text file with the provider reply")
    render_p.add_argument("--output-dir", help="Override output directory")
    render_p.add_argument("--date", type=_iso_date, help="Report date (YYYY-MM-DD)")
    render_p.add_argument("--json", action="store_true", help="Print JSON summary")

    # prompt
    prompt_p = sub.add_parser("prompt", help="Print the prompts sent to the provider")
    prompt_p.add_argument("--date", type=_iso_date, help="Report date (YYYY-MM-DD)")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. render.viewport_width")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config
    # Built-in defaults when run outside a checkout that ships the default file
    if config_path == DEFAULT_CONFIG and not Path(DEFAULT_CONFIG).exists():
        config_path = None

    try:
        config = load_config(config_path)
    except (OSError, ValidationError) as e:
        logger.error("Invalid config %s: %s", args.config, e)
        print(f"Error: invalid config: {e}")
        return 1

    if args.command == "run":
        return _cmd_run(config, args)
    elif args.command == "render":
        return _cmd_render(config, args)
    elif args.command == "prompt":
        return _cmd_prompt(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _with_output_dir(config, args):
    if args.output_dir:
        config = config.model_copy(
            update={
                "output": config.output.model_copy(
                    update={"directory": args.output_dir}
                )
            }
        )
    return config


def _report(summary, args) -> int:
    if args.json:
        print(format_summary_json(summary))
    return 0 if not summary.errors else 1


def _cmd_run(config, args) -> int:
    try:
        resolve_api_key(config.provider.api_key_env)
    except CredentialError as e:
        logger.error("%s", e)
        print(f"Error: {e}")
        return 1
    config = _with_output_dir(config, args)
    pipeline = BulletinPipeline(config, today=args.date)
    return _report(pipeline.run(), args)


def _cmd_render(config, args) -> int:
    raw_path = Path(args.raw_file)
    try:
        raw_text = raw_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Cannot read %s: %s", raw_path, e)
        print(f"Error: {e}")
        return 1
    config = _with_output_dir(config, args)
    pipeline = BulletinPipeline(config, today=args.date)
    return _report(pipeline.run(raw_text=raw_text), args)


def _cmd_prompt(config, args) -> int:
    ctx = build_date_context(args.date)
    request = build_forecast_request(
        ctx.context_label, config.region.states, config.region.territory
    )
    print("=== SYSTEM ===")
    print(request.system_prompt)
    print("=== USER ===")
    print(request.user_prompt)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        if hasattr(value, "model_dump"):
            print(value.model_dump_json(indent=2))
        else:
            print(json.dumps(value, default=str))
        return 0
    else:
        print("Use: config show | config get KEY")
        return 1
