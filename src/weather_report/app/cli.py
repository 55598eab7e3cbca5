from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from weather_report.config.loader import DEFAULT_CONFIG_PATH, load_config
from weather_report.kernel.composition_root import build_runtime
from weather_report.usecases.config_models import AdapterConfig, AppConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weather-report", description="Report the weather for a location")
    parser.add_argument("--config", help="Path to YAML config (defaults to the packaged config)")
    parser.add_argument("--location", help="Override the configured location")
    parser.add_argument("--output", help="Write the report to this file instead of the configured sink")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_location_override(config: AppConfig, args: argparse.Namespace) -> None:
    # An explicit empty --location is still an override.
    if args.location is not None:
        config.report.location = args.location


def apply_output_override(config: AppConfig, args: argparse.Namespace) -> None:
    # --output always selects the file adapter, whatever the config declared.
    if args.output is not None:
        config.output = AdapterConfig(kind="file", settings={"path": args.output})


def run(argv: Sequence[str] | None = None) -> int:
    # Thin wrapper: load config, apply overrides, let the composition root wire the reporter.
    args = parse_args(argv)
    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    config = load_config(config_path)
    apply_location_override(config, args)
    apply_output_override(config, args)

    runtime = build_runtime(config=config)
    try:
        runtime.reporter.report_weather(runtime.location)
    finally:
        # The log file is released even when closing the output sink fails.
        try:
            runtime.output_sink.close()
        finally:
            if runtime.log_sink is not None:
                runtime.log_sink.close()
    return 0
