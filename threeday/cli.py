"""CLI entry point for the three-day forecast."""

import argparse
import json
import logging
import sys
from datetime import datetime

from pydantic import ValidationError

from threeday.config.loader import REDACTED, get_config_value, load_config, redacted
from threeday.config.schema import AppConfig
from threeday.pipeline.forecast_pipeline import ForecastPipeline
from threeday.reporting.formatters import (
    build_chart_series,
    format_cards_text,
    format_records_json,
)


def iso_timestamp(value: str) -> datetime:
    """argparse type for --at."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"not an ISO timestamp: {value!r}"
        ) from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="threeday",
        description="Three-day village forecast",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Fetch and print the forecast")
    fc_p.add_argument(
        "--format", choices=["cards", "json", "chart"], default="cards"
    )
    fc_p.add_argument(
        "--describe", action="store_true",
        help="Show sky/rain type labels instead of codes",
    )
    fc_p.add_argument("--nx", type=int, help="Grid x override")
    fc_p.add_argument("--ny", type=int, help="Grid y override")
    fc_p.add_argument(
        "--at", type=iso_timestamp, help="ISO timestamp to use instead of now"
    )

    # plan
    plan_p = sub.add_parser("plan", help="Show the requests without sending them")
    plan_p.add_argument(
        "--at", type=iso_timestamp, help="ISO timestamp to use instead of now"
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. grid.nx")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ValidationError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "plan":
        return _cmd_plan(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config: AppConfig, args) -> int:
    if args.nx is not None or args.ny is not None:
        grid = config.grid.model_copy(
            update={
                "name": "custom",
                "nx": args.nx if args.nx is not None else config.grid.nx,
                "ny": args.ny if args.ny is not None else config.grid.ny,
            }
        )
        config = config.model_copy(update={"grid": grid})

    result = ForecastPipeline(config).run(args.at)
    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1

    if args.format == "json":
        print(format_records_json(result.records))
    elif args.format == "chart":
        print(json.dumps(build_chart_series(result.records), ensure_ascii=False, indent=2))
    else:
        print(format_cards_text(result.records, describe=args.describe))
    return 0


def _cmd_plan(config: AppConfig, args) -> int:
    requests = ForecastPipeline(config).plan(args.at)
    key = REDACTED if config.service.service_key else ""
    print(f"Grid: {config.grid.name} ({config.grid.nx}, {config.grid.ny})")
    print(f"Base time: {requests[0].base_time}")
    for r in requests:
        print(f"  {r.base_date}: {json.dumps(r.params(key))}")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(json.dumps(redacted(config), ensure_ascii=False, indent=2))
        return 0
    elif args.config_command == "get":
        try:
            get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        value = redacted(config)
        for part in args.key.split("."):
            value = value[part]
        print(json.dumps(value, ensure_ascii=False) if isinstance(value, dict) else value)
        return 0
    print("Use: config show | config get KEY")
    return 1


if __name__ == "__main__":
    sys.exit(main())
