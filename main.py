#!/usr/bin/env python
"""CLI for the Route Sentinel shipping route risk service."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import uvicorn
from pydantic import BaseModel, field_validator

from route_sentinel.api import create_app
from route_sentinel.config import (
    RouteSentinelConfig,
    create_http_client,
    create_services,
    get_default_config_path,
    load_config,
)

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: str
    config: Path
    route: str | None = None
    host: str | None = None
    port: int | None = None
    log: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def assess(args: CLIArgs, config: RouteSentinelConfig) -> None:
    """Run a single assessment and print the response JSON."""
    async with create_http_client(config.http) as http_client:
        services = create_services(
            config,
            http_client=http_client,
            run_log_override=args.log if args.log else None,
        )
        logger.info(f"Assessing route: {args.route}")
        response = await services.assessor.assess(args.route)

    print(json.dumps(response.to_dict(), indent=2))

    usage = response.usage
    logger.info("\n--- Usage Summary ---")
    logger.info(f"API calls: {len(usage.api_calls)}")
    logger.info(f"Input tokens: {usage.input_tokens:,}")
    logger.info(f"Output tokens: {usage.output_tokens:,}")

    if services.run_logger and services.run_logger.last_log_path:
        logger.info(f"\nRun log written to: {services.run_logger.last_log_path}")


def serve(args: CLIArgs, config: RouteSentinelConfig) -> None:
    """Run the HTTP API."""
    if args.log:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"run_log": True})}
        )
    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_level=config.logging.level.lower(),
    )


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Assess shipping route risk with live news.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON run log for each assessment",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    assess_parser = subparsers.add_parser("assess", help="Assess one route and print JSON")
    assess_parser.add_argument("route", help='Route description, e.g. "Shanghai to Rotterdam"')

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            route=getattr(ns, "route", None),
            host=getattr(ns, "host", None),
            port=getattr(ns, "port", None),
            log=ns.log,
        )
        config = load_config(args.config)
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(level=config.logging.level, format="%(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        if args.command == "serve":
            serve(args, config)
        else:
            asyncio.run(assess(args, config))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
