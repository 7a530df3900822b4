"""Load or remove fixture files from the command line.

Usage:
    esfixtures load fixtures/orders.json fixtures/users.json
    esfixtures clean fixtures/orders.json
    esfixtures --url http://search:9200 --json-logs load fixtures/*.json
    python -m esfixtures load fixtures/orders.json

The index name is the file name without its extension. Defaults for the
options come from ``ESFIXTURES_*`` environment variables (see Settings).
"""

import argparse
import sys
from typing import List, Optional

import httpx
from dependency_injector import providers

from esfixtures.config import Settings
from esfixtures.container import AppContainer
from esfixtures.exceptions import FixtureError
from esfixtures.logging_config import get_logger, setup_logging

logger = get_logger("esfixtures.cli")

COMMANDS = ("load", "clean")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="esfixtures",
        description="Load fixture data into a search service, or delete it again.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Search service base URL (default: ESFIXTURES_SERVICE_URL or http://localhost:9200)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Emit JSON log lines instead of console output",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Logging level (default: ESFIXTURES_LOG_LEVEL or INFO)",
    )
    parser.add_argument("command", choices=COMMANDS, help="What to do with the fixtures")
    parser.add_argument("files", nargs="+", help="Fixture files, one index per file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = Settings()

    # Command-line flags win over the environment
    if args.url:
        settings.service_url = args.url
    if args.json_logs is not None:
        settings.json_logs = args.json_logs
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)

    container = AppContainer()
    container.settings.override(providers.Object(settings))
    try:
        loader = container.fixture_loader(*args.files)
        if args.command == "load":
            loader.load()
        else:
            loader.clean()
    except (FixtureError, httpx.TransportError) as exc:
        logger.error(
            "command_failed",
            command=args.command,
            url=settings.service_url,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return 1
    finally:
        container.shutdown_resources()

    logger.info("command_complete", command=args.command, url=settings.service_url, files=len(args.files))
    return 0


if __name__ == "__main__":
    sys.exit(main())
