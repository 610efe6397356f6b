"""CLI entry point for the EAS calendar client."""

import argparse
import sys
from pathlib import Path

import requests

from .client import EASClient
from .config import AppConfig, load_config
from .sync.pipeline import run_pipeline
from .utils.exceptions import ConfigError, EASError
from .utils.logging import setup_logging


def main(argv=None) -> int:
    """Main CLI entry point."""
    config = AppConfig()

    parser = argparse.ArgumentParser(
        description="EAS Calendar - list calendar folders and create a test event over ActiveSync"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=config.config_file,
        help=f"YAML config file (default: {config.config_file})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=config.output_file,
        help=f"Where to write the calendar folder list (default: {config.output_file})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.verbose else config.log_level
    logger = setup_logging(level=log_level, log_file=config.log_file)

    try:
        eas_config = load_config(args.config)
    except ConfigError as e:
        logger.error(f"Error loading config: {e}")
        return 1

    client = EASClient(eas_config, session=requests.Session(), timeout=config.request_timeout)
    try:
        result = run_pipeline(eas_config, client, args.output)
    except EASError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1
    finally:
        client.close()

    print(f"\nCalendars found: {len(result.calendars)}")
    for cal in result.calendars:
        print(f"  - {cal.display_name} (ID: {cal.server_id})")
    print(f"Folder list written to {result.output_path}")
    if result.event_created:
        print(f"Event created in calendar {result.calendar_id}")
    else:
        print("No matching calendar, no event created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
