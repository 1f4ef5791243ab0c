"""Logging and configuration options for the `certificate-search` command."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from certificate_finder.config import AppConfig, ConfigError, load_config
from certificate_finder.logging import configure_logging

EXIT_CONFIG_ERROR = 2

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMATS = ("text", "json")
LOG_DESTINATIONS = ("auto", "stdout", "stderr")

logger = logging.getLogger("certificate_finder.cli")


def add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        help="TOML file with a [google] table holding folder_id and api_key.",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help=".env file providing GOOGLE_DRIVE_FOLDER_ID and GOOGLE_API_KEY.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (case-insensitive).",
    )
    parser.add_argument(
        "--log-format",
        type=str.lower,
        choices=LOG_FORMATS,
        default="text",
        help="Structured JSON or human-readable text logs.",
    )
    parser.add_argument(
        "--log-destination",
        type=str.lower,
        choices=LOG_DESTINATIONS,
        default="stderr",
        help="Where logs go; stdout stays free for search results unless chosen here.",
    )


def bootstrap(args: argparse.Namespace) -> AppConfig | None:
    """Set up logging, then load the Drive settings; None means they were invalid."""

    configure_logging(level=args.log_level, fmt=args.log_format, destination=args.log_destination)
    try:
        config = load_config(env_file=args.env_file, config_file=args.config)
    except ConfigError as exc:
        logger.error("Configuration invalid", extra={"error": str(exc)})
        return None

    logger.info("Drive settings loaded", extra={"folder_id": config.google.folder_id})
    return config


__all__ = ["EXIT_CONFIG_ERROR", "add_common_options", "bootstrap"]
