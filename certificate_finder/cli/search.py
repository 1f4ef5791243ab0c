"""`certificate-search` CLI entrypoint."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from certificate_finder.cli import _common
from certificate_finder.config import AppConfig
from certificate_finder.gdrive_search import DriveSearchClient, SearchError, validate_identifier
from certificate_finder.presentation import (
    SearchController,
    SearchStatus,
    render_results,
)

PROG_NAME = "certificate-search"
DESCRIPTION = "Find certificate files for a student NISN in the configured Google Drive folder."
PROMPT = "NISN (blank to quit): "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "nisn",
        nargs="?",
        help="10-digit NISN to look up. Prompts interactively when omitted.",
    )
    _common.add_common_options(parser)
    return parser


def build_client(config: AppConfig) -> DriveSearchClient:
    return DriveSearchClient.from_config(config)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = _common.bootstrap(args)
    if config is None:
        return _common.EXIT_CONFIG_ERROR

    with build_client(config) as client:
        controller = SearchController(client)
        if args.nisn is not None:
            return _search_once(controller, args.nisn)
        return _interactive(controller)


def _search_once(controller: SearchController, raw: str) -> int:
    controller.update_input(raw)
    if not controller.can_submit:
        # explain the typed value, not the digits left after filtering
        try:
            validate_identifier(raw)
        except SearchError as exc:
            print(f"! {exc.message}", file=sys.stderr)
        return 1

    controller.submit()
    print(render_results(controller.state))
    return 0 if controller.state.status is SearchStatus.SUCCESS else 1


def _interactive(controller: SearchController) -> int:
    status = 1
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if not line.strip():
            break
        status = _search_once(controller, line)
    return status


if __name__ == "__main__":  # pragma: no cover - manual execution guard
    raise SystemExit(main())


__all__ = ["build_client", "build_parser", "main"]
