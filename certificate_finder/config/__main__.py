"""`python -m certificate_finder.config doctor`: check the Drive settings resolve."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import doctor


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="python -m certificate_finder.config")
    parser.add_argument("command", choices=["doctor"])
    parser.add_argument("--env-file", type=Path)
    parser.add_argument("--config-file", type=Path)

    args = parser.parse_args(argv)
    return 0 if doctor(env_file=args.env_file, config_file=args.config_file) else 1


if __name__ == "__main__":
    sys.exit(main())
