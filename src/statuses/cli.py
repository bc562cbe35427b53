"""Command line utilities for statuses."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import msgspec

from .config import CLIConfig
from .exceptions import UnknownCode, UnknownMessage
from .registry import StatusEntry, default_registry

PROJECT_NAME = "statuses"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = CLIConfig.from_namespace(args)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args, config)
    except (UnknownCode, UnknownMessage) as exc:
        print(f"{PROJECT_NAME}: {exc}", file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Print results as JSON")
    common.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity",
    )

    parser = argparse.ArgumentParser(
        prog=PROJECT_NAME,
        description="Look up HTTP status codes and reason phrases",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    message = sub.add_parser("message", help="Print the reason phrase for a status code", parents=[common])
    message.add_argument("code", help="Three digit status code, e.g. 404")
    message.set_defaults(func=_cmd_message)

    code = sub.add_parser("code", help="Print the status code for a reason phrase", parents=[common])
    code.add_argument("phrase", nargs="+", help="Reason phrase, e.g. Not Found")
    code.set_defaults(func=_cmd_code)

    listing = sub.add_parser("list", help="Print every registered status", parents=[common])
    listing.set_defaults(func=_cmd_list)

    return parser


def _cmd_message(args: argparse.Namespace, config: CLIConfig) -> int:
    entry = default_registry.entry(args.code)
    _emit(config, entry, entry.message)
    return 0


def _cmd_code(args: argparse.Namespace, config: CLIConfig) -> int:
    phrase = " ".join(args.phrase)
    entry = default_registry.entry(default_registry.code(phrase))
    _emit(config, entry, entry.code)
    return 0


def _cmd_list(args: argparse.Namespace, config: CLIConfig) -> int:
    entries = default_registry.entries()
    logger.debug("Listing %d entries", len(entries))
    if config.output == "json":
        print(msgspec.json.encode(entries).decode())
        return 0
    for entry in entries:
        print(f"{entry.code} {entry.message}")
    return 0


def _emit(config: CLIConfig, entry: StatusEntry, text: str) -> None:
    if config.output == "json":
        print(msgspec.json.encode(entry).decode())
    else:
        print(text)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
