"""Command line configuration objects."""

from __future__ import annotations

import argparse
from typing import Literal

import msgspec
from msgspec import Struct


class CLIConfig(Struct, frozen=True):
    """Typed configuration for a ``statuses`` command invocation."""

    output: Literal["text", "json"] = "text"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> CLIConfig:
        """Build a config from parsed command line arguments."""

        payload = {
            "output": "json" if getattr(args, "json", False) else "text",
            "log_level": str(getattr(args, "log_level", "WARNING")).upper(),
        }
        return msgspec.convert(payload, type=cls)
