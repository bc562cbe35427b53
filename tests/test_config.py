from __future__ import annotations

import argparse

import msgspec
import pytest

from statuses.config import CLIConfig


def test_defaults() -> None:
    config = CLIConfig()
    assert config.output == "text"
    assert config.log_level == "WARNING"


def test_from_namespace() -> None:
    config = CLIConfig.from_namespace(argparse.Namespace(json=True, log_level="debug"))
    assert config == CLIConfig(output="json", log_level="DEBUG")
    assert CLIConfig.from_namespace(argparse.Namespace()) == CLIConfig()


def test_from_namespace_rejects_unknown_level() -> None:
    with pytest.raises(msgspec.ValidationError):
        CLIConfig.from_namespace(argparse.Namespace(log_level="loud"))
