"""Error types raised by the status registry."""

from __future__ import annotations

from typing import Any


class StatusesError(Exception):
    """Base error type."""


class UnknownCode(StatusesError, LookupError):
    """No registered entry has the requested status code."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unknown HTTP status code: {value!r}")
        self.value = value


class UnknownMessage(StatusesError, LookupError):
    """No registered entry has the requested reason phrase."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unknown HTTP reason phrase: {value!r}")
        self.value = value


class RegistryError(StatusesError, ValueError):
    """A status table violates the registry invariants."""
