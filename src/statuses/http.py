"""Status class helpers for registered HTTP status codes."""

from __future__ import annotations

from enum import Enum

from .registry import entry


class StatusClass(Enum):
    """The five HTTP status classes, keyed by the first digit of a code."""

    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5


def ensure_status(status: str | int) -> int:
    """Normalize a registered ``status`` to an ``int``.

    Raises :class:`~statuses.exceptions.UnknownCode` when ``status`` is not registered.
    """

    return entry(status).status


def status_class(status: str | int) -> StatusClass:
    """Return the :class:`StatusClass` of ``status``."""

    return StatusClass(ensure_status(status) // 100)


def is_informational(status: str | int) -> bool:
    """Return ``True`` if ``status`` is a 1xx code."""

    return status_class(status) is StatusClass.INFORMATIONAL


def is_success(status: str | int) -> bool:
    """Return ``True`` if ``status`` is a 2xx code."""

    return status_class(status) is StatusClass.SUCCESS


def is_redirect(status: str | int) -> bool:
    """Return ``True`` if ``status`` is a 3xx code."""

    return status_class(status) is StatusClass.REDIRECTION


def is_client_error(status: str | int) -> bool:
    """Return ``True`` if ``status`` is a 4xx code."""

    return status_class(status) is StatusClass.CLIENT_ERROR


def is_server_error(status: str | int) -> bool:
    """Return ``True`` if ``status`` is a 5xx code."""

    return status_class(status) is StatusClass.SERVER_ERROR


def is_error(status: str | int) -> bool:
    """Return ``True`` if ``status`` is either a client or server error."""

    return status_class(status) in (StatusClass.CLIENT_ERROR, StatusClass.SERVER_ERROR)


__all__ = [
    "StatusClass",
    "ensure_status",
    "is_client_error",
    "is_error",
    "is_informational",
    "is_redirect",
    "is_server_error",
    "is_success",
    "status_class",
]
