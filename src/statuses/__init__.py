"""Bidirectional lookup between HTTP status codes and reason phrases."""

from .exceptions import RegistryError, StatusesError, UnknownCode, UnknownMessage
from .http import StatusClass, status_class
from .registry import Registry, StatusEntry, code, entries, entry, message

__all__ = [
    "Registry",
    "RegistryError",
    "StatusClass",
    "StatusEntry",
    "StatusesError",
    "UnknownCode",
    "UnknownMessage",
    "code",
    "entries",
    "entry",
    "message",
    "status_class",
]
