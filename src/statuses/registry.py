"""Registry of the IANA HTTP status codes and their reason phrases."""

from __future__ import annotations

import logging
import re
from importlib import resources
from types import MappingProxyType
from typing import Annotated, Iterable, Iterator

import msgspec

from .exceptions import RegistryError, UnknownCode, UnknownMessage

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"[1-5][0-9]{2}")

CodeToken = Annotated[str, msgspec.Meta(pattern=r"^[1-5][0-9]{2}\Z")]
ReasonPhrase = Annotated[str, msgspec.Meta(min_length=1)]


class StatusEntry(msgspec.Struct, frozen=True):
    """A registered status code and its canonical reason phrase."""

    code: CodeToken
    message: ReasonPhrase

    @property
    def status(self) -> int:
        return int(self.code)


class Registry:
    """Immutable bidirectional mapping between status codes and reason phrases.

    Both directions are derived from the same list of entries, so a code and
    its phrase can never disagree. Lookups are exact: codes must be the three
    digit token (``"404"``) or the matching ``int``, phrases must match the
    canonical casing.
    """

    __slots__ = ("_by_code", "_by_message", "_entries")

    def __init__(self, entries: Iterable[StatusEntry]) -> None:
        ordered = tuple(sorted(entries, key=lambda entry: entry.code))
        by_code: dict[str, StatusEntry] = {}
        by_message: dict[str, StatusEntry] = {}
        for entry in ordered:
            if not _TOKEN.fullmatch(entry.code):
                raise RegistryError(f"Invalid status code token: {entry.code!r}")
            if not entry.message:
                raise RegistryError(f"Empty reason phrase for status code {entry.code}")
            if entry.code in by_code:
                raise RegistryError(f"Duplicate status code: {entry.code}")
            if entry.message in by_message:
                raise RegistryError(f"Duplicate reason phrase: {entry.message!r}")
            by_code[entry.code] = entry
            by_message[entry.message] = entry
        self._entries = ordered
        self._by_code = MappingProxyType(by_code)
        self._by_message = MappingProxyType(by_message)

    @classmethod
    def from_json(cls, data: bytes | str) -> Registry:
        """Build a registry from a JSON array of ``{"code", "message"}`` objects."""

        try:
            entries = msgspec.json.decode(data, type=list[StatusEntry])
        except msgspec.DecodeError as exc:
            raise RegistryError(f"Invalid status table: {exc}") from exc
        return cls(entries)

    def entry(self, code: str | int) -> StatusEntry:
        """Return the entry registered for ``code``."""

        if isinstance(code, bool) or not isinstance(code, (str, int)):
            raise UnknownCode(code)
        token = code if isinstance(code, str) else str(code)
        try:
            return self._by_code[token]
        except KeyError:
            raise UnknownCode(code) from None

    def message(self, code: str | int) -> str:
        return self.entry(code).message

    def code(self, message: str) -> str:
        if not isinstance(message, str):
            raise UnknownMessage(message)
        try:
            return self._by_message[message].code
        except KeyError:
            raise UnknownMessage(message) from None

    def entries(self) -> tuple[StatusEntry, ...]:
        return self._entries

    def __contains__(self, code: object) -> bool:
        try:
            self.entry(code)  # type: ignore[arg-type]
        except UnknownCode:
            return False
        return True

    def __iter__(self) -> Iterator[StatusEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def _load_default() -> Registry:
    data = resources.files(__package__).joinpath("codes.json").read_bytes()
    registry = Registry.from_json(data)
    logger.debug("Loaded %d HTTP status entries", len(registry))
    return registry


default_registry = _load_default()


def entry(code: str | int) -> StatusEntry:
    """Return the registered :class:`StatusEntry` for ``code``."""

    return default_registry.entry(code)


def message(code: str | int) -> str:
    """Return the reason phrase for ``code``.

    ``code`` is the three digit token (``"404"``) or the equivalent ``int``.
    Raises :class:`~statuses.exceptions.UnknownCode` for anything else.
    """

    return default_registry.message(code)


def code(message: str) -> str:
    """Return the status code token for the exact reason phrase ``message``.

    Raises :class:`~statuses.exceptions.UnknownMessage` when no phrase matches.
    """

    return default_registry.code(message)


def entries() -> tuple[StatusEntry, ...]:
    """Return every registered entry ordered by code."""

    return default_registry.entries()


__all__ = [
    "Registry",
    "StatusEntry",
    "code",
    "default_registry",
    "entries",
    "entry",
    "message",
]
