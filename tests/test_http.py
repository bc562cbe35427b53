from __future__ import annotations

import pytest

from statuses import UnknownCode
from statuses.http import (
    StatusClass,
    ensure_status,
    is_client_error,
    is_error,
    is_informational,
    is_redirect,
    is_server_error,
    is_success,
    status_class,
)
from statuses.registry import entries


def test_ensure_status_accepts_registered_codes() -> None:
    assert ensure_status("200") == 200
    assert ensure_status(404) == 404
    with pytest.raises(UnknownCode):
        ensure_status(99)
    with pytest.raises(UnknownCode):
        ensure_status("600")
    with pytest.raises(UnknownCode):
        ensure_status("418")


def test_status_class_follows_first_digit() -> None:
    assert status_class("103") is StatusClass.INFORMATIONAL
    assert status_class("226") is StatusClass.SUCCESS
    assert status_class(308) is StatusClass.REDIRECTION
    assert status_class("451") is StatusClass.CLIENT_ERROR
    assert status_class("511") is StatusClass.SERVER_ERROR
    for item in entries():
        assert status_class(item.code).value == int(item.code[0])


def test_status_category_helpers() -> None:
    assert is_informational("101")
    assert not is_informational("200")
    assert is_success("200")
    assert not is_success("400")
    assert is_redirect(302)
    assert is_client_error("400")
    assert is_server_error("500")
    assert is_error("400")
    assert is_error(500)
    assert not is_error("204")


def test_category_helpers_reject_unregistered_codes() -> None:
    with pytest.raises(UnknownCode):
        is_success("299")
