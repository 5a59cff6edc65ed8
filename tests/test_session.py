# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

# pylint: disable=no-member
from spelling.session import DictionaryDownloadAdapter, get_requests_session, TEXT_ACCEPT
from requests import Request, Response, Session
from unittest import mock

import pytest


def test_valid_requests_session():
    """Test that get_requests_session returns a valid Session that has the expected parameters set.
    """

    session = get_requests_session()

    assert isinstance(session, Session)
    assert session.headers["User-Agent"].startswith("spelling/")
    assert "Accept" not in session.headers

    for prefix in ("http://", "https://"):
        adapter = session.adapters[prefix]
        assert isinstance(adapter, DictionaryDownloadAdapter)
        assert adapter.timeout is None
        assert adapter.accept == TEXT_ACCEPT


@pytest.mark.parametrize("timeout", [30, 0.5])
def test_timeout_is_passed_along(timeout):
    session = get_requests_session(timeout=timeout)
    adapter = session.adapters["https://"]
    assert isinstance(adapter, DictionaryDownloadAdapter)
    assert adapter.timeout == timeout


def test_adapter_applies_default_timeout():
    adapter = DictionaryDownloadAdapter(timeout=12)
    request = Request("GET", "https://example.com/words.txt").prepare()
    with mock.patch("requests.adapters.HTTPAdapter.send") as send:
        adapter.send(request)
        send.assert_called_once_with(request, timeout=12)

        send.reset_mock()
        adapter.send(request, timeout=3)
        send.assert_called_once_with(request, timeout=3)


def test_adapter_asks_for_plain_text():
    adapter = DictionaryDownloadAdapter()
    request = Request("GET", "https://example.com/words.txt").prepare()
    with mock.patch("requests.adapters.HTTPAdapter.send"):
        adapter.send(request)
    assert request.headers["Accept"] == TEXT_ACCEPT


def test_adapter_keeps_caller_accept_header():
    adapter = DictionaryDownloadAdapter()
    request = Request("GET", "https://example.com/words.txt", headers={"Accept": "text/csv"}).prepare()
    with mock.patch("requests.adapters.HTTPAdapter.send"):
        adapter.send(request)
    assert request.headers["Accept"] == "text/csv"


def test_session_requests_carry_download_headers():
    session = get_requests_session(timeout=7)
    response = Response()
    response.status_code = 200
    with mock.patch("requests.adapters.HTTPAdapter.send", return_value=response) as send:
        session.get("https://example.com/words.txt")
    request = send.call_args.args[0]
    assert request.headers["Accept"] == TEXT_ACCEPT
    assert request.headers["User-Agent"].startswith("spelling/")
    assert send.call_args.kwargs["timeout"] == 7
