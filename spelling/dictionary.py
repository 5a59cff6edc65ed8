# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Dictionary sourcing and tokenization.

A dictionary is newline separated text, one word per line. Blank lines are kept
as empty words unless `skip_blank` is set; the terminator after the last line
does not start another entry.
"""
from __future__ import annotations

from .errors import DictionaryError
from .session import get_requests_session
from requests import Session
from typing import Iterator, TextIO

import logging
import requests
import sys

log = logging.getLogger("spelling.dictionary")

URL_SCHEMES = ("http://", "https://")


def iter_words(text: str, *, skip_blank: bool = False) -> Iterator[str]:
    """Lazily yield the lines of `text` without their `\\n` or `\\r\\n` terminators"""
    start = 0
    length = len(text)
    while start < length:
        end = text.find("\n", start)
        if end == -1:
            end = length
        word = text[start:end]
        if word.endswith("\r"):
            word = word[:-1]
        start = end + 1
        if skip_blank and not word:
            continue
        yield word


def split_words(text: str, *, skip_blank: bool = False) -> list[str]:
    return list(iter_words(text, skip_blank=skip_blank))


def is_url(source: str) -> bool:
    return source.lower().startswith(URL_SCHEMES)


def load_dictionary(
    source: str,
    *,
    session: Session | None = None,
    timeout: float | None = None,
    encoding: str = "utf-8",
    stdin: TextIO | None = None,
) -> str:
    """Read dictionary text from a file path, an HTTP(S) URL or '-' for standard input.

    Any failure is reported as DictionaryError.
    """
    if source == "-":
        text = (stdin or sys.stdin).read()
    elif is_url(source):
        text = _download(source, session=session, timeout=timeout, encoding=encoding)
    else:
        try:
            with open(source, encoding=encoding) as fp:
                text = fp.read()
        except OSError as ex:
            raise DictionaryError(source, f"{ex.__class__.__name__}: {ex.strerror or ex}") from ex
        except UnicodeDecodeError as ex:
            raise DictionaryError(source, f"not valid {encoding}: {ex.reason}") from ex

    log.debug("loaded %d characters of dictionary text from %r", len(text), source)
    return text


def _download(url: str, *, session: Session | None, timeout: float | None, encoding: str) -> str:
    if session is None:
        session = get_requests_session(timeout=timeout)
    try:
        response = session.get(url)
        response.raise_for_status()
    except requests.exceptions.RequestException as ex:
        raise DictionaryError(url, f"{ex.__class__.__name__}: {ex}") from ex

    try:
        return response.content.decode(encoding)
    except UnicodeDecodeError as ex:
        raise DictionaryError(url, f"not valid {encoding}: {ex.reason}") from ex
