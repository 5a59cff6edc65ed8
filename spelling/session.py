# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from requests import adapters, models, Session
from requests.structures import CaseInsensitiveDict
from typing import Any

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

TEXT_ACCEPT = "text/plain, */*;q=0.5"


class DictionaryDownloadAdapter(adapters.HTTPAdapter):
    """Adapter for word list downloads

    Every request gets the default timeout unless the caller gives one, and asks
    for plain text unless the caller already set an accept header.
    """

    def __init__(self, *args: Any, timeout: float | None = None, accept: str = TEXT_ACCEPT, **kwargs: Any) -> None:
        self.timeout = timeout
        self.accept = accept
        super().__init__(*args, **kwargs)

    def send(self, request: models.PreparedRequest, *args: Any, **kwargs: Any) -> models.Response:
        request.headers.setdefault("accept", self.accept)
        if not kwargs.get("timeout"):
            kwargs["timeout"] = self.timeout
        return super().send(request, *args, **kwargs)


def get_requests_session(*, timeout: float | None = None) -> Session:
    adapter = DictionaryDownloadAdapter(timeout=timeout)

    session = Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = True
    session.headers = CaseInsensitiveDict(
        {
            "user-agent": "spelling/" + __version__,
        }
    )

    return session
