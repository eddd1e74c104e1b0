"""A stand-in for ``requests.Session`` that serves canned responses by URL.

Each route maps a full URL to either a ``requests.Response``, an exception
instance to raise, or a zero-argument callable producing one of those.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Union

import requests

Outcome = Union[requests.Response, Exception]


def make_response(body: Any = b"", status: int = 200) -> requests.Response:
    """Build a real ``requests.Response``; non-bytes bodies are JSON-encoded."""
    if isinstance(body, str):
        content = body.encode("utf-8")
    elif isinstance(body, bytes):
        content = body
    else:
        content = json.dumps(body, ensure_ascii=False).encode("utf-8")
    res = requests.Response()
    res.status_code = status
    res._content = content
    res.encoding = "utf-8"
    return res


class StubSession:
    def __init__(self, routes: dict[str, Outcome | Callable[[], Outcome]]) -> None:
        self.routes = routes
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, headers: dict[str, Any] | None = None, **kwargs: Any):
        self.calls.append({"url": url, "headers": headers, **kwargs})
        if url not in self.routes:
            raise requests.exceptions.ConnectionError(f"no route for {url}")
        outcome = self.routes[url]
        if callable(outcome) and not isinstance(outcome, requests.Response):
            outcome = outcome()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True
