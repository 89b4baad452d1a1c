from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class FakeSession:
    """Stand-in for requests.Session that replays canned bodies in order.

    Each queued item is either a body string, a FakeResponse, or an exception
    instance to raise from `get`.
    """

    def __init__(self, *replies: Any) -> None:
        self.replies: List[Any] = list(replies)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, params: Optional[Dict[str, str]] = None, timeout: Optional[float] = None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if not self.replies:
            raise AssertionError(f"unexpected request to {url}")
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, FakeResponse):
            return reply
        return FakeResponse(reply)

    def close(self) -> None:
        self.closed = True
