"""Minimal stand-in for requests.Response."""

from __future__ import annotations

import requests


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200, content: bytes = b""):
        self.text = text
        self.status_code = status_code
        self.content = content

    def raise_for_status(self) -> None:
        if not 200 <= self.status_code < 300:
            raise requests.HTTPError(f"{self.status_code} Error")
