"""Test doubles and payload builders shared across the suite."""

from __future__ import annotations

import base64
import json
from typing import Any, Callable, Mapping


class FakeHttpClient:
    """Records every call and answers from a callable or a queue of bodies."""

    def __init__(self, responder: Callable[[str, str, str | None], str] | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self._responder = responder
        self.queued: list[str | Exception] = []

    def _answer(self, method: str, url: str, body: str | None) -> str:
        if self._responder is not None:
            return self._responder(method, url, body)
        item = self.queued.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def post(self, url: str, body: str, headers: Mapping[str, str]) -> str:
        self.calls.append({"method": "POST", "url": url, "body": body, "headers": dict(headers)})
        return self._answer("POST", url, body)

    def get(self, url: str, headers: Mapping[str, str]) -> str:
        self.calls.append({"method": "GET", "url": url, "body": None, "headers": dict(headers)})
        return self._answer("GET", url, None)


def encode_textures(document: Any) -> str:
    return base64.b64encode(json.dumps(document).encode("utf-8")).decode("ascii")


def session_profile(compact_id: str, name: str, properties: list[dict[str, Any]]) -> str:
    return json.dumps({"id": compact_id, "name": name, "properties": properties})

