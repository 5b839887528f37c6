"""Shared fixtures."""

from __future__ import annotations

import json

import pytest

from helpers import FakeHttpClient
from mcprofiles.core.errors import TransportError


@pytest.fixture
def fake_client() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def echo_names_client() -> FakeHttpClient:
    """Answers each names POST with one profile per requested name."""

    def responder(method: str, url: str, body: str | None) -> str:
        names = json.loads(body or "[]")
        return json.dumps([{"id": f"{i:032x}", "name": name} for i, name in enumerate(names)])

    return FakeHttpClient(responder)


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError("connection reset", url="https://api.mojang.com/profiles/minecraft")
