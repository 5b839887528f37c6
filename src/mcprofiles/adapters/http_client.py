"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout, headers y la traducción de errores a `TransportError`.
- Implementa `core.interfaces.HttpClient`; en tests se sustituye por un stub
  o por un `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from mcprofiles.core.config import AppSettings
from mcprofiles.core.errors import TransportError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con los defaults de la librería."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxHttpClient:
    """Transporte síncrono por defecto.

    Si no se le pasa un `httpx.Client`, crea uno propio y lo cierra en
    `close()`; uno inyectado queda a cargo del llamador.
    """

    def __init__(self, settings: AppSettings | None = None, client: httpx.Client | None = None) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_client(self._settings)

    def post(self, url: str, body: str, headers: Mapping[str, str]) -> str:
        return self._send("POST", url, headers=headers, content=body.encode("utf-8"))

    def get(self, url: str, headers: Mapping[str, str]) -> str:
        return self._send("GET", url, headers=headers)

    def _send(self, method: str, url: str, *, headers: Mapping[str, str], content: bytes | None = None) -> str:
        try:
            response = self._client.request(method, url, headers=dict(headers), content=content)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}", url=url) from exc

        if not response.is_success:
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            raise TransportError(
                f"{method} {url} returned HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )
        return response.text

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
