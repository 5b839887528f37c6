"""Contrato del transporte HTTP.

El repositorio no sabe nada de conexiones, TLS ni timeouts: solo llama a
`post`/`get` y recibe el cuerpo como texto.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class HttpClient(Protocol):
    """Transporte síncrono mínimo.

    Reglas:
    - Ambas operaciones bloquean hasta tener el cuerpo completo.
    - Cualquier fallo de red o status no exitoso se reporta como
      `mcprofiles.core.errors.TransportError`.
    """

    def post(self, url: str, body: str, headers: Mapping[str, str]) -> str:
        ...

    def get(self, url: str, headers: Mapping[str, str]) -> str:
        ...
