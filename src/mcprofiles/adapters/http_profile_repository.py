"""Repositorio de perfiles sobre la API HTTP de Mojang.

- `find_profiles_by_names`: POST por lotes de como mucho 100 nombres.
- `find_profile_by_id`: GET al session server, con texturas decodificadas.

Las peticiones son secuenciales: cada lote se consume por completo antes de
enviar el siguiente. Cualquier error aborta la llamada entera y descarta lo
acumulado.
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, Sequence
from uuid import UUID

from mcprofiles.adapters.http_client import HttpxHttpClient
from mcprofiles.core.config import AppSettings
from mcprofiles.core.domain.models import MinecraftProfile, Profile
from mcprofiles.core.domain.uuids import coerce_uuid, to_compact
from mcprofiles.core.interfaces.http import HttpClient
from mcprofiles.core.services.decoding import decode_minecraft_profile, decode_profiles

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def iter_batches(names: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Parte `names` en tramos consecutivos de como mucho `size` elementos."""

    if size < 1:
        raise ValueError("batch size must be >= 1")
    for start in range(0, len(names), size):
        yield names[start : start + size]


class HttpProfileRepository:
    """Implementa `MinecraftProfileRepository` contra los endpoints HTTP."""

    def __init__(self, client: HttpClient | None = None, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()
        self._owned_client: HttpxHttpClient | None = None
        if client is None:
            self._owned_client = HttpxHttpClient(self._settings)
            client = self._owned_client
        self._client = client

    def find_profiles_by_names(self, names: Sequence[str]) -> list[Profile]:
        if isinstance(names, str):
            raise TypeError("names must be a sequence of strings, not a single string")

        names = list(names)
        url = self._settings.profiles_by_names_url
        profiles: list[Profile] = []
        for index, batch in enumerate(iter_batches(names, self._settings.names_per_request)):
            logger.debug("POST %s batch=%d size=%d", url, index, len(batch))
            response = self._client.post(url, json.dumps(batch), JSON_HEADERS)
            profiles.extend(decode_profiles(response))
        return profiles

    def find_profile_by_id(self, profile_id: UUID | str) -> MinecraftProfile:
        url = self._settings.profile_url(to_compact(coerce_uuid(profile_id)))
        logger.debug("GET %s", url)
        return decode_minecraft_profile(self._client.get(url, JSON_HEADERS))

    def close(self) -> None:
        if self._owned_client is not None:
            self._owned_client.close()

    def __enter__(self) -> HttpProfileRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
