"""Parsers explícitos por forma de respuesta.

- `decode_profiles`: array JSON del endpoint de búsqueda por nombres.
- `decode_minecraft_profile`: objeto JSON del endpoint por UUID.

No dependen del transporte: reciben el texto ya descargado.
"""

from __future__ import annotations

import json
from typing import Any

from mcprofiles.core.domain.models import MinecraftProfile, Profile, ProfileProperty
from mcprofiles.core.domain.uuids import to_canonical
from mcprofiles.core.errors import DecodeError, FormatError
from mcprofiles.core.services.textures import decode_textures


def _load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"malformed JSON response: {exc}") from exc


def _identity_fields(obj: Any) -> dict[str, Any]:
    """Extrae y valida `id`/`name` de un objeto de perfil."""

    if not isinstance(obj, dict):
        raise DecodeError("profile entry is not a JSON object")

    compact = obj.get("id")
    name = obj.get("name")
    if not isinstance(compact, str) or not isinstance(name, str) or not name:
        raise DecodeError("profile entry lacks required 'id'/'name'")

    try:
        profile_id = to_canonical(compact)
    except FormatError as exc:
        raise DecodeError(f"profile entry has an invalid id: {compact!r}") from exc
    return {"id": profile_id, "name": name}


def decode_profiles(text: str) -> list[Profile]:
    payload = _load_json(text)
    if not isinstance(payload, list):
        raise DecodeError("names lookup response is not a JSON array")
    return [Profile(**_identity_fields(entry)) for entry in payload]


def decode_minecraft_profile(text: str) -> MinecraftProfile:
    """Parsea la respuesta del session server.

    Un cuerpo vacío (el servicio responde 204 para UUID desconocidos) es
    `DecodeError`; la falta de la propiedad `textures` es `MissingDataError`.
    """

    payload = _load_json(text)
    fields = _identity_fields(payload)

    raw_properties = payload.get("properties", [])
    if not isinstance(raw_properties, list):
        raise DecodeError("'properties' is not a JSON array")

    properties: list[ProfileProperty] = []
    for raw in raw_properties:
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str) or not isinstance(raw.get("value"), str):
            raise DecodeError("property entry lacks 'name'/'value'")
        signature = raw.get("signature")
        properties.append(
            ProfileProperty(
                name=raw["name"],
                value=raw["value"],
                signature=signature if isinstance(signature, str) else None,
            )
        )

    return MinecraftProfile(
        **fields,
        textures=decode_textures(properties),
        properties=tuple(properties),
    )
