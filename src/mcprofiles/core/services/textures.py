"""Decodificador de la propiedad `textures`.

El session server devuelve la apariencia del jugador como un JSON embebido y
codificado en base64 dentro de la lista de propiedades del perfil:

    {"textures": {"SKIN": {"url": ..., "metadata": {"model": "slim"}},
                  "CAPE": {"url": ...}}}

Reglas:
- Gana la primera propiedad llamada `textures`.
- Solo el valor literal `"slim"` marca el modelo delgado.
- La ausencia de SKIN o CAPE no es un error.
"""

from __future__ import annotations

import base64
import json
from typing import Any, Iterable, Mapping

from mcprofiles.core.domain.models import ProfileProperty, Skin, Textures
from mcprofiles.core.errors import DecodeError, MissingDataError

TEXTURES_PROPERTY = "textures"
SLIM_MODEL = "slim"


def _property_field(prop: ProfileProperty | Mapping[str, Any], key: str) -> Any:
    if isinstance(prop, ProfileProperty):
        return getattr(prop, key)
    if isinstance(prop, Mapping):
        return prop.get(key)
    raise DecodeError(f"property must be an object, got {type(prop).__name__}")


def find_textures_value(properties: Iterable[ProfileProperty | Mapping[str, Any]]) -> str:
    """Devuelve el `value` (base64) de la primera propiedad `textures`."""

    for prop in properties:
        if _property_field(prop, "name") != TEXTURES_PROPERTY:
            continue
        value = _property_field(prop, "value")
        if not isinstance(value, str):
            raise DecodeError("textures property has no string value")
        return value
    raise MissingDataError("textures property absent")


def decode_textures_payload(encoded: str) -> dict[str, Any]:
    """base64 -> UTF-8 -> objeto JSON."""

    try:
        raw = base64.b64decode(encoded, validate=True)
        text = raw.decode("utf-8")
        payload = json.loads(text)
    # binascii.Error, UnicodeDecodeError y JSONDecodeError son ValueError.
    except ValueError as exc:
        raise DecodeError(f"malformed textures payload: {exc}") from exc

    if not isinstance(payload, dict):
        raise DecodeError("textures payload is not a JSON object")
    return payload


def _entry_url(entry: Any, kind: str) -> str:
    if not isinstance(entry, dict):
        raise DecodeError(f"{kind} entry is not an object")
    url = entry.get("url")
    if not isinstance(url, str):
        raise DecodeError(f"{kind} entry has no url")
    return url


def _parse_skin(entry: Any) -> Skin:
    url = _entry_url(entry, "SKIN")
    metadata = entry.get("metadata")
    model = metadata.get("model") if isinstance(metadata, dict) else None
    return Skin(url=url, is_slim_model=model == SLIM_MODEL)


def parse_textures(payload: Mapping[str, Any]) -> Textures:
    """Construye `Textures` desde el documento ya decodificado."""

    textures = payload.get("textures")
    if textures is None:
        return Textures()
    if not isinstance(textures, dict):
        raise DecodeError("'textures' is not an object")

    skin = None
    if textures.get("SKIN") is not None:
        skin = _parse_skin(textures["SKIN"])

    cape = None
    if textures.get("CAPE") is not None:
        cape = _entry_url(textures["CAPE"], "CAPE")

    return Textures(skin=skin, cape=cape)


def decode_textures(properties: Iterable[ProfileProperty | Mapping[str, Any]]) -> Textures:
    """Pipeline completo: buscar propiedad, decodificar y parsear."""

    return parse_textures(decode_textures_payload(find_textures_value(properties)))
