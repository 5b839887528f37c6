"""Conversión entre la forma canónica y la compacta de los UUID.

El servicio remoto usa la forma compacta (32 hex, sin guiones) en URLs y
respuestas; internamente siempre trabajamos con `uuid.UUID`.
"""

from __future__ import annotations

import string
import uuid

from mcprofiles.core.errors import FormatError

COMPACT_LENGTH = 32

_HEX_DIGITS = frozenset(string.hexdigits)
# Grupos 8-4-4-4-12.
_GROUP_OFFSETS = (8, 12, 16, 20)


def to_compact(value: uuid.UUID) -> str:
    """Devuelve el UUID sin guiones (32 caracteres)."""

    return str(value).replace("-", "")


def to_canonical(compact: str) -> uuid.UUID:
    """Reinserta los guiones y parsea el identificador.

    Lanza `FormatError` si `compact` no son exactamente 32 caracteres hex.
    """

    if not isinstance(compact, str):
        raise FormatError(f"compact id must be a string, got {type(compact).__name__}")
    if len(compact) != COMPACT_LENGTH or not _HEX_DIGITS.issuperset(compact):
        raise FormatError(f"not a compact id: {compact!r}")

    parts: list[str] = []
    start = 0
    for end in (*_GROUP_OFFSETS, COMPACT_LENGTH):
        parts.append(compact[start:end])
        start = end
    return uuid.UUID("-".join(parts))


def coerce_uuid(value: uuid.UUID | str) -> uuid.UUID:
    """Acepta un `uuid.UUID` o su texto (canónico o compacto)."""

    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) == COMPACT_LENGTH:
            return to_canonical(text)
        try:
            return uuid.UUID(text)
        except ValueError as exc:
            raise FormatError(f"not a valid id: {value!r}") from exc
    raise FormatError(f"id must be a UUID or string, got {type(value).__name__}")
