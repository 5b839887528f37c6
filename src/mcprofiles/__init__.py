"""Cliente de perfiles de jugadores de Minecraft (API de Mojang)."""

from mcprofiles.adapters import HttpProfileRepository, HttpxHttpClient
from mcprofiles.core.config import AppSettings
from mcprofiles.core.domain import (
    MinecraftProfile,
    Profile,
    ProfileProperty,
    Skin,
    Textures,
    to_canonical,
    to_compact,
)
from mcprofiles.core.errors import (
    DecodeError,
    FormatError,
    MissingDataError,
    ProfileApiError,
    TransportError,
)

__all__ = [
    "AppSettings",
    "DecodeError",
    "FormatError",
    "HttpProfileRepository",
    "HttpxHttpClient",
    "MinecraftProfile",
    "MissingDataError",
    "Profile",
    "ProfileApiError",
    "ProfileProperty",
    "Skin",
    "Textures",
    "TransportError",
    "to_canonical",
    "to_compact",
]
