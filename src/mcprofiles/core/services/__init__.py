"""Lógica de decodificación pura (sin I/O)."""

from mcprofiles.core.services.decoding import decode_minecraft_profile, decode_profiles
from mcprofiles.core.services.textures import decode_textures

__all__ = [
    "decode_minecraft_profile",
    "decode_profiles",
    "decode_textures",
]
