"""Modelos y entidades del dominio.

- Aquí viven las estructuras de datos puras (Pydantic v2) y el códec de UUID.
- El dominio no conoce HTTP: solo conceptos del problema.
"""

from mcprofiles.core.domain.models import (
    MinecraftProfile,
    Profile,
    ProfileProperty,
    Skin,
    Textures,
)
from mcprofiles.core.domain.uuids import to_canonical, to_compact

__all__ = [
    "MinecraftProfile",
    "Profile",
    "ProfileProperty",
    "Skin",
    "Textures",
    "to_canonical",
    "to_compact",
]
