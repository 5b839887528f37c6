"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite inyectar un transporte falso en tests sin tocar el repositorio.
"""

from mcprofiles.core.interfaces.http import HttpClient
from mcprofiles.core.interfaces.repository import MinecraftProfileRepository, ProfileRepository

__all__ = [
    "HttpClient",
    "MinecraftProfileRepository",
    "ProfileRepository",
]
