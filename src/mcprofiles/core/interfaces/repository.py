"""Contratos de repositorios de perfiles."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable
from uuid import UUID

from mcprofiles.core.domain.models import MinecraftProfile, Profile


@runtime_checkable
class ProfileRepository(Protocol):
    def find_profiles_by_names(self, names: Sequence[str]) -> list[Profile]:
        """Resuelve nombres a perfiles; los nombres desconocidos se omiten."""

        ...


@runtime_checkable
class MinecraftProfileRepository(ProfileRepository, Protocol):
    def find_profile_by_id(self, profile_id: UUID | str) -> MinecraftProfile:
        """Devuelve el perfil extendido (con texturas) de un UUID."""

        ...
