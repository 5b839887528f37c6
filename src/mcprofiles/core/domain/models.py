"""Modelos del dominio (Pydantic v2).

Todos son objetos valor inmutables (`frozen=True`): se construyen a partir de
una respuesta y no se modifican después.

Nota:
- Estos modelos describen *qué* es un perfil, no *cómo* se obtiene.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Profile(BaseModel):
    """Registro mínimo de identidad: UUID + nombre visible."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        ...,
        description="Identificador único del jugador.",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Nombre visible actual del jugador.",
    )


class Skin(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        description="URL de la textura de skin.",
    )
    is_slim_model: bool = Field(
        default=False,
        description="True si `metadata.model` es exactamente 'slim'.",
    )


class Textures(BaseModel):
    """Apariencia decodificada; skin y capa pueden faltar."""

    model_config = ConfigDict(frozen=True)

    skin: Skin | None = None
    cape: str | None = Field(
        default=None,
        description="URL de la textura de capa.",
    )


class ProfileProperty(BaseModel):
    """Propiedad firmada tal como la devuelve el session server."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    value: str
    signature: str | None = None


class MinecraftProfile(Profile):
    """Perfil extendido: `Profile` + texturas decodificadas."""

    textures: Textures = Field(
        default_factory=Textures,
        description="Skin/capa decodificadas de la propiedad `textures`.",
    )
    properties: tuple[ProfileProperty, ...] = Field(
        default=(),
        description="Propiedades crudas de la respuesta (incluye firmas).",
    )
