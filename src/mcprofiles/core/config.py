"""Configuración del Core.

Por qué aquí:
- Centraliza endpoints y parámetros de transporte (pydantic-settings).
- Todos los componentes aceptan `settings=None` y caen a `AppSettings()`,
  así que configurar es opcional: los defaults apuntan a producción.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# El servicio rechaza lotes de más de 100 nombres.
MAX_NAMES_PER_REQUEST = 100


class AppSettings(BaseSettings):
    """Configuración central de la librería."""

    model_config = SettingsConfigDict(
        env_prefix="MCPROFILES_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="mcprofiles/0.1",
        min_length=1,
        description="User-Agent enviado al servicio de perfiles.",
    )

    profiles_by_names_url: str = Field(
        default="https://api.mojang.com/profiles/minecraft",
        min_length=8,
        description="Endpoint POST de búsqueda por nombres.",
    )
    profile_by_id_url: str = Field(
        default="https://sessionserver.mojang.com/session/minecraft/profile/{id}",
        min_length=8,
        description="Endpoint GET por UUID; `{id}` se sustituye por el UUID compacto.",
    )
    names_per_request: int = Field(
        default=MAX_NAMES_PER_REQUEST,
        ge=1,
        le=MAX_NAMES_PER_REQUEST,
        description="Tamaño máximo de cada lote de nombres.",
    )

    @field_validator("profile_by_id_url")
    @classmethod
    def _require_id_placeholder(cls, value: str) -> str:
        if "{id}" not in value:
            raise ValueError("profile_by_id_url must contain '{id}'")
        return value

    def profile_url(self, compact_id: str) -> str:
        return self.profile_by_id_url.replace("{id}", compact_id)
