"""Taxonomía de errores de la librería.

Reglas:
- Todo error sale hacia el llamador de inmediato: sin reintentos ni
  resultados parciales.
- Los adaptadores traducen excepciones de terceros (httpx, json, base64) a
  estas clases en el borde, encadenando la causa original.
"""

from __future__ import annotations


class ProfileApiError(Exception):
    """Base de todos los errores de `mcprofiles`."""


class TransportError(ProfileApiError):
    """Fallo de red o respuesta HTTP no exitosa."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(ProfileApiError, ValueError):
    """JSON o base64 malformado, o respuesta estructuralmente incompleta."""


class MissingDataError(ProfileApiError, LookupError):
    """Falta un campo o propiedad esperada en la respuesta."""


class FormatError(ProfileApiError, ValueError):
    """Texto de identificador malformado."""
