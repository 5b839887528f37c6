"""Adaptadores concretos (transporte httpx y repositorio HTTP)."""

from mcprofiles.adapters.http_client import HttpxHttpClient, build_client
from mcprofiles.adapters.http_profile_repository import HttpProfileRepository

__all__ = [
    "HttpProfileRepository",
    "HttpxHttpClient",
    "build_client",
]
