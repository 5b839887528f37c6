"""Core de mcprofiles: dominio, contratos, configuración y decodificadores.

No importa adaptadores concretos (httpx vive en `mcprofiles.adapters`).
"""
