from fastapi import Request
from .services.key_store import KeyStore


def get_key_store(request: Request) -> KeyStore:
    """Return the key store owned by the running app."""
    return request.app.state.key_store
