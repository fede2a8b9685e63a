"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from keyserver.core.storage import JsonFileGateway
from keyserver.main import create_app
from keyserver.services.issuer import KeyIssuer
from keyserver.services.key_store import KeyStore

START_MS = 1_700_000_000_000


class FakeClock:
    """Settable epoch-millisecond clock."""

    def __init__(self, now: int = START_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1000)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def keys_path(tmp_path):
    return tmp_path / "keys.json"


@pytest.fixture
def gateway(keys_path):
    return JsonFileGateway(keys_path)


@pytest.fixture
def issuer(clock):
    return KeyIssuer(key_length=16, clock=clock)


@pytest.fixture
def store(gateway, issuer, clock):
    return KeyStore(gateway, issuer=issuer, clock=clock)


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
