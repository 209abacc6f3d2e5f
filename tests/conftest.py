"""Shared fixtures for backend API tests."""

import os

import pytest
from pymongo.errors import InvalidOperation

os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")

from common.database import mongodb  # noqa: E402


class FakeAdmin:
    def __init__(self, error=None):
        self.error = error
        self.commands = []

    async def command(self, name):
        self.commands.append(name)
        if self.error is not None:
            raise self.error
        return {"ok": 1.0}


class FakeDatabase:
    def __init__(self, name, admin):
        self.name = name
        self._admin = admin

    async def command(self, name):
        return await self._admin.command(name)


class FakeMotorClient:
    """Stands in for AsyncIOMotorClient without a running server."""

    error = None
    instances = []
    address = ("db.example.internal", 27017)
    nodes = frozenset({("db.example.internal", 27017)})

    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.admin = FakeAdmin(type(self).error)
        self.closed = False
        type(self).instances.append(self)

    def __getitem__(self, name):
        return FakeDatabase(name, self.admin)

    def close(self):
        self.closed = True


class LoadBalancedMotorClient(FakeMotorClient):
    """Client spread over several mongos routers, as with sharded clusters."""

    nodes = frozenset({("mongos-b.example.internal", 27017), ("mongos-a.example.internal", 27017)})

    @property
    def address(self):
        raise InvalidOperation('Cannot use "address" property when load balancing among mongoses')


@pytest.fixture(autouse=True)
def reset_connection(monkeypatch):
    """Every test starts without a database connection."""
    monkeypatch.setattr(mongodb, "_client", None)
    monkeypatch.setattr(mongodb, "_database", None)


@pytest.fixture
def fake_motor(monkeypatch):
    """Patch the motor client; call with an exception to make the ping fail."""
    def install(error=None, base=FakeMotorClient):
        client_cls = type("PatchedMotorClient", (base,), {"error": error, "instances": []})
        monkeypatch.setattr(mongodb, "AsyncIOMotorClient", client_cls)
        return client_cls

    return install


@pytest.fixture
def connected(monkeypatch):
    """Install a connected fake client and database."""
    client_cls = type("ConnectedMotorClient", (FakeMotorClient,), {"instances": []})
    client = client_cls("mongodb://fake/backend")
    monkeypatch.setattr(mongodb, "_client", client)
    monkeypatch.setattr(mongodb, "_database", client["backend"])
    return client


@pytest.fixture
def load_balanced_motor(fake_motor):
    """Patch the motor client with one that has no single server address."""
    return fake_motor(base=LoadBalancedMotorClient)
