import pytest
from fastapi.testclient import TestClient

from notes_api.main import create_app
from notes_api.storage.gateway import StorageGateway
from notes_api.storage.memory_table import InMemoryNotesTable
from notes_api.utils.jwt_auth import create_access_token


class FailingNotesTable(InMemoryNotesTable):
    """Rejects every write, the way a throttled or unreachable store would."""

    def put(self, params, callback):
        self.calls.append(("put", params))
        callback(RuntimeError("ProvisionedThroughputExceeded: table notes-internal"), None)


@pytest.fixture()
def jwt_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "dev-secret-for-tests")
    monkeypatch.setenv("JWT_EXP_MINUTES", "15")


@pytest.fixture()
def table():
    return InMemoryNotesTable()


@pytest.fixture()
def gateway(table):
    return StorageGateway(table, table_name="notes")


@pytest.fixture()
def client(gateway, jwt_env, tmp_path, monkeypatch):
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    return TestClient(create_app(gateway=gateway))


@pytest.fixture()
def auth_headers(jwt_env):
    def _headers(subject: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(subject)}"}

    return _headers
