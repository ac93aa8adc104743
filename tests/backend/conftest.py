import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from jackut.core.persistence import SnapshotStore
from jackut.core.system import System
from jackut.main import app


@pytest.fixture
def snapshot_path(tmp_path):
    """Location of the snapshot file for one test (never shared between tests)."""
    return tmp_path / "data" / "jackut.json"


@pytest.fixture
def store(snapshot_path):
    return SnapshotStore(snapshot_path)


@pytest.fixture
def system(store):
    """
    A fresh, isolated System over an empty temporary snapshot location.
    """
    return System(store)


@pytest.fixture
def signup(system):
    """
    Factory fixture: create an account and open a session for it.

    Returns the session token.
    """

    def _signup(login: str, name: str | None = None, password: str = "senha123") -> str:
        system.create_account(login, password, name or login.capitalize())
        return system.login(login, password)

    return _signup


@pytest_asyncio.fixture
async def client(system):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app serving the test System.
    """
    app.state.system = system
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    app.state.system = None


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture: register an account through the API and return
    (Authorization headers, login).
    """

    async def _get_headers(login: str | None = None, name: str | None = None,
                           password: str = "UserPass!23") -> tuple[dict[str, str], str]:
        login = login or f"user_{uuid.uuid4().hex[:6]}"
        resp = await client.post(
            "/api/v1/auth/register",
            json={"login": login, "password": password, "name": name or login},
        )
        assert resp.status_code == 200, resp.text
        resp = await client.post(
            "/api/v1/auth/login",
            json={"login": login, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["sessionToken"]
        # Cookie from login would authenticate later requests too; keep tests explicit
        client.cookies.clear()
        return {"Authorization": f"Bearer {token}"}, login

    return _get_headers
