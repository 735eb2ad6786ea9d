"""In-memory SQLite storage and API client fixtures."""

import httpx
import pytest
from fastapi.testclient import TestClient

from mythic.application.add_product import AddProductHandler
from mythic.application.categories import AddCategoryHandler
from mythic.application.register_user import RegisterUserHandler
from mythic.infrastructure.api.app import create_app
from mythic.infrastructure.config import Settings
from mythic.infrastructure.external.f2p_client import FreeToGameClient
from mythic.infrastructure.persistence.database import StorageContext


@pytest.fixture
def storage():
    ctx = StorageContext.from_url("sqlite://")
    ctx.init_db()
    yield ctx
    ctx.dispose()


@pytest.fixture
def seeded(storage):
    """Two categories, three products and one user with fixed ids."""
    AddCategoryHandler(storage.unit_of_work()).handle("RPG", category_id="c1")
    AddCategoryHandler(storage.unit_of_work()).handle("Puzzle", category_id="c2")
    add = AddProductHandler(storage.unit_of_work())
    add.handle("Dragon Quest", "Classic RPG", "10.00", ["c1"], product_id="p1")
    add.handle("Tetris", "Falling blocks", "5.00", ["c2"], product_id="p2")
    add.handle("Doom", "Shooter", "19.99", product_id="p3")
    RegisterUserHandler(storage.unit_of_work()).handle(
        "alice@example.com", "Alice", "pw", user_id="u1"
    )
    return storage


def _f2p_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/api/games":
        return httpx.Response(200, json=[{"id": 452, "title": "Call Of Duty: Warzone"}])
    if request.url.path == "/api/game":
        if request.url.params.get("id") == "452":
            return httpx.Response(200, json={"id": 452, "title": "Call Of Duty: Warzone"})
        return httpx.Response(404, json={"status": 0})
    return httpx.Response(500)


@pytest.fixture
def f2p_client():
    client = FreeToGameClient("https://f2p.test/api", transport=httpx.MockTransport(_f2p_handler))
    yield client
    client.close()


@pytest.fixture
def client(seeded, f2p_client):
    app = create_app(settings=Settings(CREATE_TABLES=False), storage=seeded, f2p_client=f2p_client)
    with TestClient(app) as test_client:
        yield test_client
