"""HTTP API tests: health probes and the users/fruits CRUD routers."""

import asyncio

from fastapi import FastAPI
from fastapi.testclient import TestClient

from orm_bootstrap.api.http.app import startup
from orm_bootstrap.api.http.app_data import ApplicationDependencies
from orm_bootstrap.core.services import DbManageService, DbSessionService
from orm_bootstrap.entities import SCHEMAS
from orm_bootstrap.runtime.config.config_data import BootstrapConfig, ConfigData
from orm_bootstrap.runtime.context import with_context


class TestHealth:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "api"}

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_database_reports_declared_schemas(self, client: TestClient):
        response = client.get("/health/database")

        assert response.status_code == 200
        assert response.json()["schemas"] == {"User": True, "Fruit": True}

    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"


class TestUsersApi:
    def test_list_returns_seed_users(self, client: TestClient):
        response = client.get("/users/")

        assert response.status_code == 200
        emails = sorted(user["email"] for user in response.json())
        assert emails == ["bob@example.com", "jane@example.com"]

    def test_create_and_get(self, client: TestClient):
        response = client.post(
            "/users/",
            json={"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"},
        )
        assert response.status_code == 201
        created = response.json()

        response = client.get(f"/users/{created['id']}")

        assert response.status_code == 200
        assert response.json()["email"] == "ada@example.com"
        assert len(client.get("/users/").json()) == 3

    def test_create_assigns_id_and_timestamps(self, client: TestClient):
        response = client.post("/users/", json={"first_name": "Ada"})

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["created_at"]
        assert body["updated_at"]

    def test_create_rejects_managed_fields(self, client: TestClient):
        bob = next(u for u in client.get("/users/").json() if u["first_name"] == "Bob")

        response = client.post("/users/", json={"id": bob["id"], "first_name": "Impostor"})

        assert response.status_code == 422
        assert len(client.get("/users/").json()) == 2
        assert client.get(f"/users/{bob['id']}").json()["first_name"] == "Bob"

    def test_update(self, client: TestClient):
        bob = next(u for u in client.get("/users/").json() if u["first_name"] == "Bob")

        response = client.put(
            f"/users/{bob['id']}",
            json={"first_name": "Robert", "last_name": "Doe", "email": "robert@example.com"},
        )

        assert response.status_code == 200
        assert response.json()["id"] == bob["id"]
        assert client.get(f"/users/{bob['id']}").json()["first_name"] == "Robert"

    def test_delete(self, client: TestClient):
        jane = next(u for u in client.get("/users/").json() if u["first_name"] == "Jane")

        response = client.delete(f"/users/{jane['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}
        assert client.get(f"/users/{jane['id']}").status_code == 404

    def test_missing_user_returns_404(self, client: TestClient):
        assert client.get("/users/missing-id").status_code == 404
        assert client.put("/users/missing-id", json={"first_name": "X"}).status_code == 404
        assert client.delete("/users/missing-id").status_code == 404


class TestFruitsApi:
    def test_crud_cycle(self, client: TestClient):
        assert client.get("/fruits/").json() == []

        created = client.post("/fruits/", json={"name": "Apple"}).json()
        assert created["name"] == "Apple"

        updated = client.put(f"/fruits/{created['id']}", json={"name": "Mango"}).json()
        assert updated["name"] == "Mango"
        assert [f["name"] for f in client.get("/fruits/").json()] == ["Mango"]

        assert client.delete(f"/fruits/{created['id']}").status_code == 200
        assert client.get(f"/fruits/{created['id']}").status_code == 404

    def test_create_rejects_managed_fields(self, client: TestClient):
        created = client.post("/fruits/", json={"name": "Apple"}).json()

        response = client.post("/fruits/", json={"id": created["id"], "name": "Pear"})

        assert response.status_code == 422
        assert [f["name"] for f in client.get("/fruits/").json()] == ["Apple"]


class TestStartup:
    def test_bootstrap_on_startup(self, database_service: DbSessionService):
        app = FastAPI()
        app.state.app_dependencies = ApplicationDependencies(
            database_service=database_service, schemas=dict(SCHEMAS)
        )

        with with_context(ConfigData(bootstrap=BootstrapConfig(on_startup=True))):
            asyncio.run(startup(app))

        assert {"users", "fruits"} <= DbManageService(database_service).table_names()

    def test_startup_without_bootstrap_leaves_storage_untouched(
        self, database_service: DbSessionService
    ):
        app = FastAPI()
        app.state.app_dependencies = ApplicationDependencies(
            database_service=database_service, schemas=dict(SCHEMAS)
        )

        with with_context(ConfigData(bootstrap=BootstrapConfig(on_startup=False))):
            asyncio.run(startup(app))

        assert DbManageService(database_service).table_names() == set()
