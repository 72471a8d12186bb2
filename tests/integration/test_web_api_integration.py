"""
Integration tests for the FastAPI application.

These tests drive the HTTP surface end to end with a TestClient and a fresh
store per test.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from task_manager_api.config.loader import TaskManagerConfig
from task_manager_api.core.store import TaskStore
from task_manager_api.web.app import create_app


class TestCreateEndpoint:
    """Test POST /tasks."""

    def test_create_task(self, client):
        """Test a valid body creates a pending task."""
        response = client.post(
            "/tasks", json={"title": "X", "description": "Y"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "X"
        assert body["description"] == "Y"
        assert body["status"] == "pending"
        assert body["id"] not in {"1", "2", "3"}
        assert set(body) == {"id", "title", "description", "status"}

    def test_create_ignores_client_status_and_id(self, client):
        """Test clients cannot choose the id or initial status."""
        response = client.post(
            "/tasks",
            json={"id": "1", "title": "X", "description": "Y", "status": "completed"},
        )

        assert response.status_code == 201
        assert response.json()["id"] != "1"
        assert response.json()["status"] == "pending"

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "", "description": "x"},
            {"title": "x", "description": ""},
            {"title": None, "description": None},
            {"title": "x"},
            {},
        ],
    )
    def test_create_missing_fields_returns_400(self, client, store, payload):
        """Test incomplete bodies are rejected without changing the store."""
        response = client.post("/tasks", json=payload)

        assert response.status_code == 400
        assert response.json() == {
            "error": "ValidationError",
            "message": "title and description are required",
            "status_code": 400,
        }
        assert len(store) == 3

    def test_create_invalid_json_returns_400(self, client):
        """Test a body that is not JSON is a bad request."""
        response = client.post(
            "/tasks",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Request body must be valid JSON."

    def test_create_wrong_type_returns_400(self, client):
        """Test a non-string title is a bad request."""
        response = client.post("/tasks", json={"title": 5, "description": "x"})

        assert response.status_code == 400
        assert "title" in response.json()["message"]


class TestReadEndpoints:
    """Test GET /tasks and GET /tasks/{id}."""

    def test_list_tasks(self, client):
        """Test the seed tasks are listed in order."""
        response = client.get("/tasks")

        assert response.status_code == 200
        assert [task["id"] for task in response.json()] == ["1", "2", "3"]

    def test_get_round_trips_listed_tasks(self, client):
        """Test every listed task matches its single-task response."""
        for task in client.get("/tasks").json():
            response = client.get(f"/tasks/{task['id']}")
            assert response.status_code == 200
            assert response.json() == task

    def test_get_unknown_returns_404(self, client):
        """Test an unknown id gives a 404 naming the id."""
        response = client.get("/tasks/nonexistent-id")

        assert response.status_code == 404
        assert response.json() == {
            "error": "NotFoundError",
            "message": "Task with ID nonexistent-id not found.",
            "status_code": 404,
        }


class TestUpdateEndpoint:
    """Test PUT /tasks/{id}."""

    def test_update_status_only(self, client):
        """Test a status-only update keeps the other fields."""
        before = client.get("/tasks/2").json()

        response = client.put("/tasks/2", json={"status": "completed"})

        assert response.status_code == 200
        assert response.json() == {**before, "status": "completed"}

    def test_update_empty_body_is_noop(self, client):
        """Test an empty update returns the task unchanged."""
        before = client.get("/tasks/1").json()

        response = client.put("/tasks/1", json={})

        assert response.status_code == 200
        assert response.json() == before

    def test_update_without_body_is_noop(self, client):
        """Test a PUT with no body returns the task unchanged."""
        before = client.get("/tasks/1").json()

        response = client.put("/tasks/1")

        assert response.status_code == 200
        assert response.json() == before

    def test_update_null_body_is_noop(self, client):
        """Test a JSON null body is treated like an empty update."""
        before = client.get("/tasks/2").json()

        response = client.put(
            "/tasks/2", content="null", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 200
        assert response.json() == before

    def test_update_without_body_unknown_returns_404(self, client):
        """Test a bodyless PUT on an unknown id gives 404."""
        response = client.put("/tasks/nope")

        assert response.status_code == 404
        assert response.json()["message"] == "Task with ID nope not found."

    def test_update_title_and_description(self, client):
        """Test title and description can be replaced."""
        response = client.put(
            "/tasks/1", json={"title": "New", "description": "Newer"}
        )

        assert response.status_code == 200
        assert response.json()["title"] == "New"
        assert client.get("/tasks/1").json()["description"] == "Newer"

    def test_update_unknown_returns_404(self, client):
        """Test updating an unknown id gives 404."""
        response = client.put("/tasks/99", json={"status": "completed"})

        assert response.status_code == 404

    def test_update_invalid_status_returns_400(self, client):
        """Test an invalid status gives 400 and keeps the old status."""
        response = client.put("/tasks/1", json={"status": "archived"})

        assert response.status_code == 400
        assert "Invalid status" in response.json()["message"]
        assert client.get("/tasks/1").json()["status"] == "pending"

    def test_update_invalid_status_does_not_apply_other_fields(self, client):
        """Test a rejected update leaves title and description untouched."""
        before = client.get("/tasks/1").json()

        response = client.put(
            "/tasks/1", json={"title": "Changed", "status": "archived"}
        )

        assert response.status_code == 400
        assert client.get("/tasks/1").json() == before


class TestDeleteEndpoint:
    """Test DELETE /tasks/{id}."""

    def test_delete_then_get_returns_404(self, client):
        """Test a deleted task is gone and the list shrinks by one."""
        response = client.delete("/tasks/3")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/tasks/3").status_code == 404
        assert len(client.get("/tasks").json()) == 2

    def test_delete_twice(self, client):
        """Test the second delete of the same id is a 404."""
        assert client.delete("/tasks/2").status_code == 204
        assert client.delete("/tasks/2").status_code == 404


class TestEndToEnd:
    """Test the full documented request sequence."""

    def test_scenario(self, client):
        """Test create, list, update, delete and get in sequence."""
        created = client.post("/tasks", json={"title": "X", "description": "Y"})
        assert created.status_code == 201
        assert created.json()["status"] == "pending"
        assert created.json()["id"] not in {"1", "2", "3"}

        listed = client.get("/tasks")
        assert listed.status_code == 200
        assert len(listed.json()) == 4
        assert listed.json()[-1] == created.json()

        updated = client.put("/tasks/2", json={"status": "completed"})
        assert updated.status_code == 200
        assert updated.json()["status"] == "completed"

        assert client.delete("/tasks/3").status_code == 204
        assert client.get("/tasks/3").status_code == 404


class TestApplication:
    """Test application wiring."""

    def test_health_and_ping(self, client):
        """Test the service endpoints respond."""
        assert client.get("/health").json() == {"status": "healthy"}
        assert client.get("/ping").json() == {"status": "ok"}

    def test_request_id_header(self, client):
        """Test responses carry a request id, reusing a supplied one."""
        generated = client.get("/tasks")
        echoed = client.get("/tasks", headers={"X-Request-ID": "abc-123"})

        assert len(generated.headers["X-Request-ID"]) == 36
        assert echoed.headers["X-Request-ID"] == "abc-123"

    def test_fresh_store_per_app(self):
        """Test each app gets its own seeded store when none is given."""
        first = create_app(TaskManagerConfig())
        second = create_app(TaskManagerConfig())

        with TestClient(first) as first_client, TestClient(second) as second_client:
            first_client.delete("/tasks/1")

            assert second_client.get("/tasks/1").status_code == 200

    def test_seed_tasks_disabled(self):
        """Test seed_tasks=False starts with an empty list."""
        app = create_app(TaskManagerConfig(seed_tasks=False))

        with TestClient(app) as client:
            assert client.get("/tasks").json() == []

    def test_supplied_store_is_used(self):
        """Test an explicit store is served as-is."""
        store = TaskStore(seed=False)
        store.create("Only", "One")
        app = create_app(store=store)

        with TestClient(app) as client:
            assert [task["title"] for task in client.get("/tasks").json()] == ["Only"]

    def test_cors_enabled_by_config(self):
        """Test configured origins receive CORS headers."""
        app = create_app(TaskManagerConfig(cors_origins=["http://example.com"]))

        with TestClient(app) as client:
            response = client.get("/tasks", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] == "http://example.com"

    def test_startup_logs_endpoints(self, app, caplog):
        """Test the startup banner lists the endpoints."""
        with caplog.at_level(logging.INFO):
            with TestClient(app):
                pass

        messages = [record.getMessage() for record in caplog.records]
        assert "API Endpoints:" in messages
        assert any("DELETE /tasks/{task_id}" in message for message in messages)
