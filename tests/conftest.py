"""
Pytest configuration and shared fixtures for Task Manager tests.
"""

import itertools
import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_manager_api.config.loader import TaskManagerConfig
from task_manager_api.core.store import TaskStore
from task_manager_api.web.app import create_app


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep config discovery and env overrides from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("TASK_MANAGER_") or key == "PORT":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def store() -> TaskStore:
    """Provide a freshly seeded task store."""
    return TaskStore()


@pytest.fixture
def counting_store() -> TaskStore:
    """Provide a seeded store with predictable ids (new-1, new-2, ...)."""
    counter = itertools.count(1)
    return TaskStore(id_factory=lambda: f"new-{next(counter)}")


@pytest.fixture
def app(store):
    """Create the FastAPI app bound to the per-test store."""
    return create_app(TaskManagerConfig(), store=store)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Provide a test client that runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for config files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)
