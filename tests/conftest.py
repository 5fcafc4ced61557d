"""Shared fixtures for the task manager tests."""

import pytest
from starlette.testclient import TestClient

from task_manager.config import Settings
from task_manager.db import TaskDatabase
from task_manager.service import TaskService
from task_manager.web import create_app

from .fakes import RecordingStore

HX_HEADERS = {"HX-Request": "true"}


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "tasks.db")


@pytest.fixture
def store(db_path):
    database = TaskDatabase(db_path)
    yield database
    database.close()


@pytest.fixture
def recording_store(store):
    return RecordingStore(store)


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.fixture
def settings(db_path):
    return Settings(db_path=db_path, secret_key="test-secret-key")


@pytest.fixture
def client(service, settings):
    with TestClient(create_app(service, settings)) as test_client:
        yield test_client
