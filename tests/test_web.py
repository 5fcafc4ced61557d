"""Tests for the FastHTML browser UI."""

from starlette.testclient import TestClient

from task_manager.models import TaskStatus
from task_manager.service import TaskService
from task_manager.web import create_app

from .conftest import HX_HEADERS
from .fakes import FailingStore, FailingWriteStore

UNKNOWN_ID = "3f2b8c1e-6a4d-4e8f-9b7a-1c2d3e4f5a6b"


class TestHome:
    def test_empty_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Task Manager" in response.text
        assert "No tasks yet" in response.text
        assert 'id="toast"' in response.text

    def test_lists_tasks(self, client, store):
        store.insert_task("first")
        store.insert_task("second")
        text = client.get("/").text

        assert "Tasks (2)" in text
        assert text.index("second") < text.index("first")

    def test_fetch_failure(self, settings):
        with TestClient(create_app(TaskService(FailingStore()), settings)) as client:
            response = client.get("/")
        assert response.status_code == 200
        assert "failed to fetch tasks" in response.text


class TestCreate:
    def test_success(self, client, store):
        response = client.post("/tasks", data={"title": "  Buy milk  "}, headers=HX_HEADERS)

        assert response.status_code == 200
        assert "task created" in response.text
        assert "Tasks (1)" in response.text
        assert [t.title for t in store.list_tasks()] == ["Buy milk"]

    def test_validation_error(self, client, store):
        response = client.post("/tasks", data={"title": "   "}, headers=HX_HEADERS)

        assert "title must be at least 1 character" in response.text
        assert store.count_tasks() == 0

    def test_too_long_keeps_value(self, client, store):
        title = "y" * 256
        response = client.post("/tasks", data={"title": title}, headers=HX_HEADERS)

        assert "title must be at most 255 characters" in response.text
        assert title in response.text
        assert store.count_tasks() == 0

    def test_service_failure(self, settings):
        app = create_app(TaskService(FailingStore()), settings)
        with TestClient(app) as client:
            response = client.post("/tasks", data={"title": "ok"}, headers=HX_HEADERS)
        assert "failed to create task" in response.text


class TestToggle:
    def test_mark_complete(self, client, store):
        task = store.insert_task("toggle")
        response = client.post(
            f"/tasks/{task.id}/status", data={"checked": "true"}, headers=HX_HEADERS
        )

        assert "task updated" in response.text
        assert 'class="status-badge complete"' in response.text
        assert store.get_task(task.id).status == TaskStatus.COMPLETE

    def test_mark_incomplete(self, client, store):
        task = store.insert_task("toggle")
        store.update_status(task.id, TaskStatus.COMPLETE)

        response = client.post(f"/tasks/{task.id}/status", data={}, headers=HX_HEADERS)

        assert "task updated" in response.text
        assert store.get_task(task.id).status == TaskStatus.INCOMPLETE

    def test_unknown_task(self, client, store):
        store.insert_task("still here")
        response = client.post(
            f"/tasks/{UNKNOWN_ID}/status", data={"checked": "true"}, headers=HX_HEADERS
        )

        assert "task not found" in response.text
        assert "still here" in response.text

    def test_failed_write_rolls_back(self, store, settings):
        task = store.insert_task("stays open")
        failing = FailingWriteStore(store)
        with TestClient(create_app(TaskService(failing), settings)) as client:
            response = client.post(
                f"/tasks/{task.id}/status", data={"checked": "true"}, headers=HX_HEADERS
            )

        assert failing.count("update_status") == 1
        assert 'class="status-badge incomplete"' in response.text
        assert 'class="status-badge complete"' not in response.text
        assert "failed to update task status, please try again" in response.text
        assert f'id="task-{task.id}"' in response.text
        assert store.get_task(task.id).status == TaskStatus.INCOMPLETE


class TestDelete:
    def test_confirm_panel(self, client, store):
        task = store.insert_task("keep or drop")
        response = client.get(f"/tasks/{task.id}/confirm-delete", headers=HX_HEADERS)

        assert "Delete this task?" in response.text
        assert store.count_tasks() == 1

    def test_cancel(self, client, store):
        task = store.insert_task("keep")
        response = client.get(f"/tasks/{task.id}", headers=HX_HEADERS)

        assert "keep" in response.text
        assert "Delete this task?" not in response.text
        assert store.count_tasks() == 1

    def test_confirmed_delete(self, client, store):
        task = store.insert_task("drop")
        response = client.post(f"/tasks/{task.id}/delete", headers=HX_HEADERS)

        assert "task deleted" in response.text
        assert "No tasks yet" in response.text
        assert store.count_tasks() == 0

    def test_delete_unknown(self, client):
        response = client.post(f"/tasks/{UNKNOWN_ID}/delete", headers=HX_HEADERS)
        assert "task not found" in response.text
