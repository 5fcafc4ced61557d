"""Tests for models, messages and the error taxonomy."""

import pytest
from pydantic import ValidationError

from task_manager.errors import TaskErrorKind, TaskServiceError
from task_manager.models import (
    ActionResult,
    SubmissionResult,
    Task,
    TaskCreate,
    TaskIdInput,
    TaskStatus,
    TaskStatusUpdate,
)

VALID_ID = "3f2b8c1e-6a4d-4e8f-9b7a-1c2d3e4f5a6b"


def title_errors(title):
    with pytest.raises(ValidationError) as exc_info:
        TaskCreate.model_validate({"title": title})
    return [err["msg"] for err in exc_info.value.errors()]


class TestTaskCreate:
    """Title schema."""

    def test_title_is_trimmed(self):
        assert TaskCreate(title="  Buy milk  ").title == "Buy milk"

    def test_max_length_accepted(self):
        assert len(TaskCreate(title="a" * 255).title) == 255

    def test_max_length_counts_trimmed_title(self):
        assert TaskCreate(title="  " + "a" * 255 + "  ").title == "a" * 255

    def test_too_long_rejected(self):
        assert title_errors("a" * 256) == ["title must be at most 255 characters"]

    def test_empty_rejected(self):
        assert title_errors("") == ["title must be at least 1 character"]

    def test_whitespace_only_rejected(self):
        assert title_errors("   \t ") == ["title must be at least 1 character"]

    def test_missing_rejected(self):
        assert title_errors(None) == ["title must be at least 1 character"]

    def test_wrong_type_rejected(self):
        assert title_errors(42) == ["title must be a string"]


class TestIdAndStatusInput:
    def test_valid_uuid(self):
        assert str(TaskIdInput(id=VALID_ID).id) == VALID_ID

    def test_malformed_uuid_rejected(self):
        with pytest.raises(ValidationError):
            TaskIdInput(id="not-a-uuid")

    def test_status_update(self):
        data = TaskStatusUpdate(id=VALID_ID, status="complete")
        assert data.status == TaskStatus.COMPLETE

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            TaskStatusUpdate(id=VALID_ID, status="done")


class TestTask:
    def test_json_uses_camel_case(self):
        task = Task(id=VALID_ID, title="Buy milk", created_at="2024-05-01T10:00:00+00:00")
        data = task.model_dump(mode="json", by_alias=True)
        assert data == {
            "id": VALID_ID,
            "title": "Buy milk",
            "status": "incomplete",
            "createdAt": "2024-05-01T10:00:00+00:00",
            "updatedAt": None,
        }
        assert task.is_complete is False


class TestEnvelopes:
    def test_success_envelope(self):
        result = ActionResult.success("task updated")
        assert result.model_dump(by_alias=True, exclude_none=True) == {
            "isSuccess": True,
            "message": "task updated",
        }

    def test_failure_envelope(self):
        result = ActionResult.failure("task not found")
        assert result.model_dump(by_alias=True, exclude_none=True) == {
            "isSuccess": False,
            "error": {"message": "task not found"},
        }

    def test_submission_result(self):
        assert SubmissionResult(status="success").is_success
        assert not SubmissionResult(status="error", errors={"title": ["x"]}).is_success


class TestErrorKinds:
    @pytest.mark.parametrize(
        "kind,message",
        [
            (TaskErrorKind.FETCH_FAILED, "failed to fetch tasks"),
            (TaskErrorKind.CREATE_FAILED, "failed to create task"),
            (TaskErrorKind.UPDATE_FAILED, "failed to update task status, please try again"),
            (TaskErrorKind.DELETE_FAILED, "failed to delete task, please try again"),
            (TaskErrorKind.NOT_FOUND, "task not found"),
            (TaskErrorKind.INVALID_INPUT, "invalid task id"),
        ],
    )
    def test_fixed_messages(self, kind, message):
        assert kind.message == message
        assert TaskServiceError(kind).message == message

    def test_http_status(self):
        assert TaskErrorKind.INVALID_INPUT.http_status == 400
        assert TaskErrorKind.NOT_FOUND.http_status == 404
        assert TaskErrorKind.FETCH_FAILED.http_status == 500
        assert TaskErrorKind.DELETE_FAILED.http_status == 500

    def test_cause_is_kept(self):
        cause = RuntimeError("boom")
        error = TaskServiceError(TaskErrorKind.UPDATE_FAILED, cause=cause)
        assert error.cause is cause
        assert str(error) == "failed to update task status, please try again"
