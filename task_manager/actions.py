"""Server-side mutation actions.

Each action validates raw input first and only calls the service when the
shape is right. Service errors never escape: they become an error reply with
the fixed message for their kind.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .errors import TaskErrorKind, TaskServiceError
from .messages import SuccessMessage
from .models import (
    ActionResult,
    SubmissionResult,
    TaskCreate,
    TaskIdInput,
    TaskStatusUpdate,
)
from .service import TaskService

logger = logging.getLogger(__name__)


def field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field name."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else ""
        errors.setdefault(field, []).append(err["msg"])
    return errors


async def create_task_action(
    service: TaskService, form: Mapping[str, Any]
) -> SubmissionResult:
    """Handle the create-task form.

    Args:
        service: Task service to call.
        form: Submitted form fields; only ``title`` is read.

    Returns:
        A SubmissionResult. On validation failure ``errors`` holds per-field
        messages and the service is not called.
    """
    raw_title = form.get("title")
    initial = {"title": raw_title if isinstance(raw_title, str) else ""}

    try:
        data = TaskCreate.model_validate({"title": raw_title})
    except ValidationError as exc:
        logger.debug("Rejected create-task input: %s", exc.errors())
        return SubmissionResult(
            status="error", initial_value=initial, errors=field_errors(exc)
        )

    try:
        await service.create_task(data.title)
    except TaskServiceError as exc:
        logger.warning("create_task failed: kind=%s", exc.kind.value)
        return SubmissionResult(
            status="error",
            initial_value=initial,
            errors={"": [TaskErrorKind.CREATE_FAILED.message]},
        )

    return SubmissionResult(status="success")


async def update_task_status_action(
    service: TaskService, task_id: Any, status: Any
) -> ActionResult:
    """Set a task's status and wrap the outcome in the action envelope."""
    try:
        data = TaskStatusUpdate.model_validate({"id": task_id, "status": status})
    except ValidationError:
        logger.debug("Rejected status update id=%r status=%r", task_id, status)
        return ActionResult.failure(TaskErrorKind.INVALID_INPUT.message)

    try:
        await service.update_task_status(str(data.id), data.status)
    except TaskServiceError as exc:
        return ActionResult.failure(exc.kind.message)

    return ActionResult.success(SuccessMessage.TASK_UPDATED)


async def delete_task_action(service: TaskService, task_id: Any) -> ActionResult:
    """Delete a task and wrap the outcome in the action envelope."""
    try:
        data = TaskIdInput.model_validate({"id": task_id})
    except ValidationError:
        logger.debug("Rejected delete id=%r", task_id)
        return ActionResult.failure(TaskErrorKind.INVALID_INPUT.message)

    try:
        await service.delete_task(str(data.id))
    except TaskServiceError as exc:
        return ActionResult.failure(exc.kind.message)

    return ActionResult.success(SuccessMessage.TASK_DELETED)
