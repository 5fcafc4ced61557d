"""Task Manager - SQLite-backed task list with a FastHTML UI."""

from .db import TaskDatabase
from .errors import TaskErrorKind, TaskServiceError
from .models import (
    ActionResult,
    SubmissionResult,
    Task,
    TaskCreate,
    TaskIdInput,
    TaskStatus,
    TaskStatusUpdate,
)
from .service import TaskService

__all__ = [
    "TaskDatabase",
    "TaskService",
    "TaskServiceError",
    "TaskErrorKind",
    "Task",
    "TaskCreate",
    "TaskIdInput",
    "TaskStatus",
    "TaskStatusUpdate",
    "ActionResult",
    "SubmissionResult",
]


def main():
    """Entry point for the task manager."""
    from .__main__ import main as run

    run()
