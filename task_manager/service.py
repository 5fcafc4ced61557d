"""Task service: the only read/write path to the task store.

Every store failure is re-raised as a TaskServiceError tagged with the kind
of operation that failed. Update and delete look the task up first and raise
NOT_FOUND without touching the mutation path when it is missing.

Store calls are blocking sqlite3 work and run in Starlette's threadpool so
they never stall the event loop.
"""

import logging
from typing import Optional, Protocol

from starlette.concurrency import run_in_threadpool

from .errors import TaskErrorKind, TaskServiceError
from .models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    """Persistence primitives the service relies on (see db.TaskDatabase)."""

    def insert_task(self, title: str, status: TaskStatus = ...) -> Task: ...

    def get_task(self, task_id: str) -> Optional[Task]: ...

    def list_tasks(self, status: Optional[TaskStatus] = None) -> list[Task]: ...

    def update_status(self, task_id: str, status: TaskStatus) -> list[Task]: ...

    def delete_task(self, task_id: str) -> bool: ...


class TaskService:
    """Stateless facade over a task store."""

    def __init__(self, store: TaskStore):
        self.store = store

    async def get_all_tasks(self) -> list[Task]:
        """Return all tasks, newest first."""
        try:
            return await run_in_threadpool(self.store.list_tasks)
        except Exception as exc:
            logger.exception("Failed to fetch tasks")
            raise TaskServiceError(TaskErrorKind.FETCH_FAILED, cause=exc) from exc

    async def get_tasks_by_status(self, status: TaskStatus) -> list[Task]:
        """Return tasks with the given status, newest first."""
        try:
            return await run_in_threadpool(self.store.list_tasks, status=status)
        except Exception as exc:
            logger.exception("Failed to fetch tasks with status=%s", status.value)
            raise TaskServiceError(TaskErrorKind.FETCH_FAILED, cause=exc) from exc

    async def get_task(self, task_id: str) -> Task:
        """Return one task.

        Raises:
            TaskServiceError: NOT_FOUND if absent, FETCH_FAILED on store failure.
        """
        try:
            task = await run_in_threadpool(self.store.get_task, task_id)
        except Exception as exc:
            logger.exception("Failed to fetch task %s", task_id)
            raise TaskServiceError(TaskErrorKind.FETCH_FAILED, cause=exc) from exc

        if task is None:
            raise self._not_found(task_id)
        return task

    async def create_task(self, title: str) -> None:
        """Create a task with a trimmed title.

        Nothing is returned; callers that need the new row re-fetch.
        """
        title = title.strip()
        try:
            task = await run_in_threadpool(self.store.insert_task, title)
        except Exception as exc:
            logger.exception("Failed to create task")
            raise TaskServiceError(TaskErrorKind.CREATE_FAILED, cause=exc) from exc

        logger.info("Created task %s: %s", task.id, title)

    async def update_task_status(self, task_id: str, status: TaskStatus) -> list[Task]:
        """Set a task's status.

        Returns:
            The updated row(s).

        Raises:
            TaskServiceError: NOT_FOUND if the task does not exist,
                UPDATE_FAILED on any store failure.
        """
        try:
            if await run_in_threadpool(self.store.get_task, task_id) is None:
                raise self._not_found(task_id)

            updated = await run_in_threadpool(self.store.update_status, task_id, status)
            # Row vanished between the lookup and the write.
            if not updated:
                raise self._not_found(task_id)
        except TaskServiceError:
            raise
        except Exception as exc:
            logger.exception("Failed to update task %s", task_id)
            raise TaskServiceError(TaskErrorKind.UPDATE_FAILED, cause=exc) from exc

        logger.info("Updated task %s: status=%s", task_id, status.value)
        return updated

    async def delete_task(self, task_id: str) -> None:
        """Hard-delete a task.

        Raises:
            TaskServiceError: NOT_FOUND if the task does not exist,
                DELETE_FAILED on any store failure.
        """
        try:
            if await run_in_threadpool(self.store.get_task, task_id) is None:
                raise self._not_found(task_id)

            if not await run_in_threadpool(self.store.delete_task, task_id):
                raise self._not_found(task_id)
        except TaskServiceError:
            raise
        except Exception as exc:
            logger.exception("Failed to delete task %s", task_id)
            raise TaskServiceError(TaskErrorKind.DELETE_FAILED, cause=exc) from exc

        logger.info("Deleted task %s", task_id)

    @staticmethod
    def _not_found(task_id: str) -> TaskServiceError:
        logger.warning("Task %s not found", task_id)
        return TaskServiceError(TaskErrorKind.NOT_FOUND)
