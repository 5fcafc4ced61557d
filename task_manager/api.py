"""JSON read API for tasks."""

import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from .errors import TaskErrorKind, TaskServiceError
from .messages import ErrorMessage
from .models import FieldError, Task, TaskStatus
from .service import TaskService

logger = logging.getLogger(__name__)


def tasks_to_json(tasks: list[Task]) -> list[dict]:
    return [t.model_dump(mode="json", by_alias=True) for t in tasks]


def create_error_response(
    kind: TaskErrorKind, issues: list[dict] | None = None, message: str | None = None
) -> dict:
    """Create an error body. Causes are never exposed, only fixed messages."""
    body: dict = {"error": message or kind.message}
    if issues:
        body["issues"] = issues
    return body


class TaskApi:
    """Read endpoint delegating to a TaskService."""

    def __init__(self, service: TaskService):
        self.service = service

    async def handle_list_tasks(self, request: Request) -> Response:
        """Handle GET requests for the task list."""
        raw_status = request.query_params.get("status")

        if raw_status is None:
            fetch = self.service.get_all_tasks()
        else:
            try:
                status = TaskStatus(raw_status)
            except ValueError:
                valid = [s.value for s in TaskStatus]
                issue = FieldError(
                    path=["status"],
                    message=f"Invalid status: {raw_status}. Valid values: {valid}",
                )
                return JSONResponse(
                    create_error_response(
                        TaskErrorKind.INVALID_INPUT,
                        [issue.model_dump()],
                        message=ErrorMessage.INVALID_STATUS,
                    ),
                    status_code=TaskErrorKind.INVALID_INPUT.http_status,
                )
            fetch = self.service.get_tasks_by_status(status)

        try:
            tasks = await fetch
        except TaskServiceError as exc:
            logger.error("GET /tasks failed: kind=%s", exc.kind.value)
            return JSONResponse(
                create_error_response(exc.kind), status_code=exc.kind.http_status
            )

        return JSONResponse(tasks_to_json(tasks))

    def routes(self) -> list[Route]:
        return [Route("/tasks", self.handle_list_tasks, methods=["GET"])]

    def build_app(self) -> Starlette:
        """Create the Starlette app, meant to be mounted under ``/api``."""
        return Starlette(routes=self.routes())
