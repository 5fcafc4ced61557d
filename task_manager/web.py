"""FastHTML task manager UI.

Server-rendered pages with htmx partial updates:
- create form with per-field validation errors
- completion checkbox with optimistic value and rollback
- delete with a confirmation step
- toasts swapped out-of-band into #toast
"""

import logging
from typing import Optional

from fasthtml.common import *
from starlette.routing import Mount

from .actions import create_task_action, delete_task_action, update_task_status_action
from .api import TaskApi
from .components import (
    fetch_error,
    page_layout,
    task_create_form,
    task_item,
    task_list,
    toast,
)
from .config import Settings, get_settings
from .errors import TaskErrorKind, TaskServiceError
from .messages import SuccessMessage
from .models import ActionResult
from .service import TaskService
from .ui_state import DeleteConfirmation, DeleteState, OptimisticToggle

logger = logging.getLogger(__name__)


def result_toast(result: ActionResult):
    if result.is_success:
        return toast(result.message or "", success=True)
    return toast(result.error.message if result.error else "", success=False)


def create_app(service: TaskService, settings: Optional[Settings] = None):
    """Build the web app around an injected TaskService.

    The JSON read API is mounted under ``/api``.
    """
    settings = settings or get_settings()
    api = TaskApi(service)

    app, rt = fast_app(
        pico=False,
        secret_key=settings.secret_key,
        routes=[Mount("/api", app=api.build_app())],
    )
    app.state.service = service

    async def render_list(oob: bool = False):
        try:
            tasks = await service.get_all_tasks()
        except TaskServiceError as exc:
            return fetch_error(exc.message, oob=oob)
        return task_list(tasks, oob=oob)

    async def render_row(task_id: str, notice=None, **state) -> tuple:
        """Render one row plus an optional toast.

        If the task cannot be loaded the whole list is refreshed out-of-band
        instead, and the row itself is swapped out.
        """
        try:
            task = await service.get_task(task_id)
        except TaskServiceError as exc:
            return await render_list(oob=True), toast(exc.message, success=False)
        parts = (task_item(task, **state), notice)
        return tuple(p for p in parts if p is not None)

    @rt("/")
    async def home(request):
        """Home page with create form and task list."""
        page = page_layout(
            "Task Manager",
            Header(
                H1("Task Manager", data_testid="main-title"),
                P("Keep track of what needs to be done.", data_testid="main-description"),
            ),
            Div(
                H2("New task"),
                task_create_form(),
                cls="card",
                data_testid="task-create-card",
            ),
            Div(await render_list(), cls="card"),
        )
        return HTMLResponse(to_xml(page))

    @rt("/tasks", methods=["POST"])
    async def create_task(request):
        """Handle the create form."""
        form = await request.form()
        result = await create_task_action(service, form)

        if result.is_success:
            logger.debug("Task created from form")
            return (
                task_create_form(),
                await render_list(oob=True),
                toast(SuccessMessage.TASK_CREATED),
            )

        if "" in result.errors:
            return (
                task_create_form(result),
                toast(TaskErrorKind.CREATE_FAILED.message, success=False),
            )
        return task_create_form(result)

    @rt("/tasks/{task_id}/status", methods=["POST"])
    async def toggle_status(request, task_id: str):
        """Handle the completion checkbox.

        The browser has already flipped the checkbox; the previous value is
        its opposite.
        """
        form = await request.form()
        checked = form.get("checked") == "true"
        toggle = OptimisticToggle(task_id=task_id, is_completed=not checked)

        result = await toggle.toggle(
            checked, lambda status: update_task_status_action(service, task_id, status)
        )
        return await render_row(task_id, notice=result_toast(result), toggle=toggle)

    @rt("/tasks/{task_id}/confirm-delete")
    async def confirm_delete(task_id: str):
        """Show the delete confirmation for one task."""
        deletion = DeleteConfirmation(task_id=task_id)
        deletion.request()
        return await render_row(task_id, deletion=deletion)

    @rt("/tasks/{task_id}/delete", methods=["POST"])
    async def delete_task(task_id: str):
        """Delete after confirmation and re-render the list."""
        deletion = DeleteConfirmation(task_id=task_id, state=DeleteState.PENDING_CONFIRM)
        result = await deletion.confirm(lambda: delete_task_action(service, task_id))
        return await render_list(), result_toast(result)

    @rt("/tasks/{task_id}")
    async def cancel_delete(task_id: str):
        """Dismiss the delete confirmation without touching the task."""
        deletion = DeleteConfirmation(task_id=task_id, state=DeleteState.PENDING_CONFIRM)
        deletion.cancel()
        return await render_row(task_id, deletion=deletion)

    return app
