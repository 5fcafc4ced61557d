"""UI components for the task manager."""

from datetime import datetime

from fasthtml.common import *

from .messages import TOAST_ERROR, TOAST_SUCCESS
from .models import SubmissionResult, Task
from .ui_state import DeleteConfirmation, DeleteState, OptimisticToggle, ToggleState

STYLES = """
* { box-sizing: border-box; }
body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
    margin: 0; padding: 2rem 1rem; background: #f1f5f9; color: #1e293b;
}
.container { max-width: 56rem; margin: 0 auto; }
header h1 { margin: 0 0 0.5rem 0; }
header p { margin: 0 0 2rem 0; color: #64748b; }

.card {
    background: white;
    border-radius: 12px;
    box-shadow: 0 1px 3px rgba(0,0,0,0.1);
    padding: 1rem 1.25rem;
    margin-bottom: 1.5rem;
}
.card h2 { margin: 0 0 1rem 0; font-size: 1.1rem; }

.create-form { display: flex; flex-direction: column; gap: 0.5rem; }
.create-form input[type=text] {
    padding: 0.6rem 0.9rem;
    border: 1px solid #e2e8f0;
    border-radius: 8px;
    font-size: 0.95rem;
}
.create-form input[type=text]:focus { outline: none; border-color: #2563eb; }
.field-error { color: #dc2626; font-size: 0.85rem; min-height: 1.2rem; }

.btn {
    padding: 0.6rem 1.2rem;
    border: none;
    border-radius: 8px;
    cursor: pointer;
    font-weight: 500;
    font-size: 0.9rem;
}
.btn-primary { background: #2563eb; color: white; }
.btn-primary:hover { background: #1d4ed8; }
.btn-danger { background: #dc2626; color: white; }
.btn-ghost { background: transparent; color: #64748b; }
.btn-ghost:hover { color: #dc2626; }
.btn-outline { background: white; border: 1px solid #e2e8f0; }

.task-item {
    background: white;
    border-radius: 10px;
    border: 1px solid #e2e8f0;
    padding: 0.9rem 1rem;
    margin-bottom: 0.5rem;
}
.task-item.completed { background: #f8fafc; }
.task-row { display: flex; align-items: center; justify-content: space-between; gap: 0.75rem; }
.task-main { display: flex; align-items: center; gap: 0.75rem; min-width: 0; }
.task-title { overflow-wrap: anywhere; font-weight: 500; }
.completed .task-title { color: #64748b; text-decoration: line-through; }
.task-date { margin: 0.4rem 0 0 1.8rem; color: #64748b; font-size: 0.75rem; }

.status-badge {
    display: inline-block;
    padding: 0.15rem 0.5rem;
    border-radius: 9999px;
    font-size: 0.7rem;
    font-weight: 500;
    color: white;
}
.status-badge.complete { background: #22c55e; }
.status-badge.incomplete { background: #3b82f6; }

.confirm-panel {
    margin-top: 0.75rem;
    padding: 0.75rem;
    border-radius: 8px;
    background: #fef2f2;
}
.confirm-panel p { margin: 0 0 0.5rem 0; }
.confirm-actions { display: flex; gap: 0.5rem; justify-content: flex-end; }

.empty-state { text-align: center; padding: 3rem 1rem; color: #64748b; }
.empty-state h3 { color: #1e293b; margin: 0 0 0.5rem 0; }

#toast { position: fixed; top: 1rem; left: 50%; transform: translateX(-50%); }
.toast { padding: 0.6rem 1rem; border-radius: 8px; font-size: 0.9rem; }

.htmx-request.btn, .htmx-request .btn { opacity: 0.6; cursor: wait; }
"""


def page_layout(title: str, *content):
    """Create a page with common layout."""
    return Html(
        Head(
            Title(title),
            Meta(charset="utf-8"),
            Meta(name="viewport", content="width=device-width, initial-scale=1"),
            Script(src="https://unpkg.com/htmx.org@1.9.10"),
            Style(STYLES),
        ),
        Body(
            Div(*content, cls="container", data_testid="task-manager-container"),
            toast_region(),
        ),
    )


def format_created_at(created_at: str) -> str:
    """Render an ISO timestamp as ``YYYY/MM/DD HH:MM``."""
    try:
        return datetime.fromisoformat(created_at).strftime("%Y/%m/%d %H:%M")
    except ValueError:
        return created_at


def toast_region():
    return Div(id="toast")


def toast(message: str, success: bool = True):
    """Out-of-band toast swapped into ``#toast``."""
    background, color = TOAST_SUCCESS if success else TOAST_ERROR
    return Div(
        Div(
            message,
            cls=f"toast {'success' if success else 'error'}",
            style=f"background: {background}; color: {color};",
            role="status" if success else "alert",
        ),
        id="toast",
        hx_swap_oob="true",
    )


def status_badge(is_completed: bool):
    """Render a completion badge."""
    if is_completed:
        return Span("Complete", cls="status-badge complete")
    return Span("Incomplete", cls="status-badge incomplete")


def task_create_form(result: SubmissionResult | None = None):
    """Render the create-task form, with field errors from a failed submission."""
    result = result or SubmissionResult(status="initial")
    value = result.initial_value.get("title", "") if not result.is_success else ""
    title_errors = result.errors.get("title", [])
    form_errors = result.errors.get("", [])

    return Form(
        Label("Task title", _for="title"),
        Input(
            type="text",
            name="title",
            id="title",
            value=value,
            placeholder="What needs to be done?",
            autocomplete="off",
            aria_invalid="true" if title_errors else None,
            data_testid="task-title-input",
        ),
        Span(
            " ".join(title_errors + form_errors),
            cls="field-error",
            role="alert",
            data_testid="task-title-error",
        ),
        Button("Add task", type="submit", cls="btn btn-primary", data_testid="task-submit-button"),
        hx_post="/tasks",
        hx_target="#task-create-form",
        hx_swap="outerHTML",
        id="task-create-form",
        cls="create-form",
    )


def delete_confirm_panel(task: Task):
    """Confirmation step shown before a delete is issued."""
    return Div(
        P(Strong("Delete this task?"), " This cannot be undone."),
        Div(
            Button(
                "Cancel",
                hx_get=f"/tasks/{task.id}",
                hx_target=f"#task-{task.id}",
                hx_swap="outerHTML",
                cls="btn btn-outline",
                aria_label="dialog-cancel",
            ),
            Button(
                "Delete",
                hx_post=f"/tasks/{task.id}/delete",
                hx_target="#task-list",
                hx_swap="outerHTML",
                cls="btn btn-danger",
                aria_label="dialog-action",
            ),
            cls="confirm-actions",
        ),
        cls="confirm-panel",
        role="dialog",
    )


def task_item(
    task: Task,
    toggle: OptimisticToggle | None = None,
    deletion: DeleteConfirmation | None = None,
):
    """Render a single task row.

    ``toggle`` overrides the stored completion flag with the UI's resolved
    value; ``deletion`` in PENDING_CONFIRM adds the confirmation panel.
    """
    is_completed = toggle.is_completed if toggle else task.is_complete
    is_pending = bool(toggle and toggle.state == ToggleState.PENDING)
    confirming = bool(deletion and deletion.state == DeleteState.PENDING_CONFIRM)
    action_label = "incomplete" if is_completed else "complete"

    return Div(
        Div(
            Div(
                Input(
                    type="checkbox",
                    name="checked",
                    value="true",
                    id=f"task-checkbox-{task.id}",
                    checked=is_completed,
                    disabled=is_pending or confirming,
                    hx_post=f"/tasks/{task.id}/status",
                    hx_trigger="change",
                    hx_target=f"#task-{task.id}",
                    hx_swap="outerHTML",
                    aria_label=f"Mark {task.title} as {action_label}",
                ),
                Label(
                    task.title,
                    _for=f"task-checkbox-{task.id}",
                    cls="task-title",
                    data_testid=f"task-title-{task.id}",
                ),
                status_badge(is_completed),
                cls="task-main",
            ),
            Button(
                "Delete",
                hx_get=f"/tasks/{task.id}/confirm-delete",
                hx_target=f"#task-{task.id}",
                hx_swap="outerHTML",
                disabled=is_pending or confirming,
                cls="btn btn-ghost",
                aria_label="Delete task",
                data_testid=f"task-delete-button-{task.id}",
            ),
            cls="task-row",
        ),
        P(format_created_at(task.created_at), cls="task-date"),
        delete_confirm_panel(task) if confirming else None,
        id=f"task-{task.id}",
        cls="task-item completed" if is_completed else "task-item",
        role="listitem",
    )


def empty_state():
    return Div(
        H3("No tasks yet"),
        P("Create a new task to start organizing what needs to be done."),
        cls="empty-state",
        role="region",
    )


def task_list(tasks: list[Task], oob: bool = False):
    """Render the task list with its count header."""
    if not tasks:
        body = empty_state()
    else:
        body = Div(
            H2(f"Tasks ({len(tasks)})"),
            Div(*[task_item(t) for t in tasks], role="list", aria_label="Task list"),
        )
    return Div(body, id="task-list", hx_swap_oob="true" if oob else None)


def fetch_error(message: str, oob: bool = False):
    """Shown in place of the list when tasks cannot be loaded."""
    return Div(
        H3("Something went wrong"),
        P(message),
        A("Back to home", href="/", cls="btn btn-outline"),
        id="task-list",
        cls="empty-state",
        role="alert",
        hx_swap_oob="true" if oob else None,
    )
