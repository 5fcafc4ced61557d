"""User-facing message constants and title validation limits."""

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 255


class TitleMessage:
    MIN_LENGTH = f"title must be at least {TITLE_MIN_LENGTH} character"
    MAX_LENGTH = f"title must be at most {TITLE_MAX_LENGTH} characters"
    NOT_STRING = "title must be a string"


class SuccessMessage:
    TASK_CREATED = "task created"
    TASK_UPDATED = "task updated"
    TASK_DELETED = "task deleted"


class ErrorMessage:
    TASK_GET_FAILED = "failed to fetch tasks"
    TASK_CREATE_FAILED = "failed to create task"
    TASK_UPDATE_FAILED = "failed to update task status, please try again"
    TASK_DELETE_FAILED = "failed to delete task, please try again"
    TASK_NOT_FOUND = "task not found"
    INVALID_TASK_ID = "invalid task id"
    INVALID_STATUS = "invalid task status"


# Toast colours (background, foreground)
TOAST_SUCCESS = ("#4caf50", "#fff")
TOAST_ERROR = ("#dc2626", "#fff")
