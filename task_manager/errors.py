"""Error taxonomy for the task service."""

from enum import Enum
from typing import Optional

from .messages import ErrorMessage


class TaskErrorKind(str, Enum):
    """Closed set of failure kinds raised by the service and actions."""

    FETCH_FAILED = "FETCH_FAILED"
    CREATE_FAILED = "CREATE_FAILED"
    UPDATE_FAILED = "UPDATE_FAILED"
    DELETE_FAILED = "DELETE_FAILED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"

    @property
    def message(self) -> str:
        """Fixed user-facing message for this kind."""
        return _KIND_MESSAGES[self]

    @property
    def http_status(self) -> int:
        return _KIND_HTTP_STATUS.get(self, 500)


_KIND_MESSAGES = {
    TaskErrorKind.FETCH_FAILED: ErrorMessage.TASK_GET_FAILED,
    TaskErrorKind.CREATE_FAILED: ErrorMessage.TASK_CREATE_FAILED,
    TaskErrorKind.UPDATE_FAILED: ErrorMessage.TASK_UPDATE_FAILED,
    TaskErrorKind.DELETE_FAILED: ErrorMessage.TASK_DELETE_FAILED,
    TaskErrorKind.NOT_FOUND: ErrorMessage.TASK_NOT_FOUND,
    TaskErrorKind.INVALID_INPUT: ErrorMessage.INVALID_TASK_ID,
}

_KIND_HTTP_STATUS = {
    TaskErrorKind.INVALID_INPUT: 400,
    TaskErrorKind.NOT_FOUND: 404,
}


class TaskServiceError(Exception):
    """A task operation failed.

    Carries the failure ``kind``, a human-readable ``message`` and the
    underlying ``cause`` (if any). The cause is for logs only; callers show
    ``message`` to users.
    """

    def __init__(
        self,
        kind: TaskErrorKind,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.kind = kind
        self.message = message or kind.message
        self.cause = cause
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"TaskServiceError(kind={self.kind.value!r}, message={self.message!r})"
