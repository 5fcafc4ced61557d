"""Pydantic models for the task manager."""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .messages import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH, TitleMessage


class TaskStatus(str, Enum):
    """Task status values."""

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


class Task(BaseModel):
    """A task/todo item as stored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Unique task identifier (UUID)")
    title: str = Field(description="Task title, already trimmed")
    status: TaskStatus = Field(
        default=TaskStatus.INCOMPLETE, description="Current status"
    )
    created_at: str = Field(description="Creation timestamp (ISO text)")
    updated_at: Optional[datetime] = Field(
        default=None, description="Last update timestamp, null until first update"
    )

    @property
    def is_complete(self) -> bool:
        return self.status == TaskStatus.COMPLETE


class TaskCreate(BaseModel):
    """Input for creating a task.

    The title is trimmed before the length rules run, so "   " is too short
    and 255 characters surrounded by whitespace is accepted.
    """

    title: str = Field(description="Task title")

    @field_validator("title", mode="before")
    @classmethod
    def _check_title(cls, value: object) -> str:
        if value is None:
            raise PydanticCustomError("title_too_short", TitleMessage.MIN_LENGTH)
        if not isinstance(value, str):
            raise PydanticCustomError("title_not_string", TitleMessage.NOT_STRING)
        value = value.strip()
        if len(value) < TITLE_MIN_LENGTH:
            raise PydanticCustomError("title_too_short", TitleMessage.MIN_LENGTH)
        if len(value) > TITLE_MAX_LENGTH:
            raise PydanticCustomError("title_too_long", TitleMessage.MAX_LENGTH)
        return value


class TaskIdInput(BaseModel):
    """Input carrying only a task id (delete)."""

    id: UUID = Field(description="Task identifier")


class TaskStatusUpdate(TaskIdInput):
    """Input for updating a task's status."""

    status: TaskStatus = Field(description="New status")


class FieldError(BaseModel):
    """A validation problem attached to one input field."""

    path: list[str]
    message: str


class SubmissionResult(BaseModel):
    """Reply to a form submission (create).

    ``status`` is ``"success"`` or ``"error"``. Field-level problems are keyed
    by field name; form-level problems sit under the empty key.
    """

    status: str
    initial_value: dict[str, str] = Field(default_factory=dict)
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status == "success"


class ActionError(BaseModel):
    message: str


class ActionResult(BaseModel):
    """Uniform envelope returned by the update/delete actions."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_success: bool
    message: Optional[str] = None
    error: Optional[ActionError] = None

    @classmethod
    def success(cls, message: str) -> "ActionResult":
        return cls(is_success=True, message=message)

    @classmethod
    def failure(cls, message: str) -> "ActionResult":
        return cls(is_success=False, error=ActionError(message=message))
