"""Client-side interaction state for task items.

These models hold what a task row shows while a mutation is in flight:

- ``OptimisticToggle``: the checkbox value is applied immediately, then
  confirmed or rolled back once the server round-trip resolves.
- ``DeleteConfirmation``: delete is only issued after an explicit confirm.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum

from .models import ActionResult, TaskStatus

logger = logging.getLogger(__name__)


class ToggleState(str, Enum):
    DISPLAYED = "displayed"
    PENDING = "pending"
    ROLLED_BACK = "rolled_back"


class DeleteState(str, Enum):
    DISPLAYED = "displayed"
    PENDING_CONFIRM = "pending_confirm"
    DELETED = "deleted"
    CANCELLED = "cancelled"


StatusMutation = Callable[[TaskStatus], Awaitable[ActionResult]]
DeleteMutation = Callable[[], Awaitable[ActionResult]]


@dataclass
class OptimisticToggle:
    """Completion checkbox for one task."""

    task_id: str
    is_completed: bool
    state: ToggleState = ToggleState.DISPLAYED
    last_result: ActionResult | None = None
    _generation: int = field(default=0, repr=False)

    def apply(self, checked: bool) -> int:
        """Show ``checked`` immediately and mark the toggle pending.

        Returns a token identifying this toggle; only the latest token may
        settle the state.
        """
        self.is_completed = checked
        self.state = ToggleState.PENDING
        self._generation += 1
        return self._generation

    def settle(self, token: int, checked: bool, result: ActionResult) -> None:
        """Resolve a pending toggle with the server's answer."""
        if token != self._generation:
            # A newer toggle owns the displayed value.
            return

        self.last_result = result
        if result.is_success:
            self.state = ToggleState.DISPLAYED
        else:
            self.is_completed = not checked
            self.state = ToggleState.ROLLED_BACK
            logger.info("Rolled back toggle for task %s", self.task_id)

    async def toggle(self, checked: bool, mutate: StatusMutation) -> ActionResult:
        """Apply ``checked`` optimistically, await ``mutate``, roll back on failure."""
        token = self.apply(checked)
        status = TaskStatus.COMPLETE if checked else TaskStatus.INCOMPLETE
        result = await mutate(status)
        self.settle(token, checked, result)
        return result


@dataclass
class DeleteConfirmation:
    """Delete button for one task, gated behind a confirm step."""

    task_id: str
    state: DeleteState = DeleteState.DISPLAYED
    last_result: ActionResult | None = None

    def request(self) -> None:
        self.state = DeleteState.PENDING_CONFIRM

    def cancel(self) -> None:
        self.state = DeleteState.CANCELLED

    async def confirm(self, mutate: DeleteMutation) -> ActionResult | None:
        """Run ``mutate`` if a confirmation is pending.

        Returns:
            The action result, or None if no confirmation was pending.
        """
        if self.state != DeleteState.PENDING_CONFIRM:
            return None

        result = await mutate()
        self.last_result = result
        self.state = DeleteState.DELETED if result.is_success else DeleteState.DISPLAYED
        return result
