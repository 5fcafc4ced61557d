"""SQLite database operations for the task manager."""

import logging
import sqlite3
import threading
import time
import uuid
from contextlib import contextmanager, nullcontext
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .models import Task, TaskStatus

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'incomplete'
        CHECK (status IN ('incomplete', 'complete')),
    created_at TEXT NOT NULL,
    updated_at INTEGER
);

CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status);
CREATE INDEX IF NOT EXISTS idx_tasks_created_at ON tasks(created_at);
CREATE INDEX IF NOT EXISTS idx_tasks_status_created ON tasks(status, created_at);
CREATE INDEX IF NOT EXISTS idx_tasks_title ON tasks(title);
"""


class TaskDatabase:
    """SQLite-backed task store."""

    def __init__(self, db_path: str = ":memory:"):
        """Open (or create) the task database.

        Args:
            db_path: SQLite file path. ':memory:' keeps everything in one
                shared connection for the lifetime of this object.
        """
        self.db_path = str(db_path)
        self._shared: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()
        if self.db_path == ":memory:":
            self._shared = self._connect()
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        # The shared in-memory connection is used from threadpool workers.
        connection = sqlite3.connect(self.db_path, check_same_thread=False)
        connection.row_factory = sqlite3.Row
        return connection

    @contextmanager
    def _get_conn(self):
        """Yield a connection inside a transaction.

        Commits when the block exits cleanly and rolls back otherwise. File
        databases get a fresh connection per block, closed afterwards. The
        shared in-memory connection is held under a lock for the block.
        """
        if self._shared is None:
            connection, guard = self._connect(), nullcontext()
        else:
            connection, guard = self._shared, self._lock

        with guard:
            try:
                yield connection
                connection.commit()
            except Exception:
                connection.rollback()
                raise
            finally:
                if connection is not self._shared:
                    connection.close()

    def _ensure_schema(self):
        with self._get_conn() as conn:
            conn.executescript(SCHEMA)
        logger.info("Task schema ready at %s", self.db_path)

    def close(self):
        """Close the shared in-memory connection, if any."""
        if self._shared is not None:
            self._shared.close()
            self._shared = None

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def _created_stamp() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _updated_stamp() -> int:
        """Milliseconds since the epoch."""
        return int(time.time() * 1000)

    @staticmethod
    def _to_task(row: sqlite3.Row) -> Task:
        updated_at = row["updated_at"]
        return Task(
            id=row["id"],
            title=row["title"],
            status=row["status"],
            created_at=row["created_at"],
            updated_at=(
                datetime.fromtimestamp(updated_at / 1000, tz=timezone.utc)
                if updated_at is not None
                else None
            ),
        )

    def insert_task(
        self, title: str, status: TaskStatus = TaskStatus.INCOMPLETE
    ) -> Task:
        """Insert a new task row.

        Args:
            title: Task title, stored as given.
            status: Initial status.

        Returns:
            The inserted task.
        """
        task_id = self._new_id()

        with self._get_conn() as conn:
            conn.execute(
                "INSERT INTO tasks (id, title, status, created_at) VALUES (?, ?, ?, ?)",
                (task_id, title, status.value, self._created_stamp()),
            )
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
            return self._to_task(row)

    def get_task(self, task_id: str) -> Optional[Task]:
        """Fetch one task, or None when the id is unknown."""
        with self._get_conn() as conn:
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
            return self._to_task(row) if row else None

    def list_tasks(self, status: Optional[TaskStatus] = None) -> list[Task]:
        """List tasks, newest first.

        Args:
            status: Only return tasks with this status.

        Returns:
            Tasks ordered by creation time descending. Rows created in the
            same instant fall back to insertion order, newest first.
        """
        query = "SELECT * FROM tasks"
        params: list = []

        if status is not None:
            query += " WHERE status = ?"
            params.append(status.value)

        query += " ORDER BY created_at DESC, rowid DESC"

        with self._get_conn() as conn:
            rows = conn.execute(query, params).fetchall()
            return [self._to_task(row) for row in rows]

    def update_status(self, task_id: str, status: TaskStatus) -> list[Task]:
        """Set a task's status and stamp ``updated_at``.

        Returns:
            The updated rows; empty if no row matched ``task_id``.
        """
        with self._get_conn() as conn:
            cursor = conn.execute(
                "UPDATE tasks SET status = ?, updated_at = ? WHERE id = ?",
                (status.value, self._updated_stamp(), task_id),
            )
            if cursor.rowcount == 0:
                return []
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
            return [self._to_task(row)]

    def delete_task(self, task_id: str) -> bool:
        """Hard-delete a task. Returns whether a row was removed."""
        with self._get_conn() as conn:
            cursor = conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
            return cursor.rowcount > 0

    def count_tasks(self) -> int:
        with self._get_conn() as conn:
            return conn.execute("SELECT COUNT(*) FROM tasks").fetchone()[0]


def reset_database(db_path: str) -> TaskDatabase:
    """Remove an existing database file and create a fresh schema."""
    path = Path(db_path)
    if db_path != ":memory:" and path.exists():
        path.unlink()
        logger.info("Removed existing database %s", path)
    return TaskDatabase(db_path)
