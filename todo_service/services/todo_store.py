"""In-memory todo store.

Maps a user id to that user's todos in insertion order. A user entry is
created on the first successful create and survives ``delete_all_todos``
(its list is emptied, not removed). Nothing is persisted.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import UTC, datetime
from typing import Any

from todo_service.core.config import DEFAULT_STATUS
from todo_service.core.errors import TodoNotFoundError, UserNotFoundError
from todo_service.models.todo import Todo
from todo_service.services.validation import validate_create_body, validate_update_body

logger = logging.getLogger(__name__)


def _now_utc() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TodoStore:
    """Thread-safe per-user todo lists. Every public method holds the store lock."""

    def __init__(self):
        self._lock = threading.Lock()
        self._todos: dict[str, list[Todo]] = {}

    def __len__(self) -> int:
        """Number of known users."""
        with self._lock:
            return len(self._todos)

    def _user_todos(self, user: str) -> list[Todo]:
        todos = self._todos.get(user)
        if todos is None:
            raise UserNotFoundError(user)
        return todos

    def _index_of(self, user: str, todo_id: str) -> int:
        todos = self._todos.get(user)
        if todos is not None:
            for i, todo in enumerate(todos):
                if todo.id == todo_id:
                    return i
        raise TodoNotFoundError(user, todo_id)

    def list_todos(self, user: str) -> list[Todo]:
        with self._lock:
            return list(self._user_todos(user))

    def get_todo(self, user: str, todo_id: str) -> Todo:
        with self._lock:
            index = self._index_of(user, todo_id)
            return self._todos[user][index]

    def create_todo(self, user: str, body: Any) -> Todo:
        """Validate ``body`` and append a new todo for ``user``, creating the user if needed."""
        fields = validate_create_body(body)
        now = _now_utc()
        todo = Todo(
            id=str(uuid.uuid4()),
            title=fields["title"],
            status=fields.get("status", DEFAULT_STATUS),
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._todos.setdefault(user, []).append(todo)
        logger.info("Created todo %s for user %s", todo.id, user)
        return todo

    def update_todo(self, user: str, todo_id: str, body: Any) -> Todo:
        """Merge ``title``/``status`` from ``body`` into an existing todo.

        Existence is checked before the body, so a missing todo wins over an
        invalid body.
        """
        with self._lock:
            index = self._index_of(user, todo_id)
            fields = validate_update_body(body)
            current = self._todos[user][index]
            updated_at = max(_now_utc(), current.updated_at)
            todo = current.model_copy(update={**fields, "updated_at": updated_at})
            self._todos[user][index] = todo
        logger.info("Updated todo %s for user %s (%s)", todo_id, user, ", ".join(sorted(fields)))
        return todo

    def delete_todo(self, user: str, todo_id: str) -> None:
        with self._lock:
            index = self._index_of(user, todo_id)
            del self._todos[user][index]
        logger.info("Deleted todo %s for user %s", todo_id, user)

    def delete_all_todos(self, user: str) -> None:
        with self._lock:
            self._user_todos(user)
            self._todos[user] = []
        logger.info("Deleted all todos for user %s", user)

    def clear(self) -> None:
        """Drop every user. Used on shutdown."""
        with self._lock:
            self._todos.clear()
