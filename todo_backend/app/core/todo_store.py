"""Todo Store - in-memory todo collection

Assigns ids and canonical urls, applies merge-on-update and keeps
insertion order. State lives for the lifetime of the process.
"""

import uuid
from threading import Lock
from typing import Dict, List, Optional

from todo_backend.app.core.config import settings
from todo_backend.app.core.errors import TodoNotFoundError
from todo_backend.app.core.logging import get_logger
from todo_backend.app.models.todo import TodoItem, TodoPatch

logger = get_logger(__name__)


class TodoStore:
    """Ordered, lock-guarded todo collection

    Example:
        ```python
        store = TodoStore("http://localhost:5000")

        todo = store.save(None, TodoPatch(title="walk the dog"))
        store.save(todo.id, TodoPatch(order=95))
        store.find(todo.id).order  # 95
        ```
    """

    def __init__(self, base_url: str):
        """
        Args:
            base_url: Externally reachable root; todo urls are base_url/<id>
        """
        self.base_url = base_url.rstrip("/")
        self._items: Dict[str, TodoItem] = {}
        self._lock = Lock()

    def _new_id(self) -> str:
        # caller holds the lock
        todo_id = str(uuid.uuid4())
        while todo_id in self._items:
            todo_id = str(uuid.uuid4())
        return todo_id

    def _url_for(self, todo_id: str) -> str:
        return f"{self.base_url}/{todo_id}"

    def find(self, todo_id: str) -> Optional[TodoItem]:
        """Todo with that id, or None"""
        with self._lock:
            return self._items.get(todo_id)

    def all(self) -> List[TodoItem]:
        """Every todo in insertion order"""
        with self._lock:
            return list(self._items.values())

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def save(self, todo_id: Optional[str], incoming: TodoPatch) -> TodoItem:
        """Create (todo_id is None) or merge-update an existing todo

        Args:
            todo_id: Existing todo id, or None to create
            incoming: Partial representation

        Returns:
            The created or updated todo

        Raises:
            TodoNotFoundError: todo_id is given but not in the store
        """
        with self._lock:
            if todo_id is None:
                new_id = self._new_id()
                todo = TodoItem.create(new_id, self._url_for(new_id), incoming)
                self._items[new_id] = todo
                logger.info("Todo created", todo_id=new_id, title=todo.title)
                return todo

            existing = self._items.get(todo_id)
            if existing is None:
                raise TodoNotFoundError(todo_id)

            # dict assignment on an existing key keeps its position
            todo = existing.merge(incoming)
            self._items[todo_id] = todo
            logger.info(
                "Todo updated",
                todo_id=todo_id,
                fields=sorted(incoming.changes()),
            )
            return todo

    def delete(self, todo_id: str) -> Optional[TodoItem]:
        """Remove and return the todo, or None if there is no such todo"""
        with self._lock:
            todo = self._items.pop(todo_id, None)

        if todo is None:
            logger.debug(f"Todo not found for delete: {todo_id}")
        else:
            logger.info("Todo deleted", todo_id=todo_id)
        return todo

    def clear(self) -> List[TodoItem]:
        """Remove every todo and return the removed ones in insertion order"""
        with self._lock:
            removed = list(self._items.values())
            self._items.clear()

        logger.info("Todos cleared", removed=len(removed))
        return removed


# Global instance
_store: Optional[TodoStore] = None
_store_lock = Lock()


def get_todo_store() -> TodoStore:
    """Process-wide todo store built from settings.base_url"""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = TodoStore(settings.base_url)
    return _store


def reset_todo_store() -> None:
    """Drop the global store (next get_todo_store() starts empty)"""
    global _store
    with _store_lock:
        _store = None
