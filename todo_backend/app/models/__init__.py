"""Todo Backend Models"""

from .todo import TodoItem, TodoPatch

__all__ = [
    "TodoItem",
    "TodoPatch",
]
