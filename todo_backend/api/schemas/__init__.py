"""API Schemas

Request bodies are TodoPatch, todo responses are TodoItem.
"""

from todo_backend.api.schemas.response import (
    ErrorResponse,
    HealthDetailResponse,
    HealthResponse,
)
from todo_backend.app.models.todo import TodoItem, TodoPatch

__all__ = [
    # Request
    "TodoPatch",
    # Response
    "TodoItem",
    "HealthResponse",
    "HealthDetailResponse",
    "ErrorResponse",
]
