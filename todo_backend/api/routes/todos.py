"""Todo Routes

Todo-Backend resource collection mounted at the API root.
"""

from typing import Union

from fastapi import APIRouter, Depends, Request, Response

from todo_backend.api.schemas.response import ErrorResponse
from todo_backend.app.core.logging import get_logger
from todo_backend.app.core.todo_store import TodoStore
from todo_backend.app.models.todo import TodoItem, TodoPatch

router = APIRouter(tags=["Todos"])
logger = get_logger(__name__)


def get_store(request: Request) -> TodoStore:
    """Store bound to the running app"""
    return request.app.state.todo_store


def _not_found() -> Response:
    return Response(status_code=404)


@router.get("/", response_model=list[TodoItem])
async def list_todos(store: TodoStore = Depends(get_store)) -> list[TodoItem]:
    """All todos in insertion order"""
    return store.all()


@router.post("/", response_model=TodoItem, responses={400: {"model": ErrorResponse}})
async def create_todo(
    patch: TodoPatch,
    store: TodoStore = Depends(get_store),
) -> TodoItem:
    """Create a todo from a partial representation"""
    return store.save(None, patch)


@router.delete("/", response_model=list[TodoItem])
async def clear_todos(store: TodoStore = Depends(get_store)) -> list[TodoItem]:
    """Delete every todo; responds with the now-empty collection"""
    removed = store.clear()
    logger.debug(f"Cleared {len(removed)} todos")
    return []


@router.get("/{todo_id}", response_model=TodoItem)
async def get_todo(
    todo_id: str,
    store: TodoStore = Depends(get_store),
) -> Union[TodoItem, Response]:
    """Single todo, 404 if unknown"""
    todo = store.find(todo_id)
    if todo is None:
        return _not_found()
    return todo


@router.patch(
    "/{todo_id}",
    response_model=TodoItem,
    responses={400: {"model": ErrorResponse}, 404: {"description": "Unknown todo"}},
)
async def patch_todo(
    todo_id: str,
    patch: TodoPatch,
    store: TodoStore = Depends(get_store),
) -> Union[TodoItem, Response]:
    """Merge the given fields into an existing todo

    Fields missing from the body keep their stored value.
    """
    if store.find(todo_id) is None:
        return _not_found()

    # a concurrent delete between find and save raises TodoNotFoundError,
    # which the error handlers also turn into a 404
    return store.save(todo_id, patch)


@router.delete("/{todo_id}", response_model=TodoItem)
async def delete_todo(
    todo_id: str,
    store: TodoStore = Depends(get_store),
) -> Union[TodoItem, Response]:
    """Delete a todo and return it, 404 if unknown"""
    todo = store.delete(todo_id)
    if todo is None:
        return _not_found()
    return todo
