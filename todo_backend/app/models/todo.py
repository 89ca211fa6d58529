"""Todo Models

TodoItem is the stored entity; TodoPatch is the partial representation
clients send on create and update.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt


class TodoPatch(BaseModel):
    """Partial todo representation

    Every field is optional. On creation an omitted field takes the
    TodoItem default, on update it leaves the stored value unchanged.
    id/url are server-assigned and silently dropped. order/completed are
    strict: true is not an order, "yes" is not a completion flag.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    order: Optional[StrictInt] = None
    completed: Optional[StrictBool] = None

    def changes(self) -> dict[str, Any]:
        """Fields the client actually provided (explicit null counts as absent)"""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class TodoItem(BaseModel):
    """Todo item (Immutable)

    Updates produce a new instance via merge(); id and url never change.
    """

    model_config = ConfigDict(frozen=True)

    # === Identity ===
    id: str
    url: str

    # === Mutable fields ===
    title: Optional[str] = None
    order: int = Field(default=0)
    completed: bool = False

    @classmethod
    def create(cls, todo_id: str, url: str, patch: TodoPatch) -> "TodoItem":
        """Build a new item, defaulting whatever the patch leaves out"""
        return cls(id=todo_id, url=url, **patch.changes())

    def merge(self, patch: TodoPatch) -> "TodoItem":
        """Return a copy with the patch's provided fields applied"""
        return self.model_copy(update=patch.changes())
