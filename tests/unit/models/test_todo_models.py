"""TodoItem / TodoPatch model tests

Location: todo_backend.app.models.todo
"""

import pytest
from pydantic import ValidationError

from todo_backend.app.models.todo import TodoItem, TodoPatch


class TestTodoPatch:
    """TodoPatch tests"""

    def test_empty_patch_has_no_changes(self):
        """Nothing provided -> nothing to merge"""
        assert TodoPatch().changes() == {}

    def test_changes_only_include_provided_fields(self):
        """Only fields the client sent are reported"""
        patch = TodoPatch(completed=True)
        assert patch.changes() == {"completed": True}

    def test_explicit_null_is_treated_as_absent(self):
        """null values do not count as changes"""
        patch = TodoPatch.model_validate({"title": "x", "order": None, "completed": None})
        assert patch.changes() == {"title": "x"}

    def test_false_and_zero_are_real_changes(self):
        """Falsy values are still provided values"""
        patch = TodoPatch(order=0, completed=False)
        assert patch.changes() == {"order": 0, "completed": False}

    def test_server_assigned_fields_are_dropped(self):
        """id/url in the body are ignored"""
        patch = TodoPatch.model_validate(
            {"id": "abc", "url": "http://elsewhere/abc", "title": "x"}
        )
        assert patch.changes() == {"title": "x"}
        assert not hasattr(patch, "url")

    def test_invalid_order_type(self):
        """order must be an integer"""
        with pytest.raises(ValidationError):
            TodoPatch.model_validate({"order": "not a number"})

    def test_order_is_strict(self):
        """Booleans and numeric strings are not orders"""
        for value in (True, "5", 5.5):
            with pytest.raises(ValidationError):
                TodoPatch.model_validate({"order": value})

    def test_completed_is_strict(self):
        """Only real booleans count as a completion flag"""
        for value in ("yes", "true", 1):
            with pytest.raises(ValidationError):
                TodoPatch.model_validate({"completed": value})


class TestTodoItem:
    """TodoItem tests"""

    def test_create_applies_defaults(self):
        """Omitted order/completed default to 0/False"""
        todo = TodoItem.create("1", "http://host/1", TodoPatch(title="X"))

        assert todo.id == "1"
        assert todo.url == "http://host/1"
        assert todo.title == "X"
        assert todo.order == 0
        assert todo.completed is False

    def test_create_without_title(self):
        """title is optional"""
        todo = TodoItem.create("1", "http://host/1", TodoPatch())
        assert todo.title is None

    def test_merge_keeps_untouched_fields(self):
        """Merge only overwrites provided fields"""
        todo = TodoItem(id="1", url="http://host/1", title="A", order=5)
        merged = todo.merge(TodoPatch(completed=True))

        assert merged.title == "A"
        assert merged.order == 5
        assert merged.completed is True
        assert merged.id == "1"
        assert merged.url == "http://host/1"

    def test_merge_returns_new_instance(self):
        """The original item is left as it was"""
        todo = TodoItem(id="1", url="http://host/1", title="A")
        merged = todo.merge(TodoPatch(title="B"))

        assert todo.title == "A"
        assert merged.title == "B"

    def test_frozen(self):
        """Items cannot be mutated in place"""
        todo = TodoItem(id="1", url="http://host/1")
        with pytest.raises(ValidationError):
            todo.title = "changed"

    def test_wire_representation(self):
        """Serialized fields match the Todo-Backend contract"""
        todo = TodoItem(id="1", url="http://host/1", title="A")
        assert todo.model_dump() == {
            "id": "1",
            "url": "http://host/1",
            "title": "A",
            "order": 0,
            "completed": False,
        }
