import pytest

from task_manager.core.exceptions import InvalidRequestError
from task_manager.schemas.nullable import JsonNullable
from task_manager.schemas.task import TaskUpdate


def test_undefined_is_not_present():
    value = JsonNullable.undefined()

    assert not value.is_present
    assert not value.is_null
    assert value.or_else("fallback") == "fallback"
    with pytest.raises(ValueError):
        value.get()


def test_explicit_null_is_present():
    value = JsonNullable.of(None)

    assert value.is_present
    assert value.is_null
    assert value.get() is None
    assert value.or_else("fallback") is None


def test_require_rejects_only_explicit_null():
    assert JsonNullable.of("x").require("title").get() == "x"
    assert not JsonNullable.undefined().require("title").is_present

    with pytest.raises(InvalidRequestError) as exc_info:
        JsonNullable.of(None).require("title")
    assert "title" in exc_info.value.message


def test_if_present_only_calls_for_present_values():
    seen = []

    JsonNullable.undefined().if_present(seen.append)
    JsonNullable.of(None).if_present(seen.append)
    JsonNullable.of(3).if_present(seen.append)

    assert seen == [None, 3]


def test_patch_model_tells_absent_from_null():
    update = TaskUpdate.model_validate({"title": "New", "assignee_id": None})

    assert update.field("title") == JsonNullable.of("New")
    assert update.field("assignee_id") == JsonNullable.of(None)
    assert update.field("status") == JsonNullable.undefined()
    assert update.field("label_ids") == JsonNullable.undefined()


def test_patch_model_unknown_field():
    with pytest.raises(KeyError):
        TaskUpdate().field("nope")
