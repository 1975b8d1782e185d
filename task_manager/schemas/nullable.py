"""
Three-state fields for partial updates.

A field in a PUT body can be absent (leave the stored value alone), present
with a value, or present and explicitly ``null``. Pydantic only tells us the
last two apart from the first through ``model_fields_set``, so update schemas
derive from :class:`PatchModel` and hand each field out as a
:class:`JsonNullable`.
"""
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from ..core.exceptions import InvalidRequestError

T = TypeVar("T")


class JsonNullable(Generic[T]):
    """A value that is either undefined, null, or set."""

    __slots__ = ("_present", "_value")

    def __init__(self, present: bool, value: Optional[T] = None):
        self._present = present
        self._value = value if present else None

    @classmethod
    def undefined(cls) -> "JsonNullable[T]":
        return cls(False)

    @classmethod
    def of(cls, value: Optional[T]) -> "JsonNullable[T]":
        return cls(True, value)

    @property
    def is_present(self) -> bool:
        return self._present

    @property
    def is_null(self) -> bool:
        return self._present and self._value is None

    def get(self) -> Optional[T]:
        if not self._present:
            raise ValueError("JsonNullable value is undefined")
        return self._value

    def or_else(self, default: Optional[T]) -> Optional[T]:
        return self._value if self._present else default

    def require(self, field: str) -> "JsonNullable[T]":
        """Reject an explicit null for a required field."""
        if self.is_null:
            raise InvalidRequestError(f"Field '{field}' must not be null")
        return self

    def if_present(self, consumer: Callable[[Optional[T]], Any]) -> None:
        if self._present:
            consumer(self._value)

    def __eq__(self, other):
        if not isinstance(other, JsonNullable):
            return NotImplemented
        return (self._present, self._value) == (other._present, other._value)

    def __repr__(self):
        if not self._present:
            return "JsonNullable.undefined()"
        return f"JsonNullable.of({self._value!r})"


class PatchModel(BaseModel):
    """Base schema for partial updates."""

    def field(self, name: str) -> JsonNullable:
        if name not in type(self).model_fields:
            raise KeyError(name)
        if name not in self.model_fields_set:
            return JsonNullable.undefined()
        return JsonNullable.of(getattr(self, name))
