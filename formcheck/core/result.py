"""
Result — Explicit success/type-mismatch values returned by handlers.

Handlers never raise for a wrongly typed value. They return
TypeMismatch, and the caller decides:
- direct calls unwrap() it into a FieldTypeError
- the batch dispatcher maps it to a negative outcome
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from formcheck.core.errors import FieldTypeError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A handler produced a value."""

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class TypeMismatch:
    """A handler received a value of the wrong type."""

    field: str
    expected: str
    got: str

    @classmethod
    def of(cls, field: str, expected: str, value: Any) -> "TypeMismatch":
        return cls(field=field, expected=expected, got=type(value).__name__)

    @property
    def message(self) -> str:
        return f"{self.field} must be {self.expected}, got {self.got}"

    def unwrap(self):
        raise FieldTypeError(self.field, self.expected, self.got)


Checked = Union[Ok[T], TypeMismatch]
