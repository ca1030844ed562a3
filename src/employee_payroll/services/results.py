"""Typed success/failure values returned by the payroll service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Business failure kinds."""

    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying an error kind and a descriptive message."""

    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def not_found(cls, message: str) -> Err:
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def invalid_argument(cls, message: str) -> Err:
        return cls(ErrorKind.INVALID_ARGUMENT, message)


Result = Union[Ok[T], Err]
