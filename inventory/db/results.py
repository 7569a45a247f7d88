"""
Explicit outcome values returned by the repository layer.

Repositories never raise for expected conditions: a missing row or a failed
referential pre-check is a normal `Result`, and storage faults are wrapped
with their cause so callers can tell "not there" apart from "broken".
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class Result(Generic[T]):
    outcome: Outcome
    value: Optional[T] = None
    message: Optional[str] = None
    cause: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def not_found(self) -> bool:
        return self.outcome is Outcome.NOT_FOUND

    @property
    def invalid(self) -> bool:
        return self.outcome is Outcome.INVALID

    @property
    def failed(self) -> bool:
        return self.outcome is Outcome.STORAGE_ERROR

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(Outcome.OK, value=value)

    @classmethod
    def missing(cls, message: str) -> "Result[T]":
        return cls(Outcome.NOT_FOUND, message=message)

    @classmethod
    def rejected(cls, message: str) -> "Result[T]":
        return cls(Outcome.INVALID, message=message)

    @classmethod
    def storage_error(cls, message: str, cause: BaseException) -> "Result[T]":
        return cls(Outcome.STORAGE_ERROR, message=message, cause=cause)
