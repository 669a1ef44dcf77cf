from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_CIVIL_DATE = "InvalidCivilDate"
    INVALID_HEBREW_DATE = "InvalidHebrewDate"
    NO_MATCH_FOUND = "NoMatchFound"
    PROVIDER_FAILURE = "ProviderFailure"


@dataclass(frozen=True)
class QuerySuccess(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class QueryFailure:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {"error": self.message, "errorType": self.kind.value}


QueryResult = Union[QuerySuccess[T], QueryFailure]


class CalendarQueryError(Exception):
    """Raised inside the engine; converted to a ``QueryFailure`` at its boundary."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def as_failure(self) -> QueryFailure:
        return QueryFailure(self.kind, self.message)
