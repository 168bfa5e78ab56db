"""Pydantic models for GraphQL requests and responses.

See https://graphql.org/learn/serving-over-http/ for the wire format and
https://spec.graphql.org/October2021/#sec-Errors.Error-result-format for the
error shape.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, model_validator

from .errors import ReleasedError

T = TypeVar("T")


class Request(BaseModel):
    """A standard GraphQL POST request."""
    model_config = {"frozen": True}

    query: str
    operationName: Optional[str] = None


class Location(BaseModel):
    line: int
    column: int


class Error(BaseModel):
    """A single entry of a GraphQL ``errors`` list."""

    message: str
    path: Optional[List[Union[str, int]]] = None
    locations: Optional[List[Location]] = None
    extensions: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} @ {'/'.join(str(p) for p in self.path)}"
        return self.message


class ResponseKind(str, Enum):
    DATA_ONLY = "data_only"
    ERRORS_ONLY = "errors_only"
    DATA_AND_ERRORS = "data_and_errors"


@dataclass(frozen=True)
class DataResult(Generic[T]):
    data: T


@dataclass(frozen=True)
class ErrorsResult:
    errors: List[Error]


Result = Union[DataResult[T], ErrorsResult]


class Response(BaseModel, Generic[T]):
    """A GraphQL response envelope carrying data, errors, or both.

    Use ``result()`` for the common case of handling one or the other.
    """

    data: Optional[T] = None
    errors: Optional[List[Error]] = None

    @model_validator(mode="after")
    def require_data_or_errors(self):
        if self.data is None and self.errors is None:
            raise ValueError("response carries neither data nor errors")
        return self

    @property
    def kind(self) -> ResponseKind:
        if self.data is not None and self.errors is not None:
            return ResponseKind.DATA_AND_ERRORS
        if self.data is not None:
            return ResponseKind.DATA_ONLY
        if self.errors is not None:
            return ResponseKind.ERRORS_ONLY
        raise AssertionError("response carries neither data nor errors")

    def result(self) -> "Result[T]":
        """Resolve the envelope to data or errors. Data wins when both are present."""
        if self.data is not None:
            return DataResult(self.data)
        if self.errors is not None:
            return ErrorsResult(self.errors)
        raise AssertionError("response carries neither data nor errors")


_RELEASED = object()


class Owned(Generic[T]):
    """A decoded value the caller must release exactly once.

    The value and everything reachable from it is only valid until
    ``release()``; after that ``value`` raises ``ReleasedError``. Use it as a
    context manager to release on exit.
    """

    def __init__(self, value: T, backing: Optional[bytes] = None):
        self._value = value
        self._backing = backing

    @property
    def released(self) -> bool:
        return self._value is _RELEASED

    @property
    def value(self) -> T:
        if self._value is _RELEASED:
            raise ReleasedError("value accessed after release")
        return self._value

    def release(self) -> None:
        if self._value is _RELEASED:
            raise ReleasedError("value released twice")
        self._value = _RELEASED
        self._backing = None

    def __enter__(self) -> T:
        return self.value

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.released:
            self.release()

    def __repr__(self) -> str:
        if self.released:
            return "Owned(<released>)"
        return f"Owned({self._value!r})"
