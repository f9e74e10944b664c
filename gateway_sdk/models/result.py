"""Tagged success/failure values returned by every resource operation."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from gateway_sdk.models.enums import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorResponse:
    """A failed gateway request.

    ``errors`` and ``params`` are only populated for validation failures, where
    the gateway echoes the nested error tree and the submitted parameters.
    """

    kind: ErrorKind
    message: str = ""
    errors: dict = field(default_factory=dict)
    params: dict = field(default_factory=dict)
    status: int | None = None


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful operation carrying its value (``None`` for bare success)."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed operation carrying the gateway's error value unchanged."""

    error: ErrorResponse

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[Any], Err]
