"""
Tagged results for consumers that prefer branching over try/except.

    outcome = capture(client.households.list)
    if isinstance(outcome, Failure):
        show_banner(outcome.message)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from healthsaas.errors import ApiError
from healthsaas.models.domain import ApiResponse

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    response: ApiResponse[T]

    @property
    def data(self) -> Optional[T]:
        return self.response.data

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    message: str
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, error: ApiError) -> "Failure":
        return cls(message=error.message, status_code=error.status_code)


Result = Union[Success[T], Failure]


def capture(call: Callable[..., ApiResponse[T]], *args: Any, **kwargs: Any) -> Result:
    """
    Run a client call and return its outcome as a tagged result.

    Only ApiError is converted; anything else is a programming error and
    propagates unchanged.
    """
    try:
        return Success(call(*args, **kwargs))
    except ApiError as exc:
        return Failure.from_error(exc)
