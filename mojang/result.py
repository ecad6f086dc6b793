from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union


T = TypeVar('T')
E = TypeVar('E', bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Successful outcome of a request.
    """
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """
    Failed outcome of a request, carrying the error instead of raising it.
    """
    error: E

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
