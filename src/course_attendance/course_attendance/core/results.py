"""Tagged results returned across the store boundary instead of exceptions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .enums import ErrorKind
from .exceptions import DomainError


@dataclass(frozen=True)
class Loading:
    """A remote operation is in flight."""


@dataclass(frozen=True)
class Success:
    message: Optional[str] = None


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str

    @classmethod
    def from_error(cls, exc: DomainError) -> "Failure":
        return cls(kind=exc.kind, message=exc.message)


OperationResult = Union[Success, Failure]
AuthResult = Union[Loading, Success, Failure]
