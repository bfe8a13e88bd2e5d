"""Result type for resolution and persistence outcomes.

Callers match on the two cases:

    match await manager.add_explorer_region("eu-west-1"):
        case Ok(snapshot):
            ...
        case Err(error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case containing a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error case containing an error."""

    error: E


Result: TypeAlias = Ok[T] | Err[E]


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Extract the value from Ok, or return default if Err."""
    match result:
        case Ok(value):
            return value
        case Err():
            return default
