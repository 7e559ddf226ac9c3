"""Result type for operations that can fail without raising.

Loaders in errkit return ``Result`` instead of raising, so the caller
decides how a failure is reported (console output, exit code, aggregation).

Usage:
    match load_catalog(path):
        case Ok(catalog):
            print(f"{len(catalog)} entries")
        case Err(error):
            print(f"error: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeGuard, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result."""

    value: T

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result."""

    error: E

    def unwrap_or(self, default: T) -> T:
        return default


type Result[T, E] = Ok[T] | Err[E]


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard narrowing a Result to Err."""
    return isinstance(result, Err)
