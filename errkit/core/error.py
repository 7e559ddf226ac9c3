"""Comparable error values.

Two shapes of error live here:

- ``Error``: a plain error identified only by its text.
- ``ErrorF``: an error *kind*, a printf-style pattern. ``with_values`` resolves
  the pattern into an ``ErrorFInstance`` that still knows which kind it came
  from, so callers can test "is this a missing-file error?" without caring
  about the file name in the message.

Usage:
    DISK_FULL = Error("disk is full")
    MISSING_FILE = ErrorF("file not found: %s")

    err = MISSING_FILE.with_values("config.toml")
    err.message()                 # "file not found: config.toml"
    MISSING_FILE.is_kind_of(err)  # True

Kinds compare by identity: ``ErrorF("x %s")`` built twice gives two distinct
kinds. Declare each kind once, at module level, and share it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "Error",
    "ErrorF",
    "ErrorFInstance",
    "ErrorLike",
    "message_of",
]


class ErrorLike(Protocol):
    """Anything that can describe itself as an error message."""

    def message(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Error:
    """Plain error. Two errors are equal when their text is equal."""

    text: str

    def message(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True, eq=False)
class ErrorF:
    """Error kind built from a printf-style pattern.

    Equality and hashing are by identity.

    Attributes:
        pattern: Format pattern, e.g. ``"file not found: %s"``.
    """

    pattern: str

    def message(self) -> str:
        """Returns the raw pattern."""
        return self.pattern

    def with_values(self, *values: object) -> ErrorFInstance:
        """Resolve the pattern with positional values.

        The values are not checked against the pattern. A pattern that cannot
        take them degrades to ``"<pattern> [<values>]"`` instead of raising.

        Args:
            *values: Values bound into the pattern, in order.

        Returns:
            An instance of this kind carrying the resolved message.
        """
        return ErrorFInstance(kind=self, text=_format(self.pattern, values))

    def is_kind_of(self, candidate: object) -> bool:
        """Check whether candidate was created by this kind's ``with_values``."""
        match candidate:
            case ErrorFInstance(kind=kind):
                return kind is self
            case _:
                return False

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True, slots=True)
class ErrorFInstance:
    """A resolved occurrence of an ``ErrorF`` kind.

    Attributes:
        kind: The kind that produced this instance.
        text: The resolved message.
    """

    kind: ErrorF
    text: str

    def message(self) -> str:
        return self.text

    def same_kind(self, other: object) -> bool:
        """Loose comparison against any error value.

        Kinds and instances are compared by originating kind, everything else
        by message text.
        """
        match other:
            case ErrorF():
                return other.is_kind_of(self)
            case ErrorFInstance(kind=kind):
                return kind is self.kind
            case None:
                return False
            case _:
                return message_of(other) == self.text

    def __str__(self) -> str:
        return self.text


def message_of(err: object) -> str:
    """Return the message of any error value. Never raises."""
    try:
        describe = getattr(err, "message", None)
        if callable(describe):
            return str(describe())
        if isinstance(describe, str):
            return describe
        return str(err)
    except Exception:
        return f"<unprintable {type(err).__name__}>"


def _format(pattern: str, values: tuple[object, ...]) -> str:
    try:
        return pattern % values
    except Exception:
        if not values:
            return pattern
        rendered = ", ".join(message_of(v) for v in values)
        return f"{pattern} [{rendered}]"
