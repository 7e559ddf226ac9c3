"""Error aggregation for batch processing.

``Errors`` collects every error a batch produces instead of failing on the
first one, then reports them as a block.

Usage:
    errs = Errors()
    for path in paths:
        if not path.exists():
            errs.add_error(MISSING_FILE.with_values(path))
    if errs:
        print(errs.render())
    errs.contains(MISSING_FILE)   # any missing-file error collected?
"""

from __future__ import annotations

from collections.abc import Iterator

from .error import Error, ErrorF, ErrorFInstance, ErrorLike, message_of

__all__ = [
    "Errors",
    "ErrorValue",
    "count_of",
    "is_contained_in",
]


class Errors:
    """Ordered, append-only collection of error values.

    Entries keep their concrete type, so membership can be tested against
    exact values or against kinds. Not thread-safe.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[ErrorValue] = []

    def add(self, message: str) -> None:
        """Append a plain ``Error`` built from message."""
        self.add_error(Error(message))

    def add_error(self, err: ErrorValue) -> None:
        """Append an error value as-is."""
        self._entries.append(err)

    def contains(self, err: ErrorValue) -> bool:
        """Check whether the collection holds err.

        A kind matches any collected instance of that kind. Every other value
        matches by equality, so a plain ``Error`` never matches a kind
        instance even when the text is the same.
        """
        match err:
            case ErrorF():
                return any(err.is_kind_of(entry) for entry in self._entries)
            case _:
                return any(entry == err for entry in self._entries)

    def count(self) -> int:
        """Number of entries added, duplicates included."""
        return len(self._entries)

    def render(self) -> str:
        """Join every entry's message, one per line, each followed by a newline."""
        return "".join(f"{message_of(entry)}\n" for entry in self._entries)

    def message(self) -> str:
        return self.render()

    @property
    def entries(self) -> tuple[ErrorValue, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[ErrorValue]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Errors(count={len(self._entries)})"


ErrorValue = Error | ErrorF | ErrorFInstance | Errors | ErrorLike | BaseException


def is_contained_in(candidate: ErrorValue, container: ErrorValue | None) -> bool:
    """Check candidate against a single error or an aggregate.

    - container is ``Errors``: delegates to ``container.contains``.
    - candidate is a kind: true if container is an instance of it.
    - otherwise: plain equality.
    """
    match container, candidate:
        case Errors(), _:
            return container.contains(candidate)
        case _, ErrorF():
            return candidate.is_kind_of(container)
        case _:
            return candidate == container


def count_of(err: ErrorValue | None) -> int:
    """Number of errors err stands for: 0 for None, the size of an aggregate, else 1."""
    match err:
        case None:
            return 0
        case Errors():
            return err.count()
        case _:
            return 1
