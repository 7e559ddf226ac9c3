"""Error presentation utilities.

Centralized formatting of error aggregates and exit code mapping for the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from errkit.core.aggregate import Errors
from errkit.core.error import ErrorFInstance, message_of
from errkit.core.exit_codes import ExitCode
from errkit.output.console import Style

if TYPE_CHECKING:
    from errkit.core.catalog import CatalogError
    from errkit.output.console import ConsoleProtocol

__all__ = ["print_errors", "print_catalog_error", "catalog_error_exit_code"]


def _plural(n: int) -> str:
    return f"{n} error" if n == 1 else f"{n} errors"


def print_errors(errs: Errors, console: ConsoleProtocol, *, title: str | None = None) -> None:
    """Print every collected error, in insertion order."""
    console.header(f"{title}: {_plural(errs.count())}" if title else _plural(errs.count()))
    _print_entries(errs, console, indent="")


def _print_entries(errs: Errors, console: ConsoleProtocol, indent: str) -> None:
    for entry in errs:
        match entry:
            case ErrorFInstance(kind=kind, text=text):
                console.error(f"{indent}{text}")
                console.print(f"{indent}  kind: {kind.pattern}", Style.DIM)
            case Errors():
                console.print(f"{indent}{_plural(entry.count())}:", Style.DIM)
                _print_entries(entry, console, indent + "  ")
            case _:
                console.error(f"{indent}{message_of(entry)}")


def print_catalog_error(error: CatalogError, console: ConsoleProtocol) -> None:
    """Print a catalog loading failure, with each problem when there are any."""
    console.error(error.message)
    if error.path is not None:
        console.print(f"catalog: {error.path}", Style.DIM)
    if error.problems is not None:
        print_errors(error.problems, console, title="Problems")


def catalog_error_exit_code(error: CatalogError) -> int:
    """Get exit code for a catalog error."""
    if error.problems is not None:
        return int(ExitCode.CATALOG_ERROR)
    return int(ExitCode.IO_ERROR)
