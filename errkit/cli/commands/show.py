from __future__ import annotations

from pathlib import Path

import typer

from errkit.cli.context import build_context
from errkit.core.error import Error, ErrorF, ErrorFInstance
from errkit.core.exit_codes import ExitCode
from errkit.output.console import Style


def show(
    catalog: Path = typer.Argument(..., help="Error catalog (TOML)."),
    name: str = typer.Argument(..., help="Error or kind name."),
    values: list[str] | None = typer.Argument(None, help="Values bound into a kind's pattern."),
) -> None:
    """Print the message of a cataloged error, resolving kinds with VALUES."""
    ctx = build_context(catalog)
    bound = values or []

    match ctx.catalog.get(name):
        case None:
            ctx.console.error(f"unknown error name: {name}")
            available = ctx.catalog.names()
            if available:
                ctx.console.print(f"Available: {', '.join(available)}", Style.DIM)
            raise typer.Exit(code=int(ExitCode.USER_ERROR))
        case ErrorF() as kind:
            ctx.console.print(_bind(kind, bound).message())
            ctx.console.print(f"kind: {kind.pattern}", Style.DIM)
        case Error() as err:
            if bound:
                ctx.console.warning(f"{name} is a plain error, ignoring values")
            ctx.console.print(err.message())


def _bind(kind: ErrorF, values: list[str]) -> ErrorFInstance:
    # Arguments arrive as text; retry with numbers when the pattern needs them
    try:
        kind.pattern % tuple(values)
    except (TypeError, ValueError):
        return kind.with_values(*(_as_number(v) for v in values))
    return kind.with_values(*values)


def _as_number(value: str) -> object:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value
