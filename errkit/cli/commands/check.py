from __future__ import annotations

from pathlib import Path

import typer

from errkit.cli.context import build_context
from errkit.output.console import Style


def check(
    catalog: Path = typer.Argument(..., help="Error catalog (TOML)."),
) -> None:
    """Validate an error catalog and report every invalid entry."""
    ctx = build_context(catalog)

    ctx.console.print(f"catalog: {ctx.catalog_path}", Style.DIM)
    ctx.console.success(
        f"plain errors: {len(ctx.catalog.errors)}, kinds: {len(ctx.catalog.kinds)}",
    )
