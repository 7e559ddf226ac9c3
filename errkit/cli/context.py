from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from errkit.core.catalog import ErrorCatalog, load_catalog
from errkit.core.result import is_err
from errkit.output.console import ConsoleProtocol, RichConsole
from errkit.output.report import catalog_error_exit_code, print_catalog_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    catalog_path: Path
    catalog: ErrorCatalog
    console: ConsoleProtocol


def build_context(catalog_path: Path, console: ConsoleProtocol | None = None) -> CLIContext:
    """Load the catalog or exit with the mapped code after printing why."""
    out = console if console is not None else RichConsole()

    result = load_catalog(catalog_path)
    if is_err(result):
        print_catalog_error(result.error, out)
        raise typer.Exit(code=catalog_error_exit_code(result.error))

    return CLIContext(catalog_path=catalog_path, catalog=result.value, console=out)
