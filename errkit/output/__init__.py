"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .report import catalog_error_exit_code, print_catalog_error, print_errors

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "catalog_error_exit_code",
    "print_catalog_error",
    "print_errors",
]
