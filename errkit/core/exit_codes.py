"""Exit codes for the errkit CLI.

These values are used as process exit codes and should remain stable:
- 0: Success
- 1: User error (unknown name, bad arguments)
- 2: Catalog error (file parsed but entries are invalid)
- 3: I/O error (file missing, unreadable, not TOML)
"""

from enum import IntEnum

__all__ = ["ExitCode"]


class ExitCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    CATALOG_ERROR = 2
    IO_ERROR = 3

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
