"""Error catalogs loaded from TOML.

A catalog names the plain errors and kinds an application uses:

    [errors]
    disk_full = "disk is full"

    [kinds]
    missing_file = "file not found: %s"

Entry problems are not reported one at a time: every bad entry of a file is
collected into an ``Errors`` aggregate carried by the returned ``CatalogError``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .aggregate import Errors
from .error import Error, ErrorF
from .result import Err, Ok, Result, is_err
from .structured import StrDict, as_str_dict, get_pattern

__all__ = [
    "CatalogError",
    "ErrorCatalog",
    "load_catalog",
    "load_catalog_or_empty",
    "ERRORS_SECTION",
    "KINDS_SECTION",
    "INVALID_SECTION",
    "INVALID_ENTRY",
    "DUPLICATE_NAME",
    "INVALID_PATTERN",
]

ERRORS_SECTION = "errors"
KINDS_SECTION = "kinds"

# Problem kinds collected while loading a catalog
INVALID_SECTION = ErrorF("[%s]: expected a table, got %s")
INVALID_ENTRY = ErrorF("%s.%s: expected a non-empty string, got %s")
DUPLICATE_NAME = ErrorF("%s: defined in both [errors] and [kinds]")
INVALID_PATTERN = ErrorF("kinds.%s: invalid pattern %r")

# printf-style conversion: %[flags][width][.precision][length]type
# Mapping keys are rejected, kinds only bind positional values
_DIRECTIVE = re.compile(r"%[#0 +-]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[hlL]?[diouxXeEfFgGcrsa%]")


@dataclass(frozen=True, slots=True)
class CatalogError:
    """Error when a catalog cannot be loaded.

    ``problems`` is set when the file parsed but some entries are invalid.
    """

    message: str
    path: Path | None = None
    problems: Errors | None = None


@dataclass(frozen=True, slots=True)
class ErrorCatalog:
    """Named plain errors and kinds."""

    errors: Mapping[str, Error] = field(default_factory=dict)
    kinds: Mapping[str, ErrorF] = field(default_factory=dict)

    def get(self, name: str) -> Error | ErrorF | None:
        if name in self.errors:
            return self.errors[name]
        return self.kinds.get(name)

    def names(self) -> list[str]:
        return sorted([*self.errors, *self.kinds])

    def __contains__(self, name: object) -> bool:
        return name in self.errors or name in self.kinds

    def __len__(self) -> int:
        return len(self.errors) + len(self.kinds)

    @classmethod
    def from_dict(cls, data: Mapping[str, object], problems: Errors) -> ErrorCatalog:
        """Build a catalog from parsed TOML, adding every bad entry to problems."""
        errors = {
            name: Error(text)
            for name, text in _section_entries(data, ERRORS_SECTION, problems).items()
        }
        kinds: dict[str, ErrorF] = {}
        for name, pattern in _section_entries(data, KINDS_SECTION, problems).items():
            if name in errors:
                problems.add_error(DUPLICATE_NAME.with_values(name))
                continue
            if not _is_valid_pattern(pattern):
                problems.add_error(INVALID_PATTERN.with_values(name, pattern))
                continue
            kinds[name] = ErrorF(pattern)
        return cls(errors=errors, kinds=kinds)


def _section_entries(data: Mapping[str, object], section: str, problems: Errors) -> dict[str, str]:
    raw = data.get(section)
    if raw is None:
        return {}
    table = as_str_dict(raw)
    if table is None:
        problems.add_error(INVALID_SECTION.with_values(section, type(raw).__name__))
        return {}

    entries: dict[str, str] = {}
    for name, value in table.items():
        text = get_pattern(table, name)
        if text is None:
            problems.add_error(INVALID_ENTRY.with_values(section, name, _describe(value)))
            continue
        entries[name] = text
    return entries


def _describe(value: object) -> str:
    if isinstance(value, str):
        return "blank string"
    return type(value).__name__


def _is_valid_pattern(pattern: str) -> bool:
    pos = 0
    while True:
        start = pattern.find("%", pos)
        if start == -1:
            return True
        directive = _DIRECTIVE.match(pattern, start)
        if directive is None:
            return False
        pos = directive.end()


def _parse_toml(path: Path) -> Result[StrDict, CatalogError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(CatalogError("Catalog root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(CatalogError(f"Catalog file not found: {path}", path=path))
    except PermissionError:
        return Err(CatalogError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(CatalogError(f"Catalog path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(CatalogError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(CatalogError(f"Error reading catalog: {e}", path=path))


def load_catalog(path: Path) -> Result[ErrorCatalog, CatalogError]:
    """Load an error catalog from a TOML file.

    Args:
        path: Path to the catalog file

    Returns:
        Ok(ErrorCatalog) on success, Err(CatalogError) on failure. When entries
        are invalid the error carries all of them in ``problems``.
    """
    result = _parse_toml(path)
    if is_err(result):
        return result

    problems = Errors()
    catalog = ErrorCatalog.from_dict(result.value, problems)
    if problems:
        return Err(CatalogError("Invalid catalog entries", path=path, problems=problems))
    return Ok(catalog)


def load_catalog_or_empty(path: Path) -> ErrorCatalog:
    """Load a catalog, or return an empty one if it cannot be loaded."""
    return load_catalog(path).unwrap_or(ErrorCatalog())
