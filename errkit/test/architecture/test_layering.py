"""Import layering rules for the errkit package."""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def errkit_root() -> Path:
    return Path(__file__).resolve().parents[2]


def iter_python_files(base: Path) -> list[Path]:
    return [p for p in sorted(base.rglob("*.py")) if "__pycache__" not in p.parts]


def parse_imports(path: Path) -> list[ImportRef]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: list[ImportRef] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(ImportRef(module=alias.name, line=node.lineno))
            continue

        if isinstance(node, ast.ImportFrom):
            if node.level and node.level > 0:
                continue
            if node.module is None:
                continue
            imports.append(ImportRef(module=node.module, line=node.lineno))

    return imports


def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def test_core_does_not_import_output_or_cli() -> None:
    root = errkit_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / "core"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "errkit.output") or matches_prefix(
                item.module, "errkit.cli"
            ):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "core -> output/cli dependency violations:\n" + "\n".join(offenders)


def test_core_has_no_third_party_imports() -> None:
    root = errkit_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / "core"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich") or matches_prefix(item.module, "typer"):
                offenders.append(f"{rel}:{item.line}: third-party import '{item.module}'")

    assert not offenders, "core third-party violations:\n" + "\n".join(offenders)


def test_direct_rich_imports_are_limited_to_console() -> None:
    root = errkit_root()
    allowlist = {"output/console.py"}
    offenders: list[str] = []

    for file_path in iter_python_files(root):
        rel = file_path.relative_to(root)
        if rel.parts and rel.parts[0] == "test":
            continue
        for item in parse_imports(file_path):
            if not matches_prefix(item.module, "rich"):
                continue
            if rel.as_posix() in allowlist:
                continue
            offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)
