"""Structural tests for the package import layering.

The lower layers (core, schema, analysis, introspection, diagnostics and
the top-level helper modules) must not import the runtime or validation
packages at module level. Imports guarded by ``if TYPE_CHECKING:`` are
annotation-only and allowed.
"""

from __future__ import annotations

import ast
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

import i18nkeys

if TYPE_CHECKING:
    from collections.abc import Iterator

PACKAGE_ROOT = Path(i18nkeys.__file__).parent

LOWER_LAYERS = ("analysis", "core", "diagnostics", "introspection", "schema")
LOWER_MODULES = ("constants.py", "enums.py", "locale_utils.py", "types.py")
UPPER_PACKAGES = ("i18nkeys.runtime", "i18nkeys.validation")


def lower_layer_files() -> list[Path]:
    """Every source file of the lower layers."""
    files = [PACKAGE_ROOT / name for name in LOWER_MODULES]
    for layer in LOWER_LAYERS:
        files.extend(sorted((PACKAGE_ROOT / layer).glob("*.py")))
    return files


def _is_type_checking_block(node: ast.stmt) -> bool:
    if not isinstance(node, ast.If):
        return False
    test = node.test
    return (isinstance(test, ast.Name) and test.id == "TYPE_CHECKING") or (
        isinstance(test, ast.Attribute) and test.attr == "TYPE_CHECKING"
    )


def module_level_imports(path: Path) -> Iterator[str]:
    """Absolute module names imported at module level, outside TYPE_CHECKING."""
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in tree.body:
        # Function and class bodies import lazily
        if _is_type_checking_block(node) or isinstance(
            node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)
        ):
            continue
        for child in ast.walk(node):
            if isinstance(child, ast.Import):
                yield from (alias.name for alias in child.names)
            elif isinstance(child, ast.ImportFrom) and child.level == 0 and child.module:
                yield child.module


class TestImportLayering:
    """Lower layers never reach up into runtime or validation."""

    def test_layer_files_found(self) -> None:
        """The layering check sees real source files."""
        files = lower_layer_files()
        assert PACKAGE_ROOT / "analysis" / "keys.py" in files
        assert all(path.exists() for path in files)

    @pytest.mark.parametrize(
        "path", lower_layer_files(), ids=lambda p: str(p.relative_to(PACKAGE_ROOT))
    )
    def test_no_upward_imports(self, path: Path) -> None:
        """No module-level import of the runtime or validation packages."""
        upward = [
            name
            for name in module_level_imports(path)
            if any(name == pkg or name.startswith(f"{pkg}.") for pkg in UPPER_PACKAGES)
        ]
        assert upward == [], f"{path.name} imports {upward}"

    def test_plural_suffix_helpers_live_in_core(self) -> None:
        """Key enumeration takes suffix handling from core."""
        imports = set(module_level_imports(PACKAGE_ROOT / "analysis" / "keys.py"))
        assert "i18nkeys.core.plural_suffix" in imports
