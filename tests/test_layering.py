# tests/test_layering.py
from __future__ import annotations

import ast
from pathlib import Path

import pytest

DOMAIN_DIR = Path(__file__).resolve().parent.parent / "ibkr_flex" / "domain"


def _module_level_imports(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in tree.body:
        if isinstance(node, ast.ImportFrom) and node.module:
            yield node.module
        elif isinstance(node, ast.Import):
            yield from (alias.name for alias in node.names)


@pytest.mark.parametrize("path", sorted(DOMAIN_DIR.glob("*.py")), ids=lambda p: p.name)
def test_domain_does_not_import_io_or_db_at_module_level(path):
    imported = list(_module_level_imports(path))
    assert not [m for m in imported if m.startswith(("ibkr_flex.io", "ibkr_flex.db"))]
