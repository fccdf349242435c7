"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: every test under tests/unit is tagged "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes ``content`` to ``tmp_path / name``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A directory with one match, one clean file and entries that must be skipped."""
    (tmp_path / "uses.js").write_text("const x = new SharedArrayBuffer(10);\n", encoding="utf-8")
    (tmp_path / "clean.js").write_text('const s = "SharedArrayBuffer";\n', encoding="utf-8")
    (tmp_path / "notes.txt").write_text("SharedArrayBuffer\n", encoding="utf-8")
    (tmp_path / ".hidden.js").write_text("SharedArrayBuffer;\n", encoding="utf-8")
    nested = tmp_path / "lib" / "deep"
    nested.mkdir(parents=True)
    (tmp_path / "lib" / "shallow.js").write_text("let a = 1;\n", encoding="utf-8")
    (nested / "deep.js").write_text("globalThis.SharedArrayBuffer;\n", encoding="utf-8")
    return tmp_path
