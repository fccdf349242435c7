"""Unit tests for language detection and normalization."""

from pathlib import Path

import pytest

from sab_detector.core.languages import detect_language_from_path, normalize_language, resolve_language


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("a.js", "javascript"),
        ("a.mjs", "javascript"),
        ("a.cjs", "javascript"),
        ("a.jsx", "javascript"),
        ("a.ts", "typescript"),
        ("a.mts", "typescript"),
        ("a.tsx", "tsx"),
        ("A.JS", "javascript"),
    ],
)
def test_detect_language_from_path(name: str, expected: str) -> None:
    assert detect_language_from_path(Path(name)) == expected


def test_detect_language_rejects_unknown_extension() -> None:
    with pytest.raises(ValueError, match="Unsupported file extension"):
        detect_language_from_path(Path("a.py"))


@pytest.mark.parametrize(("alias", "expected"), [("JS", "javascript"), (" ts ", "typescript"), ("tsx", "tsx")])
def test_normalize_language_aliases(alias: str, expected: str) -> None:
    assert normalize_language(alias) == expected


def test_normalize_language_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unsupported language"):
        normalize_language("python")


def test_resolve_language_prefers_explicit_name() -> None:
    assert resolve_language("typescript", Path("a.js")) == "typescript"
    assert resolve_language(None, Path("a.js")) == "javascript"


def test_resolve_language_needs_something() -> None:
    with pytest.raises(ValueError):
        resolve_language(None, None)
