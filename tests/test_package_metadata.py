"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexcoord

ROOT = Path(__file__).resolve().parent.parent


def _load_pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "hexcoord"
    assert poetry["version"] == hexcoord.__version__
    assert {"include": "hexcoord"} in poetry["packages"]

    dependencies = poetry["dependencies"]
    for dependency in ("python", "pydantic"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
    assert "pytest" in pyproject["tool"]["poetry"]["extras"]["test"]


def test_public_names_resolve() -> None:
    for name in hexcoord.__all__:
        assert hasattr(hexcoord, name), f"hexcoord.__all__ lists missing name {name}"
