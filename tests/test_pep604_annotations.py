from __future__ import annotations

import re
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

DISALLOWED = {
    "Optional[...]": re.compile(r"\bOptional\["),
    "Union[...]": re.compile(r"\bUnion\["),
    "typing.List/Dict/Tuple": re.compile(r"^from typing import .*\b(List|Dict|Tuple)\b", re.MULTILINE),
}


def _python_files() -> list[Path]:
    files = [path for folder in ("hexcoord", "tests", "examples") for path in (ROOT / folder).rglob("*.py")]
    return [path for path in files if path.resolve() != Path(__file__).resolve()]


@pytest.mark.parametrize("label", sorted(DISALLOWED))
def test_annotations_use_builtin_generics_and_pep604(label: str) -> None:
    pattern = DISALLOWED[label]
    offending = [str(path.relative_to(ROOT)) for path in _python_files() if pattern.search(path.read_text(encoding="utf-8"))]
    assert not offending, f"{label} found in: {offending}"
