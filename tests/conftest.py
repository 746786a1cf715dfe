"""Pytest configuration and shared fixtures for json_compare tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def left_file() -> Path:
    """Left document of the sample pair."""
    return FIXTURES_DIR / "left.json"


@pytest.fixture
def right_file() -> Path:
    """Right document of the sample pair."""
    return FIXTURES_DIR / "right.json"


@pytest.fixture
def broken_file() -> Path:
    """A truncated document that does not parse."""
    return FIXTURES_DIR / "broken.json"


@pytest.fixture
def left_text(left_file: Path) -> str:
    return left_file.read_text(encoding="utf-8")


@pytest.fixture
def right_text(right_file: Path) -> str:
    return right_file.read_text(encoding="utf-8")


@pytest.fixture
def nested_document() -> dict[str, Any]:
    """A document mixing objects, arrays and every scalar kind."""
    return {
        "id": "doc-001",
        "count": 3,
        "ratio": 0.5,
        "enabled": True,
        "parent": None,
        "meta": {
            "owner": {"name": "ops", "email": "ops@example.com"},
            "labels": ["red", "green", "blue"],
        },
        "items": [
            {"sku": "A-1", "qty": 2},
            {"sku": "B-2", "qty": 0, "notes": "line\nbreak \"quoted\""},
        ],
        "unicode": "café ☕",
    }


@pytest.fixture
def write_json(tmp_path: Path):
    """Factory writing a value (or raw text) to a file under tmp_path."""

    def _write(name: str, content: Any) -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
