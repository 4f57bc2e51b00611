"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def api_errors_path(fixtures_root: Path) -> Path:
    """Return the error document returned by a form API with every error kind."""
    return fixtures_root / "errors" / "api_errors.json"


@pytest.fixture()
def api_errors(api_errors_path: Path) -> dict[str, Any]:
    """Load a fresh copy of the API error document."""
    return json.loads(api_errors_path.read_text(encoding="utf-8"))


@pytest.fixture()
def api_errors_expected(fixtures_root: Path) -> dict[str, Any]:
    """Load the transformed form of the API error document (``url``/``urls`` preserved)."""
    return json.loads((fixtures_root / "errors" / "api_errors.expected.json").read_text(encoding="utf-8"))
