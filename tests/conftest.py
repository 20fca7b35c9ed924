"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from semantic_glyph.core.dotid import dotid_for
from semantic_glyph.models import Declaration, SourcePosition

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


def _declaration(term: str, value: int, offset: int = 0) -> Declaration:
    dotid = dotid_for(value)
    assert dotid is not None
    return Declaration(
        term=term,
        dotid=dotid,
        position=SourcePosition(line=0, column=offset, offset=offset, length=len(term) + 2 + len(dotid.signature)),
    )


@pytest.fixture
def make_declaration() -> Callable[..., Declaration]:
    """Factory for declarations that never went through the parser."""
    return _declaration


@pytest.fixture
def ten_declarations() -> list[Declaration]:
    return [_declaration(f"Term{value}", value, offset=value * 20) for value in range(1, 11)]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every SEMANTIC_GLYPH_* variable so settings fall back to defaults."""
    for name in ("SUGGESTION_THRESHOLD", "ENABLED_CATEGORIES", "LOG_LEVEL"):
        monkeypatch.delenv(f"SEMANTIC_GLYPH_{name}", raising=False)
    return monkeypatch
