"""Pytest configuration and shared fixtures.

Fixtures are organized by category:
- Record fixtures: small dependency record sets with known orderings
- File fixtures: temporary source trees following the naming convention
- Infrastructure fixtures: logging reset between tests
"""

import logging
from pathlib import Path

import pytest

from depsort.models.record import DependencyRecord
import structlog

# =============================================================================
# Record Fixtures
# =============================================================================


@pytest.fixture
def chain_records() -> list[DependencyRecord]:
    """A depends on B depends on C, listed dependents first."""
    return [
        DependencyRecord("A", "B", "A.B.js"),
        DependencyRecord("B", "C", "B.C.js"),
        DependencyRecord("C", None, "C.js"),
    ]


@pytest.fixture
def cyclic_records() -> list[DependencyRecord]:
    """A and B each depend on the other."""
    return [
        DependencyRecord("A", "B", "A.B.js"),
        DependencyRecord("B", "A", "B.A.js"),
    ]


# =============================================================================
# File Fixtures
# =============================================================================


def write_files(root: Path, names: list[str]) -> list[Path]:
    """Create files under root whose contents are their own relative names."""
    paths = []
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"// {name}\n", encoding="utf-8")
        paths.append(path)
    return paths


@pytest.fixture
def make_files(tmp_path: Path):
    """Return a helper creating named files under tmp_path."""

    def _make(names: list[str]) -> list[Path]:
        return write_files(tmp_path, names)

    return _make


@pytest.fixture
def js_tree(tmp_path: Path) -> Path:
    """
    A small project:

        lib/jquery.js
        src/Base.js
        src/Button.Widget.js   (Button depends on Widget)
        src/Widget.Base.js     (Widget depends on Base)
        src/util.js
    """
    write_files(
        tmp_path,
        [
            "lib/jquery.js",
            "src/Base.js",
            "src/Button.Widget.js",
            "src/Widget.Base.js",
            "src/util.js",
        ],
    )
    return tmp_path


@pytest.fixture
def cyclic_tree(tmp_path: Path) -> Path:
    """Two files naming each other as dependencies."""
    write_files(tmp_path, ["A.B.js", "B.A.js"])
    return tmp_path


# =============================================================================
# Infrastructure Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers and log context installed by a test."""
    yield
    structlog.contextvars.clear_contextvars()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)
