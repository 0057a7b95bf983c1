"""Shared pytest fixtures for forge-deployments tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest


def _make_broadcast(transactions: List[Dict[str, Any]], timestamp: Optional[int]) -> Dict[str, Any]:
    """Build a broadcast log document."""
    document: Dict[str, Any] = {"transactions": transactions, "receipts": [], "libraries": []}
    if timestamp is not None:
        document["timestamp"] = timestamp
    return document


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def broadcast_sample(fixtures_dir: Path) -> Path:
    """Return path to sample forge broadcast log."""
    return fixtures_dir / "broadcast" / "Deploy.s.sol" / "31337" / "run-1700000000.json"


@pytest.fixture
def dry_run_sample(fixtures_dir: Path) -> Path:
    """Return path to sample dry-run broadcast log."""
    return (
        fixtures_dir / "broadcast" / "Deploy.s.sol" / "31337" / "dry-run" / "run-1700000500.json"
    )


@pytest.fixture
def canonical_sample(fixtures_dir: Path) -> Path:
    """Return path to sample canonical deployment record."""
    return fixtures_dir / "deployments" / "31337" / "MyToken.json"


@pytest.fixture
def temp_broadcast_tree(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy the sample broadcast tree to a temporary directory."""
    root = tmp_path / "broadcast"
    shutil.copytree(fixtures_dir / "broadcast", root)
    return root


@pytest.fixture
def broadcast_root(tmp_path: Path) -> Path:
    """Return an empty temporary broadcast directory."""
    root = tmp_path / "broadcast"
    root.mkdir()
    return root


@pytest.fixture
def write_broadcast(broadcast_root: Path) -> Callable[..., Path]:
    """Return a function that writes a broadcast log below broadcast_root."""

    def _write(
        relative_path: str,
        transactions: List[Dict[str, Any]],
        timestamp: Optional[int] = 1700000000,
    ) -> Path:
        path = broadcast_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(_make_broadcast(transactions, timestamp), indent=2))
        return path

    return _write
