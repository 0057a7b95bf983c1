"""Unit tests for path helper functions."""

from pathlib import Path

import pytest

from forge_deployments.paths import get_broadcast_dir, get_deployments_dir, get_record_path


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Run every test without directory overrides from the environment."""
    monkeypatch.delenv("FORGE_BROADCAST_DIR", raising=False)
    monkeypatch.delenv("FORGE_DEPLOYMENTS_DIR", raising=False)


class TestGetBroadcastDir:
    """Test the get_broadcast_dir function."""

    def test_defaults_to_cwd_broadcast(self, tmp_path: Path, monkeypatch):
        """Test that default broadcast dir is ./broadcast."""
        monkeypatch.chdir(tmp_path)

        assert get_broadcast_dir() == tmp_path / "broadcast"

    def test_returns_absolute_path(self):
        assert get_broadcast_dir().is_absolute()

    def test_environment_override(self, tmp_path: Path, monkeypatch):
        """Test that $FORGE_BROADCAST_DIR replaces the default."""
        monkeypatch.setenv("FORGE_BROADCAST_DIR", str(tmp_path / "logs"))

        assert get_broadcast_dir() == tmp_path / "logs"

    def test_explicit_root_wins_over_environment(self, tmp_path: Path, monkeypatch):
        """Test that an explicit root takes priority over the environment."""
        monkeypatch.setenv("FORGE_BROADCAST_DIR", str(tmp_path / "logs"))

        assert get_broadcast_dir(tmp_path / "explicit") == tmp_path / "explicit"

    def test_custom_root_as_string(self, tmp_path: Path):
        """Test that custom root can be provided as string."""
        assert get_broadcast_dir(str(tmp_path / "custom")) == tmp_path / "custom"

    def test_relative_root_converted_to_absolute(self, tmp_path: Path, monkeypatch):
        """Test that relative root is converted to absolute path."""
        monkeypatch.chdir(tmp_path)

        result = get_broadcast_dir("relative")

        assert result.is_absolute()
        assert result == tmp_path / "relative"


class TestGetDeploymentsDir:
    """Test the get_deployments_dir function."""

    def test_defaults_to_cwd_deployments(self, tmp_path: Path, monkeypatch):
        """Test that default deployments dir is ./deployments."""
        monkeypatch.chdir(tmp_path)

        assert get_deployments_dir() == tmp_path / "deployments"

    def test_environment_override(self, tmp_path: Path, monkeypatch):
        """Test that $FORGE_DEPLOYMENTS_DIR replaces the default."""
        monkeypatch.setenv("FORGE_DEPLOYMENTS_DIR", str(tmp_path / "records"))

        assert get_deployments_dir() == tmp_path / "records"

    def test_empty_environment_value_is_ignored(self, tmp_path: Path, monkeypatch):
        """Test that an empty variable falls back to the default."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("FORGE_DEPLOYMENTS_DIR", "")

        assert get_deployments_dir() == tmp_path / "deployments"


class TestGetRecordPath:
    """Test the get_record_path function."""

    def test_layout(self, tmp_path: Path):
        """Test that records live at {root}/{chain id}/{name}.json."""
        path = get_record_path(tmp_path, 31337, "MyToken")

        assert path == tmp_path / "31337" / "MyToken.json"

    def test_deterministic(self, tmp_path: Path):
        assert get_record_path(tmp_path, 1, "Vault") == get_record_path(tmp_path, 1, "Vault")
