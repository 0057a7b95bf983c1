"""Path management utilities for forge-deployments library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import BROADCAST_DIR_ENV, DEPLOYMENTS_DIR_ENV


def _resolve_dir(
    explicit: Optional[Union[Path, str]], env_var: str, default_name: str
) -> Path:
    if explicit is not None:
        return Path(explicit).absolute()

    from_env = os.environ.get(env_var)
    if from_env:
        return Path(from_env).absolute()

    return Path.cwd() / default_name


def get_broadcast_dir(broadcast_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the broadcast log directory.

    Args:
        broadcast_root: Custom broadcast directory
                        (defaults to $FORGE_BROADCAST_DIR, then ./broadcast)

    Returns:
        Absolute path to the broadcast directory
    """
    return _resolve_dir(broadcast_root, BROADCAST_DIR_ENV, "broadcast")


def get_deployments_dir(deployments_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the canonical deployment record directory.

    Args:
        deployments_root: Custom records directory
                          (defaults to $FORGE_DEPLOYMENTS_DIR, then ./deployments)

    Returns:
        Absolute path to the deployments directory
    """
    return _resolve_dir(deployments_root, DEPLOYMENTS_DIR_ENV, "deployments")


def get_record_path(deployments_root: Path, chain_id: int, artifact_name: str) -> Path:
    """
    Get the canonical record path for an artifact on a network.

    Layout: {deployments_root}/{chain_id}/{artifact_name}.json
    """
    return deployments_root / str(chain_id) / f"{artifact_name}.json"
