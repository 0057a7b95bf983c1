"""Main API for forge-deployments library."""

import dataclasses
import logging
from itertools import islice
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .constants import ANY_NETWORK
from .exceptions import DeploymentNotFoundError
from .parsers import parse_deployment_file
from .paths import get_broadcast_dir
from .scanner import scan_broadcast_artifacts
from .types import DeploymentRecord

logger = logging.getLogger(__name__)


class DeploymentResolver:
    """Resolves contract deployments from a tree of forge broadcast logs."""

    def __init__(self, broadcast_root: Optional[Union[Path, str]] = None):
        """
        Initialize the deployment resolver.

        The broadcast tree is not read here; every query re-scans it, so logs
        written after construction are always visible.

        Args:
            broadcast_root: Path to the broadcast directory
                            If None, uses $FORGE_BROADCAST_DIR or ./broadcast
        """
        self.broadcast_root = get_broadcast_dir(broadcast_root)

    def most_recent(self, artifact_name: str, chain_id: int) -> DeploymentRecord:
        """
        Get the most recent deployment of a contract on a network.

        The deployment with the greatest broadcast timestamp wins. On equal
        timestamps the first one found is kept, which depends on filesystem
        order and should not be relied on.

        Args:
            artifact_name: Contract name as recorded in the broadcast (case-sensitive)
            chain_id: Network to look on

        Returns:
            DeploymentRecord of the latest deployment

        Raises:
            DeploymentNotFoundError: If no broadcast deploys the contract on the network
        """
        latest: Optional[DeploymentRecord] = None

        for artifact in scan_broadcast_artifacts(self.broadcast_root, chain_id):
            record = parse_deployment_file(artifact.path, artifact_name)
            if record is None:
                continue
            if latest is None or record.timestamp > latest.timestamp:
                latest = record

        if latest is None:
            raise DeploymentNotFoundError(artifact_name, chain_id)

        logger.debug(
            "Resolved %s on network %s to %s", artifact_name, chain_id, latest.artifact_address
        )
        return dataclasses.replace(latest, chain_id=chain_id)

    def exists(self, artifact_name: str, chain_id: int) -> bool:
        """
        Check if a contract has been deployed on a network.

        Args:
            artifact_name: Contract name as recorded in the broadcast
            chain_id: Network to look on

        Returns:
            True if most_recent() would succeed, False otherwise
        """
        try:
            self.most_recent(artifact_name, chain_id)
        except DeploymentNotFoundError:
            return False
        return True

    def iter_deployments(self, artifact_name: str) -> Iterator[DeploymentRecord]:
        """
        Iterate over every deployment of a contract on all networks.

        The broadcast tree is scanned lazily when iteration starts; calling
        again starts a fresh scan. No deduplication or ordering is applied.

        Args:
            artifact_name: Contract name as recorded in the broadcast

        Yields:
            DeploymentRecord per matching broadcast, tagged with the chain id
            taken from the broadcast's path
        """
        for artifact in scan_broadcast_artifacts(self.broadcast_root, ANY_NETWORK):
            record = parse_deployment_file(artifact.path, artifact_name)
            if record is not None:
                yield dataclasses.replace(record, chain_id=artifact.chain_id)

    def all_deployments(
        self, artifact_name: str, limit: Optional[int] = None
    ) -> List[DeploymentRecord]:
        """
        Get all deployments of a contract on all networks.

        Args:
            artifact_name: Contract name as recorded in the broadcast
            limit: Maximum number of records to return (None for no limit)
                   Matches beyond the limit are dropped

        Returns:
            List of DeploymentRecord objects, in scan order
        """
        return list(islice(self.iter_deployments(artifact_name), limit))


def most_recent_deployment(
    artifact_name: str, chain_id: int, broadcast_root: Optional[Union[Path, str]] = None
) -> DeploymentRecord:
    """Shortcut for DeploymentResolver(broadcast_root).most_recent()."""
    return DeploymentResolver(broadcast_root).most_recent(artifact_name, chain_id)


def deployment_exists(
    artifact_name: str, chain_id: int, broadcast_root: Optional[Union[Path, str]] = None
) -> bool:
    """Shortcut for DeploymentResolver(broadcast_root).exists()."""
    return DeploymentResolver(broadcast_root).exists(artifact_name, chain_id)


def all_deployments(
    artifact_name: str,
    broadcast_root: Optional[Union[Path, str]] = None,
    limit: Optional[int] = None,
) -> List[DeploymentRecord]:
    """Shortcut for DeploymentResolver(broadcast_root).all_deployments()."""
    return DeploymentResolver(broadcast_root).all_deployments(artifact_name, limit)
