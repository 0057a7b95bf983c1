"""Canonical deployment record storage for forge-deployments library."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from .constants import ZERO_HASH
from .context import ChainContext
from .exceptions import DeploymentNotFoundError, InvalidPathError
from .parsers import is_zero_address, parse_address, parse_deployment_file
from .paths import get_deployments_dir, get_record_path
from .types import DeploymentRecord

logger = logging.getLogger(__name__)


def to_canonical_document(record: DeploymentRecord) -> Dict[str, Any]:
    """
    Convert a record to the canonical JSON document.

    Key order is fixed so that saved files are byte-for-byte reproducible.
    """
    return {
        "contractName": record.artifact_name,
        "contractAddress": record.artifact_address,
        "blockNumber": record.block_number,
        "timestamp": record.timestamp,
        "deployer": record.deployer,
        "chainId": record.chain_id,
    }


def _validate_artifact_name(artifact_name: str) -> None:
    if not artifact_name:
        raise InvalidPathError("Artifact name must not be empty")
    if artifact_name in (".", "..") or "/" in artifact_name or "\\" in artifact_name:
        raise InvalidPathError(
            f"Artifact name '{artifact_name}' cannot be used as a file name"
        )


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def _write_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        # mkstemp creates the file 0600, give it the mode open() would
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class DeploymentPersister:
    """Writes and reads the canonical deployment record per network and contract."""

    def __init__(
        self,
        context: ChainContext,
        deployments_root: Optional[Union[Path, str]] = None,
        on_saved: Optional[Callable[[DeploymentRecord], None]] = None,
    ):
        """
        Initialize the persister.

        Args:
            context: Chain context supplying network, block, time and deployer
            deployments_root: Directory for canonical records
                              If None, uses $FORGE_DEPLOYMENTS_DIR or ./deployments
            on_saved: Optional callback notified with every saved record
        """
        self.context = context
        self.deployments_root = get_deployments_dir(deployments_root)
        self.on_saved = on_saved

    def record_path(self, artifact_name: str, chain_id: Optional[int] = None) -> Path:
        """
        Get the canonical record path for a contract.

        Args:
            artifact_name: Contract name
            chain_id: Network (defaults to the context's network)

        Raises:
            InvalidPathError: If the name can't be used as a file name
        """
        _validate_artifact_name(artifact_name)
        if chain_id is None:
            chain_id = self.context.chain_id
        return get_record_path(self.deployments_root, chain_id, artifact_name)

    def save(self, artifact_name: str, artifact_address: str) -> Path:
        """
        Record a new deployment as the current one for its network.

        Any existing record for the same network and contract is replaced,
        history is kept only in the broadcast logs. The transaction hash is
        not known at this point and is stored as zero.

        Args:
            artifact_name: Contract name
            artifact_address: Deployed contract address

        Returns:
            Path of the written record

        Raises:
            InvalidPathError: If the name can't be used as a file name
            ValueError: If the address is malformed or the zero address,
                        or the context's deployer is not an address
        """
        path = self.record_path(artifact_name)

        parse_address(artifact_address)
        if is_zero_address(artifact_address):
            raise ValueError("Cannot record a deployment at the zero address")
        deployer = parse_address(self.context.deployer)
        block_number, timestamp = self.context.head()

        record = DeploymentRecord(
            artifact_name=artifact_name,
            artifact_address=artifact_address,
            block_number=block_number,
            timestamp=timestamp,
            transaction_hash=ZERO_HASH,
            deployer=deployer,
            chain_id=self.context.chain_id,
        )

        _write_atomic(path, json.dumps(to_canonical_document(record), indent=2) + "\n")

        self._notify(record)
        return path

    def load(self, artifact_name: str, chain_id: Optional[int] = None) -> DeploymentRecord:
        """
        Read the canonical record of a contract.

        Args:
            artifact_name: Contract name
            chain_id: Network (defaults to the context's network)

        Returns:
            DeploymentRecord as saved

        Raises:
            InvalidPathError: If the name can't be used as a file name
            DeploymentNotFoundError: If no valid record exists
        """
        path = self.record_path(artifact_name, chain_id)
        record = parse_deployment_file(path, artifact_name)
        if record is None:
            raise DeploymentNotFoundError(
                artifact_name, self.context.chain_id if chain_id is None else chain_id
            )
        return record

    def _notify(self, record: DeploymentRecord) -> None:
        logger.info(
            "Saved deployment on network %s: %s at %s (block %s)",
            record.chain_id,
            record.artifact_name,
            record.artifact_address,
            record.block_number,
        )

        if self.on_saved is None:
            return
        try:
            self.on_saved(record)
        except Exception:
            logger.warning("on_saved callback failed for %s", record.artifact_name, exc_info=True)
