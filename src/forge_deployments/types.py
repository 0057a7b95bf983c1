"""Data types and dataclasses for forge-deployments library."""

from dataclasses import dataclass
from pathlib import Path

from .constants import ZERO_ADDRESS, ZERO_HASH


@dataclass
class DeploymentRecord:
    """A deployment of a named artifact, observed in a broadcast or persisted."""

    # Required fields
    artifact_name: str  # Contract name, e.g., "MyToken"
    artifact_address: str  # 0x-prefixed 20-byte address

    # Fields absent from older broadcasts default to their zero value
    block_number: int = 0
    timestamp: int = 0  # Unix timestamp; 0 loses every recency comparison
    transaction_hash: str = ZERO_HASH
    deployer: str = ZERO_ADDRESS
    chain_id: int = 0  # 0 when the network is unknown

    def __post_init__(self) -> None:
        if not self.artifact_name:
            raise ValueError("artifact_name must not be empty")


@dataclass(frozen=True)
class BroadcastArtifact:
    """A broadcast log file and the chain id inferred from its path."""

    path: Path
    chain_id: int


@dataclass(frozen=True)
class NetworkMetadata:
    """Static information about a supported network."""

    chain_id: int
    chain_name: str
    short_name: str
    native_currency: str
    block_explorer_url: str
    default_rpc_env: str
