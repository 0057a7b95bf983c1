"""
forge-deployments: Python library for tracking smart contract deployments from forge broadcast logs
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from .context import ChainContext, RpcChainContext, StaticChainContext
from .deployments import (
    DeploymentResolver,
    all_deployments,
    deployment_exists,
    most_recent_deployment,
)
from .exceptions import (
    DeploymentError,
    DeploymentNotFoundError,
    InvalidPathError,
    UnsupportedNetworkError,
)
from .networks import network_info
from .parsers import parse_deployment
from .persistence import DeploymentPersister
from .scanner import scan_broadcast_artifacts
from .types import BroadcastArtifact, DeploymentRecord, NetworkMetadata

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = version("forge-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentResolver",
    "DeploymentPersister",
    "most_recent_deployment",
    "deployment_exists",
    "all_deployments",
    "scan_broadcast_artifacts",
    "parse_deployment",
    "network_info",
    "ChainContext",
    "StaticChainContext",
    "RpcChainContext",
    "DeploymentRecord",
    "BroadcastArtifact",
    "NetworkMetadata",
    "DeploymentError",
    "DeploymentNotFoundError",
    "UnsupportedNetworkError",
    "InvalidPathError",
]
