"""Custom exception classes for forge-deployments library."""


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class DeploymentNotFoundError(DeploymentError, LookupError):
    """Raised when no deployment of an artifact is recorded for a network."""

    def __init__(self, artifact_name: str, chain_id: int):
        super().__init__(
            f"No deployment of '{artifact_name}' found on network {chain_id}"
        )
        self.artifact_name = artifact_name
        self.chain_id = chain_id


class UnsupportedNetworkError(DeploymentError, ValueError):
    """Raised when a chain id is not in the network registry."""

    def __init__(self, chain_id: int):
        super().__init__(f"Network {chain_id} is not supported")
        self.chain_id = chain_id


class InvalidPathError(DeploymentError, ValueError):
    """Raised when an artifact name cannot be mapped to a record path."""

    pass
