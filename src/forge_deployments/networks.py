"""Network registry lookups for forge-deployments library."""

from .constants import NETWORK_CONFIG
from .exceptions import UnsupportedNetworkError
from .types import NetworkMetadata


def is_supported(chain_id: int) -> bool:
    """Check if a chain id is in the network registry."""
    return chain_id in NETWORK_CONFIG


def network_info(chain_id: int) -> NetworkMetadata:
    """
    Get static metadata for a network.

    Args:
        chain_id: EIP-155 chain id

    Returns:
        NetworkMetadata for the chain

    Raises:
        UnsupportedNetworkError: If chain id is not in the registry
    """
    if not is_supported(chain_id):
        raise UnsupportedNetworkError(chain_id)

    config = NETWORK_CONFIG[chain_id]
    return NetworkMetadata(
        chain_id=chain_id,
        chain_name=config["chain_name"],
        short_name=config["short_name"],
        native_currency=config["native_currency"],
        block_explorer_url=config["block_explorer_url"],
        default_rpc_env=config["default_rpc_env"],
    )


def explorer_address_url(chain_id: int, address: str) -> str:
    """
    Build a block explorer URL for an address.

    Returns an empty string for networks without an explorer.
    """
    explorer = network_info(chain_id).block_explorer_url
    if not explorer:
        return ""
    return f"{explorer}/address/{address}"
