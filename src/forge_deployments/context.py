"""Invoking chain context for forge-deployments library.

The persister stamps records with the block height, time, network and
account of whoever performs the deployment. These are supplied by a
ChainContext passed to it rather than read from global state.
"""

import os
import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Tuple

import requests

from .networks import network_info
from .parsers import parse_address, parse_quantity


class ChainContext(Protocol):
    """Network, account and chain head of the deploying context."""

    chain_id: int
    deployer: str

    def head(self) -> Tuple[int, int]:
        """Return (block number, timestamp) of one block at the chain head."""
        ...


@dataclass
class StaticChainContext:
    """ChainContext with fixed values, for scripts and tests."""

    chain_id: int
    deployer: str
    current_block: int = 0
    current_timestamp: Optional[int] = None  # None means wall clock

    def __post_init__(self) -> None:
        parse_address(self.deployer)

    def head(self) -> Tuple[int, int]:
        if self.current_timestamp is None:
            return self.current_block, int(time.time())
        return self.current_block, self.current_timestamp


@dataclass
class RpcChainContext:
    """ChainContext backed by an Ethereum JSON-RPC endpoint."""

    rpc_url: str
    deployer: str
    chain_id: int = 0  # 0 means ask the node
    timeout: float = 30
    _request_id: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        parse_address(self.deployer)
        if not self.chain_id:
            self.chain_id = parse_quantity(self._call("eth_chainId", []))

    @classmethod
    def from_env(cls, chain_id: int, deployer: str) -> "RpcChainContext":
        """
        Create a context using the network's RPC URL environment variable.

        Args:
            chain_id: Network to connect to (must be in the registry)
            deployer: Deploying account address

        Raises:
            UnsupportedNetworkError: If chain id is not in the registry
            ValueError: If the RPC URL environment variable is not set
        """
        env_var = network_info(chain_id).default_rpc_env
        rpc_url = os.environ.get(env_var)
        if not rpc_url:
            raise ValueError(
                f"RPC URL required: set ${env_var} for network {chain_id}"
            )
        return cls(rpc_url=rpc_url, deployer=deployer, chain_id=chain_id)

    def head(self) -> Tuple[int, int]:
        # Height and time must come from the same block
        block = self._call("eth_getBlockByNumber", ["latest", False])
        if block is None:
            raise ValueError("RPC returned no latest block")
        return parse_quantity(block["number"]), parse_quantity(block["timestamp"])

    def _call(self, method: str, params: List[Any]) -> Any:
        """
        Make a JSON-RPC call.

        Raises:
            KeyError: If RPC response is missing the result
            ValueError: If RPC returns an error
            RuntimeError: If network error occurs
        """
        self._request_id += 1
        try:
            response = requests.post(
                self.rpc_url,
                json={
                    "jsonrpc": "2.0",
                    "method": method,
                    "params": params,
                    "id": self._request_id,
                },
                timeout=self.timeout,
            )

            # Check for HTTP errors
            if response.status_code != 200:
                raise RuntimeError(f"RPC request failed with status {response.status_code}")

            result = response.json()

            # Check for RPC errors
            if "error" in result:
                raise ValueError(f"RPC error: {result['error']}")

            return result["result"]

        except requests.RequestException as e:
            raise RuntimeError(f"Network error during RPC call: {e}") from e
