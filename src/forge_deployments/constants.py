"""Configuration constants for forge-deployments library."""

# Broadcast log layout
BROADCAST_EXTENSION = ".json"
DRY_RUN_SEGMENT = "dry-run"
MAX_SCAN_DEPTH = 3  # covers <script>/<chain id>/<run file> with one level spare

# Scanner wildcard: match broadcasts of every network
ANY_NETWORK = 0

ZERO_ADDRESS = "0x" + "0" * 40
ZERO_HASH = "0x" + "0" * 64

# Environment variables for default directories
BROADCAST_DIR_ENV = "FORGE_BROADCAST_DIR"
DEPLOYMENTS_DIR_ENV = "FORGE_DEPLOYMENTS_DIR"

# Network configuration based on ethereum-lists/chains
# EIP-3770 chain short names for environment variables
NETWORK_CONFIG = {
    1: {
        "chain_name": "Ethereum Mainnet",
        "short_name": "eth",  # EIP-3770
        "native_currency": "ETH",
        "block_explorer_url": "https://etherscan.io",
        "default_rpc_env": "ETH_RPC_URL",
    },
    11155111: {
        "chain_name": "Sepolia",
        "short_name": "sep",  # EIP-3770
        "native_currency": "ETH",
        "block_explorer_url": "https://sepolia.etherscan.io",
        "default_rpc_env": "SEP_RPC_URL",
    },
    100: {
        "chain_name": "Gnosis Chain",
        "short_name": "gno",  # EIP-3770
        "native_currency": "xDAI",
        "block_explorer_url": "https://gnosisscan.io",
        "default_rpc_env": "GNO_RPC_URL",
    },
    8453: {
        "chain_name": "Base",
        "short_name": "base",  # EIP-3770
        "native_currency": "ETH",
        "block_explorer_url": "https://basescan.org",
        "default_rpc_env": "BASE_RPC_URL",
    },
    31337: {
        "chain_name": "Anvil",
        "short_name": "anvil",
        "native_currency": "ETH",
        "block_explorer_url": "",  # local devnet, no explorer
        "default_rpc_env": "ANVIL_RPC_URL",
    },
}
