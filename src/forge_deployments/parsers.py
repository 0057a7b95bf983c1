"""Deployment document parsers for forge-deployments library."""

import json
import logging
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import ZERO_ADDRESS, ZERO_HASH
from .types import DeploymentRecord

logger = logging.getLogger(__name__)

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_HASH_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


class DocumentFormat(Enum):
    """
    Deployment document format types.

    - BROADCAST: Per-run broadcast log written by forge script
    - CANONICAL: Record written by DeploymentPersister
    """

    BROADCAST = "broadcast"
    CANONICAL = "canonical"


def detect_document_format(data: Any) -> Optional[DocumentFormat]:
    """
    Detect the shape of a decoded deployment document.

    Args:
        data: Decoded JSON document

    Returns:
        DocumentFormat.BROADCAST if the document has a transactions list
        DocumentFormat.CANONICAL if it has top-level contractName and contractAddress
        None for any other shape
    """
    if not isinstance(data, dict):
        return None

    if isinstance(data.get("transactions"), list):
        return DocumentFormat.BROADCAST

    if "contractName" in data and "contractAddress" in data:
        return DocumentFormat.CANONICAL

    return None


def parse_quantity(value: Any) -> int:
    """
    Convert a JSON quantity to an int.

    Accepts non-negative ints, decimal strings and 0x-prefixed hex strings
    (receipts encode quantities as hex).

    Raises:
        ValueError: If value is not a non-negative quantity
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid quantity: {value!r}")
    if isinstance(value, int):
        result = value
    elif isinstance(value, str) and value.lower().startswith("0x"):
        result = int(value, 16)
    elif isinstance(value, str) and value.isdigit():
        result = int(value)
    else:
        raise ValueError(f"Invalid quantity: {value!r}")

    if result < 0:
        raise ValueError(f"Negative quantity: {value!r}")
    return result


def parse_address(value: Any) -> str:
    """
    Validate a 0x-prefixed 20-byte hex address.

    Raises:
        ValueError: If value is not an address
    """
    if not isinstance(value, str) or not _ADDRESS_RE.match(value):
        raise ValueError(f"Invalid address: {value!r}")
    return value


def parse_hash(value: Any) -> str:
    """
    Validate a 0x-prefixed 32-byte hex hash.

    Raises:
        ValueError: If value is not a hash
    """
    if not isinstance(value, str) or not _HASH_RE.match(value):
        raise ValueError(f"Invalid hash: {value!r}")
    return value


def is_zero_address(address: str) -> bool:
    """Check if an address is the zero address (case-insensitive)."""
    return address.lower() == ZERO_ADDRESS


def _parse_broadcast(data: Dict[str, Any], artifact_name: str) -> Optional[DeploymentRecord]:
    # One timestamp per run, shared by every transaction in it
    timestamp = parse_quantity(data.get("timestamp", 0))

    for tx in data["transactions"]:
        if not isinstance(tx, dict) or tx.get("contractName") != artifact_name:
            continue

        # First match decides, later deployments of the same name in this run are ignored
        address = parse_address(tx.get("contractAddress"))
        if is_zero_address(address):
            return None

        return DeploymentRecord(
            artifact_name=artifact_name,
            artifact_address=address,
            block_number=parse_quantity(tx.get("blockNumber", 0)),
            timestamp=timestamp,
            transaction_hash=parse_hash(tx.get("hash", ZERO_HASH)),
            deployer=ZERO_ADDRESS,
        )

    return None


def _parse_canonical(data: Dict[str, Any], artifact_name: str) -> Optional[DeploymentRecord]:
    if data["contractName"] != artifact_name:
        return None

    address = parse_address(data["contractAddress"])
    if is_zero_address(address):
        return None

    return DeploymentRecord(
        artifact_name=artifact_name,
        artifact_address=address,
        block_number=parse_quantity(data.get("blockNumber", 0)),
        timestamp=parse_quantity(data.get("timestamp", 0)),
        transaction_hash=parse_hash(data.get("transactionHash", ZERO_HASH)),
        deployer=parse_address(data.get("deployer", ZERO_ADDRESS)),
        chain_id=parse_quantity(data.get("chainId", 0)),
    )


def parse_deployment(document_text: str, artifact_name: str) -> Optional[DeploymentRecord]:
    """
    Extract the deployment of a named artifact from a deployment document.

    Broadcast logs are searched in transaction order and the first entry whose
    contractName equals artifact_name (exact, case-sensitive) is returned.
    Canonical records match when their contractName equals artifact_name.

    Missing optional fields default to zero (blockNumber, hash, timestamp).
    Broadcast logs carry no deployer, so it is always the zero address.

    Args:
        document_text: JSON text of a broadcast log or canonical record
        artifact_name: Contract name to look for

    Returns:
        DeploymentRecord for the match, or None if the document has no
        matching deployment or is malformed
    """
    try:
        data = json.loads(document_text)
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting too deep for the decoder
        logger.debug("Ignoring document that is not valid JSON: %s", e)
        return None

    try:
        match detect_document_format(data):
            case DocumentFormat.BROADCAST:
                return _parse_broadcast(data, artifact_name)
            case DocumentFormat.CANONICAL:
                return _parse_canonical(data, artifact_name)
            case _:
                logger.debug("Ignoring document with unrecognised shape")
                return None
    except (KeyError, TypeError, ValueError) as e:
        logger.debug("Ignoring malformed deployment document: %s", e)
        return None


def parse_deployment_file(file_path: Path, artifact_name: str) -> Optional[DeploymentRecord]:
    """
    Read a deployment document from disk and parse it.

    Args:
        file_path: Path to broadcast log or canonical record
        artifact_name: Contract name to look for

    Returns:
        DeploymentRecord for the match, or None if the file can't be read,
        is malformed, or has no matching deployment
    """
    try:
        document_text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping unreadable file %s: %s", file_path, e)
        return None

    record = parse_deployment(document_text, artifact_name)
    if record is None:
        logger.debug("No deployment of %s in %s", artifact_name, file_path)
    return record
