"""Broadcast log discovery for forge-deployments library."""

import logging
from pathlib import Path
from typing import List, Sequence, Union

from .constants import ANY_NETWORK, BROADCAST_EXTENSION, DRY_RUN_SEGMENT, MAX_SCAN_DEPTH
from .types import BroadcastArtifact

logger = logging.getLogger(__name__)


def _infer_chain_id(segments: Sequence[str], chain_id: int) -> int:
    if chain_id != ANY_NETWORK:
        return chain_id

    # Innermost numeric directory, e.g. Deploy.s.sol/<chain id>/run-1.json
    for segment in reversed(segments[:-1]):
        if segment.isdigit():
            return int(segment)
    return ANY_NETWORK


def _is_candidate(segments: Sequence[str], chain_id: int) -> bool:
    if not segments[-1].endswith(BROADCAST_EXTENSION):
        return False

    # Simulated runs were never submitted
    if DRY_RUN_SEGMENT in segments:
        return False

    if chain_id != ANY_NETWORK and str(chain_id) not in segments[:-1]:
        return False

    return True


def scan_broadcast_artifacts(
    root: Union[Path, str],
    chain_id: int = ANY_NETWORK,
    max_depth: int = MAX_SCAN_DEPTH,
) -> List[BroadcastArtifact]:
    """
    Find broadcast log files below a root directory.

    Assumption: the broadcast tree is partitioned by chain id, i.e. every
    real broadcast has a path segment equal to the decimal chain id, e.g.
    {root}/Deploy.s.sol/31337/run-1700000000.json

    A file is a candidate if:
    * its name ends with .json,
    * no path segment below root is "dry-run", and
    * when chain_id is not ANY_NETWORK, a directory segment below root
      equals str(chain_id).

    Chain id of each artifact: the filter itself when one is given, otherwise
    the innermost numeric directory. The two only disagree for files below
    more than one numeric directory, e.g. Deploy.s.sol/1/5/run.json is
    returned for filter 1 and for filter 5, and tagged 5 by an unfiltered scan.

    Args:
        root: Broadcast directory to scan
        chain_id: Network filter (ANY_NETWORK matches all)
        max_depth: Number of directory levels to descend below root

    Returns:
        BroadcastArtifact per candidate, in traversal order.
        Empty list if root doesn't exist or can't be read.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug("Broadcast root %s does not exist, nothing to scan", root)
        return []

    artifacts: List[BroadcastArtifact] = []

    def walk(directory: Path, depth: int) -> None:
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            return

        for entry in entries:
            if entry.is_dir():
                if depth < max_depth:
                    walk(entry, depth + 1)
                continue

            segments = entry.relative_to(root).parts
            if _is_candidate(segments, chain_id):
                artifacts.append(
                    BroadcastArtifact(path=entry, chain_id=_infer_chain_id(segments, chain_id))
                )

    walk(root, 0)
    return artifacts
