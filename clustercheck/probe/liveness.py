"""
Engine liveness check against the local process table.

The check runs before any query: if no database server process is present
there is nothing to connect to and the node is rejected outright.
"""

from __future__ import annotations

from collections.abc import Iterable

import psutil

from clustercheck.check_logging import get_logger

logger = get_logger(__name__)


def find_engine_pids(process_names: Iterable[str]) -> list[int]:
    """Return pids of running processes whose name is one of process_names."""
    wanted = set(process_names)
    pids: list[int] = []
    for proc in psutil.process_iter(["pid", "name"]):
        name = proc.info.get("name")
        if name in wanted:
            pids.append(proc.info["pid"])
    return pids


def check_liveness(process_names: Iterable[str]) -> bool:
    """True when at least one engine process is running."""
    names = tuple(process_names)
    pids = find_engine_pids(names)
    if not pids:
        logger.warning("liveness_engine_not_running", process_names=list(names))
        return False
    logger.debug("liveness_engine_running", pids=pids)
    return True
