"""
State probe package — observes the local Galera node.

Liveness from the process table (psutil), replication state, read-only flag
and SST method from status queries through the mysql client.
"""

from clustercheck.probe.models import (
    NON_BLOCKING_METHODS,
    ProbeResult,
    ReplicationState,
    ReplicationStatus,
    TransferMethod,
    is_donor_class,
    is_non_blocking,
    parse_replication_status,
    parse_transfer_method,
)
from clustercheck.probe.state_probe import StateProbe

__all__ = [
    "NON_BLOCKING_METHODS",
    "ProbeResult",
    "ReplicationState",
    "ReplicationStatus",
    "StateProbe",
    "TransferMethod",
    "is_donor_class",
    "is_non_blocking",
    "parse_replication_status",
    "parse_transfer_method",
]
