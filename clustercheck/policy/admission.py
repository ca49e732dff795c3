"""
Admission policy: map probe observations to an ADMIT/REJECT verdict.

Pure and deterministic; no I/O. Rules are evaluated top to bottom and the
first match wins:

  not live                          -> REJECT "instance not running"
  Synced, writable                  -> ADMIT
  Synced, read-only (or unknown)    -> REJECT
  Donor class, non-blocking SST     -> ADMIT
  Donor class, any other SST        -> REJECT
  anything else                     -> REJECT "status is <label>"

The read-only flag is only consulted for Synced nodes; a donor's flag does
not affect its verdict.
"""

from __future__ import annotations

from dataclasses import dataclass

from clustercheck.probe.models import (
    ProbeResult,
    ReplicationState,
    ReplicationStatus,
    TransferMethod,
    is_donor_class,
    is_non_blocking,
)

REASON_NOT_RUNNING = "instance not running"


@dataclass(frozen=True)
class Verdict:
    """Routing decision for the load balancer."""

    admit: bool
    reason: str
    """Human-readable explanation; becomes the response body."""

    def to_dict(self) -> dict[str, object]:
        return {"admit": self.admit, "reason": self.reason}


def admit(reason: str) -> Verdict:
    return Verdict(admit=True, reason=reason)


def reject(reason: str) -> Verdict:
    return Verdict(admit=False, reason=reason)


def decide(
    live: bool,
    status: ReplicationStatus | None = None,
    transfer_method: TransferMethod | None = None,
    read_only: bool | None = None,
) -> Verdict:
    """Return the verdict for one set of observations."""
    if not live:
        return reject(REASON_NOT_RUNNING)
    if status is None:
        return reject("status is unknown")

    label = status.comment or "unknown"
    if status.state is ReplicationState.SYNCED:
        if read_only is False:
            return admit(f"status is {label}")
        if read_only:
            return reject(f"status is {label}; instance is read-only")
        return reject(f"status is {label}; read-only flag unknown")

    if is_donor_class(status.state):
        if is_non_blocking(transfer_method):
            return admit(f"status is {label}; non-blocking transfer ({transfer_method.value})")
        return reject(f"status is {label}; blocking transfer")

    return reject(f"status is {label}")


def decide_probe_result(result: ProbeResult) -> Verdict:
    return decide(
        result.live,
        status=result.status,
        transfer_method=result.transfer_method,
        read_only=result.read_only,
    )


def verdict_for_failure(error: Exception) -> Verdict:
    """REJECT for a node that could not be observed; never mistaken for a state."""
    return reject(f"probe failed: {error}")
