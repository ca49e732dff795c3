"""
Data models for probe observations.

Responsibilities:
- Parse raw wsrep status/variable values into enums the policy can match on.
- Carry one invocation's observations (ProbeResult) from probe to policy.

Invariants:
- Unknown or empty replication labels parse to ReplicationState.OTHER.
- Unknown transfer methods parse to TransferMethod.UNKNOWN, which is blocking.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReplicationState(str, Enum):
    SYNCED = "synced"
    DONOR = "donor"
    OTHER = "other"


class TransferMethod(str, Enum):
    RSYNC = "rsync"
    RSYNC_WAN = "rsync_wan"
    MYSQLDUMP = "mysqldump"
    XTRABACKUP = "xtrabackup"
    XTRABACKUP_V2 = "xtrabackup-v2"
    MARIABACKUP = "mariabackup"
    CLONE = "clone"
    SKIP = "skip"
    UNKNOWN = "unknown"


# Methods that let a donor keep serving reads while it streams the snapshot.
NON_BLOCKING_METHODS = frozenset(
    {
        TransferMethod.XTRABACKUP,
        TransferMethod.XTRABACKUP_V2,
        TransferMethod.MARIABACKUP,
    }
)

SYNCED_LABEL = "Synced"
DONOR_LABEL = "Donor"


@dataclass(frozen=True)
class ReplicationStatus:
    """Parsed wsrep_local_state_comment; comment keeps the label as reported."""

    state: ReplicationState
    comment: str


def parse_replication_status(comment: str) -> ReplicationStatus:
    """
    Map a wsrep_local_state_comment value onto ReplicationState.

    "Synced" must match exactly. The donor class is "Donor" alone or
    "Donor/<sub-mode>" such as "Donor/Desynced"; labels that merely contain
    the word (e.g. "NotADonor", "Donorless") are OTHER.
    """
    label = (comment or "").strip()
    if label == SYNCED_LABEL:
        return ReplicationStatus(ReplicationState.SYNCED, label)
    if label.split("/", 1)[0] == DONOR_LABEL:
        return ReplicationStatus(ReplicationState.DONOR, label)
    return ReplicationStatus(ReplicationState.OTHER, label)


def is_donor_class(state: ReplicationState) -> bool:
    return state is ReplicationState.DONOR


def parse_transfer_method(raw: str) -> TransferMethod:
    """Map a wsrep_sst_method value onto TransferMethod; unrecognised values are UNKNOWN."""
    value = (raw or "").strip().lower()
    try:
        method = TransferMethod(value)
    except ValueError:
        return TransferMethod.UNKNOWN
    return method


def is_non_blocking(method: TransferMethod | None) -> bool:
    return method in NON_BLOCKING_METHODS


_READ_ONLY_VALUES = {
    "0": False,
    "off": False,
    "false": False,
    "1": True,
    "on": True,
    "true": True,
}


def parse_read_only(raw: str) -> bool | None:
    """Return the @@global.read_only flag, or None when the value is not recognised."""
    return _READ_ONLY_VALUES.get((raw or "").strip().lower())


@dataclass(frozen=True)
class ProbeResult:
    """
    Observations from one probe.

    When live is False the remaining fields are None; transfer_method is only
    set for donor-class states.
    """

    live: bool
    status: ReplicationStatus | None = None
    read_only: bool | None = None
    transfer_method: TransferMethod | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "live": self.live,
            "state": self.status.state.value if self.status else None,
            "comment": self.status.comment if self.status else None,
            "read_only": self.read_only,
            "transfer_method": self.transfer_method.value if self.transfer_method else None,
        }
