"""
Tests for probe value parsing: replication state labels, SST methods, read-only flag.
"""

from __future__ import annotations

import pytest

from clustercheck.probe.models import (
    NON_BLOCKING_METHODS,
    ProbeResult,
    ReplicationState,
    TransferMethod,
    is_donor_class,
    is_non_blocking,
    parse_read_only,
    parse_replication_status,
    parse_transfer_method,
)


@pytest.mark.parametrize(
    "label,expected",
    [
        ("Synced", ReplicationState.SYNCED),
        ("  Synced\n", ReplicationState.SYNCED),
        ("Donor/Desynced", ReplicationState.DONOR),
        ("Donor", ReplicationState.DONOR),
        ("Joining", ReplicationState.OTHER),
        ("Joined", ReplicationState.OTHER),
        ("NotADonor", ReplicationState.OTHER),
        ("Donorless", ReplicationState.OTHER),
        ("Desynced/Donor", ReplicationState.OTHER),
        ("SYNCED", ReplicationState.OTHER),
        ("", ReplicationState.OTHER),
    ],
)
def test_parse_replication_status(label, expected):
    status = parse_replication_status(label)
    assert status.state is expected
    assert status.comment == label.strip()


def test_is_donor_class():
    assert is_donor_class(ReplicationState.DONOR) is True
    assert is_donor_class(ReplicationState.SYNCED) is False
    assert is_donor_class(ReplicationState.OTHER) is False


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("xtrabackup-v2", TransferMethod.XTRABACKUP_V2),
        ("XtraBackup", TransferMethod.XTRABACKUP),
        ("mariabackup", TransferMethod.MARIABACKUP),
        ("rsync", TransferMethod.RSYNC),
        ("mysqldump", TransferMethod.MYSQLDUMP),
        ("some-future-method", TransferMethod.UNKNOWN),
        ("", TransferMethod.UNKNOWN),
    ],
)
def test_parse_transfer_method(raw, expected):
    assert parse_transfer_method(raw) is expected


def test_non_blocking_allow_list():
    """Exactly xtrabackup, xtrabackup-v2 and mariabackup are non-blocking."""
    assert NON_BLOCKING_METHODS == {
        TransferMethod.XTRABACKUP,
        TransferMethod.XTRABACKUP_V2,
        TransferMethod.MARIABACKUP,
    }
    assert is_non_blocking(TransferMethod.UNKNOWN) is False
    assert is_non_blocking(None) is False


@pytest.mark.parametrize(
    "raw,expected",
    [("0", False), ("1", True), ("ON", True), ("off", False), (" 0 ", False), ("2", None), ("", None)],
)
def test_parse_read_only(raw, expected):
    assert parse_read_only(raw) is expected


def test_probe_result_to_dict_not_live():
    assert ProbeResult(live=False).to_dict() == {
        "live": False,
        "state": None,
        "comment": None,
        "read_only": None,
        "transfer_method": None,
    }
