"""
Pytest fixtures for clustercheck tests. No live database: queries are answered
by FakeQueryClient and liveness by a stub callable.
"""

from __future__ import annotations

import pytest

from clustercheck.config.credentials import ConnectionParams
from clustercheck.config.settings import ClusterCheckSettings
from clustercheck.core.exceptions import QueryError
from clustercheck.probe.state_probe import READ_ONLY_QUERY, SST_METHOD_QUERY, STATE_QUERY


class FakeQueryClient:
    """Answers status queries from a dict; an Exception value is raised instead."""

    def __init__(self, answers: dict[str, object]) -> None:
        self.answers = answers
        self.queries: list[str] = []

    def query_value(self, query: str) -> str:
        self.queries.append(query)
        if query not in self.answers:
            raise QueryError(query, "unexpected query")
        value = self.answers[query]
        if isinstance(value, Exception):
            raise value
        return str(value)


@pytest.fixture
def connection_params():
    return ConnectionParams(host="localhost", port=3306, user="clustercheck", password="s3cret")


@pytest.fixture
def settings():
    """Explicit credentials and no response delay so tests never sleep."""
    return ClusterCheckSettings(user="clustercheck", password="s3cret", response_delay_sec=0.0)


@pytest.fixture
def make_client():
    def _make(state="Synced", read_only="0", sst_method="rsync"):
        return FakeQueryClient(
            {
                STATE_QUERY: state,
                READ_ONLY_QUERY: read_only,
                SST_METHOD_QUERY: sst_method,
            }
        )

    return _make


@pytest.fixture
def debian_cnf(tmp_path):
    """Debian-style option file with a [client] section."""
    path = tmp_path / "debian.cnf"
    path.write_text(
        "# Automatically generated for Debian scripts. DO NOT TOUCH!\n"
        "[client]\n"
        "host     = localhost\n"
        "user     = debian-sys-maint\n"
        "password = Zx%9pQ\n"
        "socket   = /var/run/mysqld/mysqld.sock\n"
        "[mysql_upgrade]\n"
        "host     = localhost\n"
        "user     = debian-sys-maint\n"
        "password = Zx%9pQ\n",
        encoding="utf-8",
    )
    return path
