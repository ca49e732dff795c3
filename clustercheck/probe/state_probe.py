"""
State probe: liveness, replication state, read-only flag, transfer method.

Order is fixed: liveness first (short-circuits when the engine is down), then
replication state and read-only flag, and the transfer method only when the
node is a donor. Query failures propagate as QueryError.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Callable, Protocol

from clustercheck.check_logging import get_logger
from clustercheck.config.credentials import ConnectionParams
from clustercheck.config.settings import DEFAULT_PROCESS_NAMES
from clustercheck.core.exceptions import QueryError
from clustercheck.probe.liveness import check_liveness
from clustercheck.probe.mysql_client import MySQLClient
from clustercheck.probe.models import (
    ProbeResult,
    ReplicationState,
    is_donor_class,
    parse_read_only,
    parse_replication_status,
    parse_transfer_method,
)

logger = get_logger(__name__)

STATE_QUERY = "SHOW STATUS LIKE 'wsrep_local_state_comment';"
SST_METHOD_QUERY = "SHOW VARIABLES LIKE 'wsrep_sst_method';"
READ_ONLY_QUERY = "SELECT @@global.read_only;"


class QueryClient(Protocol):
    def query_value(self, query: str) -> str: ...


class StateProbe:
    """Observes one node; holds its connection config, no module-level state."""

    def __init__(
        self,
        params: ConnectionParams,
        client: QueryClient | None = None,
        process_names: Iterable[str] = DEFAULT_PROCESS_NAMES,
        liveness: Callable[[Iterable[str]], bool] = check_liveness,
    ) -> None:
        self.params = params
        self._client = client or MySQLClient(params)
        self._process_names = tuple(process_names)
        self._liveness = liveness

    def is_live(self) -> bool:
        return self._liveness(self._process_names)

    def _read_only(self, strict: bool) -> bool | None:
        """
        Observe @@global.read_only.

        Only a Synced verdict depends on the flag, so only then does a failed or
        unrecognised answer raise; for other states it is reported as None.
        """
        try:
            raw = self._client.query_value(READ_ONLY_QUERY)
        except QueryError as e:
            if strict:
                raise
            logger.info("probe_read_only_unavailable", error=str(e))
            return None
        read_only = parse_read_only(raw)
        if read_only is None and strict:
            raise QueryError(READ_ONLY_QUERY, f"unexpected read_only value {raw!r}")
        return read_only

    def probe(self) -> ProbeResult:
        """Return this node's observations. Raises QueryError if the engine cannot be queried."""
        if not self.is_live():
            return ProbeResult(live=False)

        status = parse_replication_status(self._client.query_value(STATE_QUERY))

        read_only = self._read_only(strict=status.state is ReplicationState.SYNCED)

        transfer_method = None
        if is_donor_class(status.state):
            transfer_method = parse_transfer_method(self._client.query_value(SST_METHOD_QUERY))

        result = ProbeResult(
            live=True,
            status=status,
            read_only=read_only,
            transfer_method=transfer_method,
        )
        logger.info("probe_observed", host=self.params.host, port=self.params.port, **result.to_dict())
        return result
