"""
Check runner — one invocation: probe -> decide -> respond -> exit status.

- run_check(): drives a single health check and returns the process exit code.
- build_probe(): wires settings and resolved credentials into a StateProbe.

Every path writes exactly one response. Exit status is 0 whenever the engine
process was found (ADMIT or REJECT alike), 1 when it is not running, and 2
for configuration errors.
"""

from __future__ import annotations

import time
from typing import BinaryIO, Callable

from clustercheck.check_logging import get_logger
from clustercheck.config.credentials import resolve_credentials
from clustercheck.config.settings import ClusterCheckSettings
from clustercheck.core.exceptions import ConfigError, ProbeError
from clustercheck.policy.admission import (
    Verdict,
    decide_probe_result,
    reject,
    verdict_for_failure,
)
from clustercheck.probe.mysql_client import MySQLClient
from clustercheck.probe.state_probe import StateProbe
from clustercheck.responder.http_response import write_response

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NOT_RUNNING = 1
EXIT_CONFIG_ERROR = 2


def build_probe(settings: ClusterCheckSettings) -> StateProbe:
    """Resolve credentials and build the probe. Raises ConfigError."""
    params = resolve_credentials(settings)
    client = MySQLClient(
        params,
        mysql_bin=settings.mysql_bin,
        timeout_sec=settings.query_timeout_sec,
    )
    return StateProbe(params, client=client, process_names=settings.process_names)


def config_error_verdict(error: ConfigError) -> Verdict:
    return reject(f"configuration error: {error}")


def run_check(
    settings: ClusterCheckSettings,
    stream: BinaryIO,
    probe: StateProbe | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run one health check, write the response to stream, return the exit code."""

    def respond(verdict: Verdict) -> None:
        write_response(verdict, stream, delay_sec=settings.response_delay_sec, sleep=sleep)

    if probe is None:
        try:
            probe = build_probe(settings)
        except ConfigError as e:
            logger.error("check_config_error", error=str(e))
            respond(config_error_verdict(e))
            return EXIT_CONFIG_ERROR

    try:
        result = probe.probe()
    except ProbeError as e:
        logger.error("check_probe_failed", error=str(e))
        respond(verdict_for_failure(e))
        return EXIT_OK

    verdict = decide_probe_result(result)
    logger.info("check_verdict", **verdict.to_dict())
    respond(verdict)
    if not result.live:
        return EXIT_NOT_RUNNING
    return EXIT_OK
