"""
Minimal HTTP/1.1 response for load-balancer health checks.

ADMIT renders "200 OK", REJECT renders "503 Service Unavailable". Headers are
fixed (text/plain, Connection: close) plus a Content-Length equal to the
encoded body length. After writing, the responder waits RESPONSE_DELAY_SEC so
the reading side consumes the bytes before the channel is torn down.
"""

from __future__ import annotations

import time
from typing import BinaryIO, Callable

from clustercheck.check_logging import get_logger
from clustercheck.config.settings import DEFAULT_RESPONSE_DELAY_SEC
from clustercheck.policy.admission import Verdict

logger = get_logger(__name__)

RESPONSE_DELAY_SEC = DEFAULT_RESPONSE_DELAY_SEC
CRLF = "\r\n"
STATUS_OK = (200, "OK")
STATUS_UNAVAILABLE = (503, "Service Unavailable")


def status_for(verdict: Verdict) -> tuple[int, str]:
    return STATUS_OK if verdict.admit else STATUS_UNAVAILABLE


def render_body(verdict: Verdict) -> bytes:
    return (verdict.reason + CRLF).encode("utf-8")


def render_response(verdict: Verdict) -> bytes:
    """Status line, headers, blank line, then the body; nothing after the body."""
    code, phrase = status_for(verdict)
    body = render_body(verdict)
    head = CRLF.join(
        [
            f"HTTP/1.1 {code} {phrase}",
            "Content-Type: text/plain",
            "Connection: close",
            f"Content-Length: {len(body)}",
            "",
            "",
        ]
    )
    return head.encode("ascii") + body


def write_response(
    verdict: Verdict,
    stream: BinaryIO,
    delay_sec: float = RESPONSE_DELAY_SEC,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Write the rendered response to stream, flush, then pause. Returns bytes written (0 if the reader already hung up)."""
    payload = render_response(verdict)
    try:
        stream.write(payload)
        stream.flush()
    except BrokenPipeError:
        logger.warning("response_channel_closed", status=status_for(verdict)[0])
        return 0
    logger.info("response_written", status=status_for(verdict)[0], length=len(payload))
    if delay_sec > 0:
        sleep(delay_sec)
    return len(payload)
