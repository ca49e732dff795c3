"""
Tests for the HTTP responder: status lines, fixed headers, exact Content-Length,
and the post-write delay.
"""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest

from clustercheck.policy.admission import Verdict
from clustercheck.responder.http_response import (
    RESPONSE_DELAY_SEC,
    render_response,
    write_response,
)


def _split(raw: bytes) -> tuple[list[str], bytes]:
    head, body = raw.split(b"\r\n\r\n", 1)
    return head.decode("ascii").split("\r\n"), body


def test_admit_renders_200():
    lines, body = _split(render_response(Verdict(admit=True, reason="status is Synced")))
    assert lines[0] == "HTTP/1.1 200 OK"
    assert "Content-Type: text/plain" in lines
    assert "Connection: close" in lines
    assert body == b"status is Synced\r\n"


def test_reject_renders_503():
    lines, body = _split(render_response(Verdict(admit=False, reason="status is Joining")))
    assert lines[0] == "HTTP/1.1 503 Service Unavailable"
    assert b"Joining" in body


@pytest.mark.parametrize(
    "reason",
    ["status is Synced", "status is Donor/Desynced; blocking transfer", "", "probe failed: Zugriff verweigert für 'ü'"],
)
def test_content_length_matches_body_bytes(reason):
    """Content-Length equals the exact byte length of what follows the blank line."""
    lines, body = _split(render_response(Verdict(admit=False, reason=reason)))
    headers = dict(line.split(": ", 1) for line in lines[1:])
    assert int(headers["Content-Length"]) == len(body)


def test_write_response_flushes_then_sleeps():
    """Response is written and flushed before the delay."""
    stream = io.BytesIO()
    sleep = MagicMock()
    n = write_response(Verdict(admit=True, reason="status is Synced"), stream, delay_sec=0.25, sleep=sleep)
    assert stream.getvalue().startswith(b"HTTP/1.1 200 OK\r\n")
    assert n == len(stream.getvalue())
    sleep.assert_called_once_with(0.25)


def test_write_response_default_delay():
    """Default delay is the 100ms drain pause."""
    assert RESPONSE_DELAY_SEC == pytest.approx(0.1)
    sleep = MagicMock()
    write_response(Verdict(admit=False, reason="x"), io.BytesIO(), sleep=sleep)
    sleep.assert_called_once_with(RESPONSE_DELAY_SEC)


def test_write_response_zero_delay_skips_sleep():
    sleep = MagicMock()
    write_response(Verdict(admit=False, reason="x"), io.BytesIO(), delay_sec=0, sleep=sleep)
    sleep.assert_not_called()


def test_write_response_reader_hung_up():
    """A closed channel is logged and skipped, no exception and no delay."""
    stream = MagicMock()
    stream.write.side_effect = BrokenPipeError(32, "Broken pipe")
    sleep = MagicMock()
    n = write_response(Verdict(admit=True, reason="status is Synced"), stream, delay_sec=0.1, sleep=sleep)
    assert n == 0
    sleep.assert_not_called()
