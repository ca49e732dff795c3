"""
Test that check_logging can be imported without circular import, logger works,
and nothing is written to stdout (the HTTP response channel).
"""

from __future__ import annotations

import io
import json
import logging


def test_logging_import():
    """Import get_logger from check_logging and use the logger."""
    from clustercheck.check_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")


def test_logging_never_writes_stdout(capsys):
    """Log lines go to the configured sink, never stdout; passwords are masked."""
    import structlog

    from clustercheck.check_logging import configure_structlog, get_logger

    saved = structlog.get_config()
    sink = io.StringIO()
    configure_structlog(level=logging.DEBUG, fmt="json", stream=sink)
    try:
        get_logger("test").error("stdout_guard", password="hunter2", host="db1")
        assert capsys.readouterr().out == ""
        record = json.loads(sink.getvalue().strip())
        assert record["event_type"] == "stdout_guard"
        assert record["host"] == "db1"
        assert record["password"] == "***"
        assert "timestamp" in record
    finally:
        structlog.configure(**saved)


def test_unwritable_log_file_falls_back_to_stderr(tmp_path, monkeypatch, capsys):
    """A LOG_FILE in a missing directory does not break import or configuration; stderr is used."""
    import structlog

    from clustercheck.check_logging import configure_structlog
    from clustercheck.check_logging import logger as logger_module

    missing = str(tmp_path / "nodir" / "clustercheck.log")
    stream, error = logger_module._log_stream(missing)
    assert stream is logger_module.sys.stderr
    assert error

    saved = structlog.get_config()
    monkeypatch.setattr(logger_module, "LOG_FILE", missing)
    try:
        configure_structlog(level=logging.DEBUG, fmt="json")
        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event_type"] == "log_file_unavailable"
        assert record["log_file"] == missing
    finally:
        structlog.configure(**saved)
