"""
Status queries through the mysql command-line client.

Runs one non-interactive `mysql -N --silent --raw -e <query>` per value and
returns the value column of the first row. The password travels in the
MYSQL_PWD environment variable of the child, never on its command line.
Any failure raises QueryError; an empty result is a failure, not "".
"""

from __future__ import annotations

import os
import subprocess
from typing import Callable

from clustercheck.check_logging import get_logger
from clustercheck.config.credentials import ConnectionParams
from clustercheck.config.settings import DEFAULT_MYSQL_BIN, DEFAULT_QUERY_TIMEOUT_SEC
from clustercheck.core.exceptions import QueryError

logger = get_logger(__name__)

MAX_ERROR_LENGTH = 200


def extract_value(output: str) -> str | None:
    """
    Return the value column of the first non-empty output row.

    `SHOW STATUS LIKE ...` rows are "<name>\\t<value>"; `SELECT @@var` rows are
    just "<value>". None when the query produced no rows.
    """
    for line in output.splitlines():
        if not line.strip():
            continue
        fields = line.split("\t")
        return fields[1].strip() if len(fields) > 1 else fields[0].strip()
    return None


def _first_line(text: str) -> str:
    line = (text or "").strip().splitlines()[0] if (text or "").strip() else ""
    if len(line) > MAX_ERROR_LENGTH:
        return line[: MAX_ERROR_LENGTH - 3] + "..."
    return line


class MySQLClient:
    """Runs read-only status queries against one MySQL/MariaDB server."""

    def __init__(
        self,
        params: ConnectionParams,
        mysql_bin: str = DEFAULT_MYSQL_BIN,
        timeout_sec: float = DEFAULT_QUERY_TIMEOUT_SEC,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self._params = params
        self._mysql_bin = mysql_bin
        self._timeout_sec = timeout_sec
        self._run = runner

    def build_command(self, query: str) -> list[str]:
        return [
            self._mysql_bin,
            f"--host={self._params.host}",
            f"--port={self._params.port}",
            f"--user={self._params.user}",
            "--silent",
            "--raw",
            "-N",
            "-e",
            query,
        ]

    def _child_env(self) -> dict[str, str]:
        env = dict(os.environ)
        env["MYSQL_PWD"] = self._params.password
        return env

    def query_value(self, query: str) -> str:
        """Run query and return its value column. Raises QueryError on any failure."""
        cmd = self.build_command(query)
        try:
            result = self._run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout_sec,
                env=self._child_env(),
            )
        except subprocess.TimeoutExpired as e:
            logger.error("mysql_query_timeout", query=query, timeout=self._timeout_sec)
            raise QueryError(query, f"timed out after {self._timeout_sec}s") from e
        except OSError as e:
            logger.error("mysql_client_unavailable", mysql_bin=self._mysql_bin, error=str(e))
            raise QueryError(query, f"cannot run {self._mysql_bin}: {e}") from e

        if result.returncode != 0:
            err = _first_line(result.stderr) or f"exit code {result.returncode}"
            logger.error("mysql_query_failed", query=query, returncode=result.returncode, error=err)
            raise QueryError(query, err)

        value = extract_value(result.stdout or "")
        if value is None:
            logger.error("mysql_query_empty", query=query)
            raise QueryError(query, "query returned no rows")
        logger.debug("mysql_query_ok", query=query, value=value)
        return value
