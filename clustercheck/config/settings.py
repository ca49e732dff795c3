"""
Application settings for one health-check invocation.

Responsibilities:
- Hold connection target, credential sources, client binary, and timings.
- Build settings from CLUSTERCHECK_* environment variables with defaults.
- Validate values once so the probe never sees a half-configured target.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from clustercheck.config.env import env_float, env_int, env_str, load_clustercheck_env
from clustercheck.core.exceptions import ConfigError

DEFAULT_MYSQL_HOST = "localhost"
DEFAULT_MYSQL_PORT = 3306
DEFAULT_INI_FILE = "/etc/mysql/debian.cnf"
DEFAULT_INI_SECTION = "client"
DEFAULT_MYSQL_BIN = "/usr/bin/mysql"
DEFAULT_QUERY_TIMEOUT_SEC = 10.0
# Pause after writing the response so the reader drains it before the channel closes.
DEFAULT_RESPONSE_DELAY_SEC = 0.1
DEFAULT_PROCESS_NAMES = ("mysqld", "mariadbd")


@dataclass(frozen=True)
class ClusterCheckSettings:
    """Resolved configuration for a single check."""

    mysql_host: str = DEFAULT_MYSQL_HOST
    mysql_port: int = DEFAULT_MYSQL_PORT
    user: str = ""
    password: str = ""
    """Used only when both user and password are set; otherwise the INI file is read."""
    ini_file: str = DEFAULT_INI_FILE
    ini_section: str = DEFAULT_INI_SECTION
    mysql_bin: str = DEFAULT_MYSQL_BIN
    query_timeout_sec: float = DEFAULT_QUERY_TIMEOUT_SEC
    response_delay_sec: float = DEFAULT_RESPONSE_DELAY_SEC
    process_names: tuple[str, ...] = DEFAULT_PROCESS_NAMES

    def __post_init__(self) -> None:
        if not self.mysql_host:
            raise ConfigError("mysql_host must be non-empty")
        if not 0 < self.mysql_port < 65536:
            raise ConfigError(f"mysql_port out of range: {self.mysql_port}")
        if self.query_timeout_sec <= 0:
            raise ConfigError(f"query_timeout_sec must be positive, got {self.query_timeout_sec}")
        if self.response_delay_sec < 0:
            raise ConfigError(f"response_delay_sec must be >= 0, got {self.response_delay_sec}")
        if not self.process_names:
            raise ConfigError("process_names must list at least one process")

    @property
    def has_explicit_credentials(self) -> bool:
        return bool(self.user) and bool(self.password)

    def with_overrides(self, **overrides: Any) -> ClusterCheckSettings:
        """Return a copy with every non-None override applied (CLI flags win over env)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def _parse_process_names(raw: str) -> tuple[str, ...]:
    return tuple(p.strip() for p in raw.split(",") if p.strip())


def get_settings() -> ClusterCheckSettings:
    """
    Return settings from the environment.

    Reads CLUSTERCHECK_MYSQL_HOST, CLUSTERCHECK_MYSQL_PORT, CLUSTERCHECK_MYSQL_USER,
    CLUSTERCHECK_MYSQL_PASSWORD, CLUSTERCHECK_INI_FILE, CLUSTERCHECK_INI_SECTION,
    CLUSTERCHECK_MYSQL_BIN, CLUSTERCHECK_QUERY_TIMEOUT, CLUSTERCHECK_RESPONSE_DELAY
    and CLUSTERCHECK_PROCESS_NAMES (comma-separated).
    """
    load_clustercheck_env()
    try:
        return ClusterCheckSettings(
            mysql_host=env_str("MYSQL_HOST", DEFAULT_MYSQL_HOST),
            mysql_port=env_int("MYSQL_PORT", DEFAULT_MYSQL_PORT),
            user=env_str("MYSQL_USER"),
            password=env_str("MYSQL_PASSWORD"),
            ini_file=env_str("INI_FILE", DEFAULT_INI_FILE),
            ini_section=env_str("INI_SECTION", DEFAULT_INI_SECTION),
            mysql_bin=env_str("MYSQL_BIN", DEFAULT_MYSQL_BIN),
            query_timeout_sec=env_float("QUERY_TIMEOUT", DEFAULT_QUERY_TIMEOUT_SEC),
            response_delay_sec=env_float("RESPONSE_DELAY", DEFAULT_RESPONSE_DELAY_SEC),
            process_names=_parse_process_names(env_str("PROCESS_NAMES"))
            or DEFAULT_PROCESS_NAMES,
        )
    except ValueError as exc:
        raise ConfigError(f"Invalid numeric setting in environment: {exc}") from exc
