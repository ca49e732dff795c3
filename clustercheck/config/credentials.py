"""
MySQL credential resolution.

Explicit user/password from settings win; otherwise the [client] section of
an INI option file (Debian's debian.cnf by default) supplies them. The result
is an immutable ConnectionParams handed to the probe.
"""

from __future__ import annotations

import configparser
from dataclasses import dataclass
from pathlib import Path

from clustercheck.check_logging import get_logger
from clustercheck.config.settings import ClusterCheckSettings
from clustercheck.core.exceptions import ConfigError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConnectionParams:
    """Where and as whom the status queries connect."""

    host: str
    port: int
    user: str
    password: str

    def __repr__(self) -> str:
        return f"ConnectionParams(host={self.host!r}, port={self.port!r}, user={self.user!r}, password='***')"


def _unquote(value: str | None) -> str:
    value = (value or "").strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def read_ini_credentials(path: str | Path, section: str = "client") -> tuple[str, str]:
    """Return (user, password) from an option file section. Raises ConfigError when absent."""
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Credentials file not found: {path}")

    parser = configparser.ConfigParser(interpolation=None, allow_no_value=True, strict=False)
    try:
        with open(path, encoding="utf-8") as f:
            parser.read_file(f)
    except (OSError, configparser.Error) as exc:
        raise ConfigError(f"Cannot read credentials file {path}: {exc}") from exc

    if not parser.has_section(section):
        raise ConfigError(f"Section [{section}] missing in {path}")

    user = _unquote(parser.get(section, "user", fallback=""))
    password = _unquote(parser.get(section, "password", fallback=""))
    if not user or not password:
        raise ConfigError(f"Section [{section}] in {path} must set both 'user' and 'password'")
    return user, password


def resolve_credentials(settings: ClusterCheckSettings) -> ConnectionParams:
    """Build ConnectionParams from explicit credentials or the configured INI file."""
    if settings.has_explicit_credentials:
        user, password = settings.user, settings.password
        source = "explicit"
    else:
        user, password = read_ini_credentials(settings.ini_file, settings.ini_section)
        source = settings.ini_file
    logger.debug("credentials_resolved", source=source, user=user)
    return ConnectionParams(
        host=settings.mysql_host,
        port=settings.mysql_port,
        user=user,
        password=password,
    )
