"""
Configuration management for clustercheck.

Loads settings from environment variables (and an optional .env file) and
resolves MySQL credentials, either given directly or read from an INI file.
"""

from clustercheck.config.credentials import ConnectionParams, resolve_credentials
from clustercheck.config.settings import ClusterCheckSettings, get_settings

__all__ = [
    "ClusterCheckSettings",
    "ConnectionParams",
    "get_settings",
    "resolve_credentials",
]
