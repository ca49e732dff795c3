"""
Application-level exceptions.

Responsibilities:
- Separate configuration problems from probe failures so the runner can pick
  the exit status.
- Keep a failed query distinct from a valid-but-unhealthy node state; a
  QueryError is never turned into an empty state value.
"""

from __future__ import annotations


class ClusterCheckError(Exception):
    """Base class for all clustercheck errors."""


class ConfigError(ClusterCheckError):
    """Raised when settings or credentials are invalid or missing."""


class ProbeError(ClusterCheckError):
    """Raised when the node could not be observed."""


class QueryError(ProbeError):
    """Raised when a status query against the running engine fails."""

    def __init__(self, query: str, message: str) -> None:
        self.query = query
        self.message = message
        super().__init__(f"{message} ({query})")
