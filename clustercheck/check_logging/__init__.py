"""
Structured logging for clustercheck.

Use get_logger() in every module; output never touches stdout, which
carries the HTTP response read by the load balancer.
"""

from clustercheck.check_logging.logger import configure_structlog, get_logger

__all__ = ["configure_structlog", "get_logger"]
