"""
clustercheck — Galera cluster node health check for load balancers.

Probes the local MySQL/MariaDB node once per invocation, decides whether
the node may receive traffic, and answers with a minimal HTTP/1.1 response
(200 or 503) that HAProxy-style health checks understand.
"""

__version__ = "0.1.0"
