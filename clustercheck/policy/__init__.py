"""
Admission policy — decides whether the load balancer may route to this node.
"""

from clustercheck.policy.admission import (
    Verdict,
    decide,
    decide_probe_result,
    verdict_for_failure,
)

__all__ = ["Verdict", "decide", "decide_probe_result", "verdict_for_failure"]
