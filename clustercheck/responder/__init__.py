"""
Responder — renders a verdict as an HTTP/1.1 response on the check channel.
"""

from clustercheck.responder.http_response import (
    RESPONSE_DELAY_SEC,
    render_response,
    write_response,
)

__all__ = ["RESPONSE_DELAY_SEC", "render_response", "write_response"]
