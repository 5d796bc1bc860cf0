"""Timeout constants - no more magic numbers!"""

# Wall-clock deadline for a research query before the fallback view is shown
QUERY_DEADLINE = 15.0

# Network timeouts
DEFAULT_HTTP_CONNECT_TIMEOUT = 10.0
DEFAULT_HTTP_REQUEST_TIMEOUT = 120.0

__all__ = [
    "QUERY_DEADLINE",
    "DEFAULT_HTTP_CONNECT_TIMEOUT",
    "DEFAULT_HTTP_REQUEST_TIMEOUT",
]
