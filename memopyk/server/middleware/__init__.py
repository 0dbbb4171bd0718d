"""
HTTP middleware for the MEMOPYK server.
"""

from .logfire_middleware import RequestTimingMiddleware

__all__ = ["RequestTimingMiddleware"]
