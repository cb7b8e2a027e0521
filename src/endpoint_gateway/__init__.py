"""
endpoint_gateway

Top-level package for the endpoint gateway: a flat name-to-handler request
dispatcher with token authentication, role checks and uniform response envelopes.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; import `endpoint_gateway.core` for the dispatch API.
