"""
endpoint_gateway.auth

Authentication package.

Responsibilities:
- JWT helpers and validation.
- The default `JwtAuthenticator` callback used by the dispatcher.
"""

# Package marker.
