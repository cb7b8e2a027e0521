"""
endpoint_gateway.api

HTTP surface for the gateway.

Responsibilities:
- FastAPI app factory and router modules.
- Query/body adapters that feed the dispatcher.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: parse the inbound request, dispatch, render the envelope.
