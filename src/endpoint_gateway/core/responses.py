"""
endpoint_gateway.core.responses

Catalog of canned response envelopes shared by the whole process.

Descriptions are kept byte-for-byte with the wire format existing clients expect.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from endpoint_gateway.core.envelope import ResponseEnvelope, create_response

SUCCESS = create_response(200, "Success", "The request has succeeded.")

CREATED = create_response(
    201,
    "Created",
    "The request has been fulfilled and has resulted in one or more new resources being created.",
)

NO_CONTENT = create_response(
    204,
    "No Content",
    "The server successfully processed the request and is not returning any content.",
)

BAD_REQUEST = create_response(
    400,
    "Bad Request",
    "The server could not understand the request due to invalid syntax.",
)

UNAUTHORIZED = create_response(
    401,
    "Unauthorized",
    "The client must authenticate itself to get the requestedApiResponse.",
)

FORBIDDEN = create_response(
    403,
    "Forbidden",
    "The client does not have access rights to the content.",
)

NOT_FOUND = create_response(
    404,
    "Not Found",
    "The server cannot find the requested resource.",
)

METHOD_NOT_ALLOWED = create_response(
    405,
    "Method Not Allowed",
    "The request method is known by the server but has been disabled and cannot be used.",
)

INTERNAL_SERVER_ERROR = create_response(
    500,
    "Internal Server Error",
    "The server has encountered a situation it doesn't know how to handle.",
)

CANNED_RESPONSES: Mapping[int, ResponseEnvelope] = MappingProxyType(
    {
        r.status_code: r
        for r in (
            SUCCESS,
            CREATED,
            NO_CONTENT,
            BAD_REQUEST,
            UNAUTHORIZED,
            FORBIDDEN,
            NOT_FOUND,
            METHOD_NOT_ALLOWED,
            INTERNAL_SERVER_ERROR,
        )
    }
)
