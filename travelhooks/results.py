"""
Handler outcomes and their rendering into serverless responses.

Handlers build a Success or a Failure and render it once at the boundary.
The response shape is the proxy-integration dict used by Vercel/Netlify/
API Gateway: statusCode, headers and a string body.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Union

METHOD_NOT_ALLOWED = "method_not_allowed"
UNAUTHENTICATED = "unauthenticated"
MISCONFIGURED = "misconfigured"
BAD_REQUEST = "bad_request"
UPSTREAM_FAILURE = "upstream_failure"
PARSE_FAILURE = "parse_failure"
INTERNAL = "internal"


@dataclass(frozen=True)
class Success:
    payload: Any
    status: int = 200


@dataclass(frozen=True)
class Failure:
    kind: str
    status: int
    message: str
    # Plain-text failures send the bare message instead of {"error": ...}
    plain_text: bool = field(default=False, compare=False)


Result = Union[Success, Failure]


def method_not_allowed(plain_text=False):
    return Failure(METHOD_NOT_ALLOWED, 405, "Method Not Allowed", plain_text=plain_text)


def bad_request(message):
    return Failure(BAD_REQUEST, 400, message)


def internal_error():
    return Failure(INTERNAL, 500, "Internal server error.")


def text_response(status, body):
    return {
        "statusCode": status,
        "headers": {"Content-Type": "text/plain; charset=utf-8"},
        "body": body,
    }


def json_response(status, payload):
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def render(result):
    """
    Turn a handler outcome into a response dict.

    Args:
        result: Success or Failure

    Returns:
        dict: Response containing statusCode, headers and body
    """
    if isinstance(result, Failure):
        if result.plain_text:
            return text_response(result.status, result.message)
        return json_response(result.status, {"error": result.message})
    return json_response(result.status, result.payload)
