"""Helpers for reading proxy-integration request events."""

import base64

from requests.structures import CaseInsensitiveDict


def request_method(event):
    return (event.get("httpMethod") or "GET").upper()


def request_headers(event):
    # Header names arrive lowercased on Vercel/Netlify but not from every caller
    return CaseInsensitiveDict(event.get("headers") or {})


def raw_body(event):
    """
    Return the request body exactly as received, as bytes.

    Args:
        event: Dictionary containing request details:
            - body: Request body (str or bytes)
            - isBase64Encoded: True when the platform base64-encoded the body

    Returns:
        bytes: Raw body bytes, empty when there is no body

    Raises:
        binascii.Error: If a base64-flagged body is not valid base64
            (a ValueError subclass)
    """
    body = event.get("body") or b""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    return body
