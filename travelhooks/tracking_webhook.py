"""
TrackingMore Webhook Handler

This module contains the logic for receiving TrackingMore shipment events:
- Verifies the HMAC-SHA256 signature in the x-tmore-signature header
- Parses the verified payload
- Logs packages that have been delivered

The shared secret is passed in through WebhookConfig.
"""

import hashlib
import hmac
import json
import logging

from travelhooks import results
from travelhooks.events import raw_body, request_headers, request_method
from travelhooks.results import Failure, Success

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-tmore-signature"


def compute_signature(body, secret):
    """
    Compute the hex HMAC-SHA256 digest TrackingMore sends with each event.

    Args:
        body: Raw request body bytes
        secret: Webhook shared secret

    Returns:
        str: Lowercase hex digest
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    return hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


def verify_signature(body, signature, secret):
    """
    Verify a TrackingMore webhook signature.

    Args:
        body: Raw request body bytes, before any JSON parsing
        signature: Hex digest from the x-tmore-signature header
        secret: Webhook shared secret

    Returns:
        bool: True if signature is valid, False otherwise
    """
    if not signature or not secret:
        return False
    computed = compute_signature(body, secret)
    # Header values may carry non-ASCII characters; compare as bytes
    return hmac.compare_digest(computed.encode(), signature.encode("utf-8", "surrogatepass"))


def handle_event(tracking_data):
    logger.info("Received TrackingMore Webhook Event: %s", tracking_data)
    if tracking_data.get("status") == "delivered":
        logger.info("📦 Package %s has been delivered!", tracking_data.get("tracking_number"))


def verify_and_handle(event, config):
    if request_method(event) != "POST":
        return results.method_not_allowed(plain_text=True)

    signature = request_headers(event).get(SIGNATURE_HEADER)
    if not signature or not config.secret:
        logger.error("❌ Missing signature or secret key.")
        return Failure(
            results.UNAUTHENTICATED, 401,
            "Unauthorized: Missing signature or secret.", plain_text=True,
        )

    try:
        body = raw_body(event)
    except ValueError as e:
        logger.error("❌ Webhook processing failed: undecodable body: %s", e)
        return Failure(results.PARSE_FAILURE, 500, "Failed to process webhook")

    if not verify_signature(body, signature, config.secret):
        logger.error("❌ Invalid webhook signature.")
        return Failure(
            results.UNAUTHENTICATED, 401,
            "Unauthorized: Invalid signature.", plain_text=True,
        )

    try:
        tracking_data = json.loads(body)
    except ValueError as e:
        logger.error("❌ Webhook processing failed: %s", e)
        return Failure(results.PARSE_FAILURE, 500, "Failed to process webhook")
    if not isinstance(tracking_data, dict):
        logger.error("❌ Webhook processing failed: payload is not a JSON object")
        return Failure(results.PARSE_FAILURE, 500, "Failed to process webhook")

    logger.info("✅ Webhook Signature Verified.")
    handle_event(tracking_data)
    return Success({"message": "Webhook received and verified."})


def process_webhook(event, config):
    """
    Main webhook processing function.

    Args:
        event: Dictionary containing request details:
            - httpMethod: Only POST is accepted
            - headers: Request headers, including x-tmore-signature
            - body: Raw JSON tracking payload
            - isBase64Encoded: Optional, set when body is base64-encoded
        config: WebhookConfig holding the shared secret

    Returns:
        dict: Response containing statusCode, headers and body
    """
    return results.render(verify_and_handle(event, config))
