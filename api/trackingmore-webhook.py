# api/trackingmore-webhook.py

"""
TrackingMore Webhook Receiver (Vercel Serverless Function)
Endpoint: /api/trackingmore-webhook

- Verifies the x-tmore-signature HMAC using TRACKINGMORE_WEBHOOK_SECRET.
- Logs delivered packages and acknowledges the event.
"""

from travelhooks.config import WebhookConfig
from travelhooks.tracking_webhook import process_webhook


def handler(event, context):
    # Secret is read per invocation so rotated values apply without a redeploy
    return process_webhook(event, WebhookConfig.from_env())
