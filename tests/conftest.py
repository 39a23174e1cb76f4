"""Shared fixtures for handler tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from travelhooks.config import SearchConfig, WebhookConfig
from travelhooks.tracking_webhook import compute_signature

SECRET = "tmore-test-secret"


@pytest.fixture
def webhook_config():
    return WebhookConfig(secret=SECRET)


@pytest.fixture
def search_config():
    return SearchConfig(api_token="tp-token", partner_id="12345", base_url="https://api.test")


@pytest.fixture
def signed_event():
    """Build a signed POST event for the webhook handler."""

    def _build(body, secret=SECRET, method="POST"):
        return {
            "httpMethod": method,
            "headers": {"x-tmore-signature": compute_signature(body, secret)},
            "body": body,
        }

    return _build


@pytest.fixture
def search_event():
    def _build(payload, method="POST"):
        return {"httpMethod": method, "headers": {}, "body": json.dumps(payload)}

    return _build


def make_response(status, payload=None, text=None):
    """Build a real requests.Response as the upstream would return it."""
    response = requests.Response()
    response.status_code = status
    response.encoding = "utf-8"
    response.url = "https://api.test/"
    if payload is not None:
        text = json.dumps(payload)
    response._content = (text or "").encode("utf-8")
    return response


@pytest.fixture
def upstream():
    """Mock requests session; use respond() to shape the upstream reply."""
    session = MagicMock()
    session.get.return_value = make_response(200, {})
    return session


def respond(session, status, payload=None, text=None):
    session.get.return_value = make_response(status, payload, text)
