"""
Configuration for the serverless handlers.

Values come from environment variables (Vercel project settings in
production, a local .env file in development). Each handler receives its
config explicitly so tests never depend on process state.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE = "https://api.travelpayouts.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class WebhookConfig:
    """Shared secret used to sign TrackingMore webhook deliveries."""

    secret: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        return cls(secret=environ.get("TRACKINGMORE_WEBHOOK_SECRET") or None)


@dataclass(frozen=True)
class SearchConfig:
    """Travelpayouts credentials and endpoint settings."""

    api_token: Optional[str] = None
    partner_id: Optional[str] = None
    base_url: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT

    @property
    def is_configured(self):
        return bool(self.api_token and self.partner_id)

    @classmethod
    def from_env(cls, environ=None):
        """
        Build the proxy config from environment variables.

        Args:
            environ: Mapping to read from; defaults to os.environ

        Returns:
            SearchConfig: Credentials may be None when unset; the handler
            reports that as a misconfiguration.

        Raises:
            ValueError: If TRAVELPAYOUTS_TIMEOUT is not a number
        """
        environ = os.environ if environ is None else environ
        return cls(
            api_token=environ.get("TRAVELPAYOUTS_API_TOKEN") or None,
            partner_id=environ.get("TRAVELPAYOUTS_PARTNER_ID") or None,
            base_url=(environ.get("TRAVELPAYOUTS_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
            timeout=float(environ.get("TRAVELPAYOUTS_TIMEOUT") or DEFAULT_TIMEOUT),
        )
