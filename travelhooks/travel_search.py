"""
Travelpayouts Search Proxy

Receives a search from the site frontend, makes the call to the
Aviasales/Travelpayouts API with the server-held token and returns the data.
The token never leaves the server; upstream error bodies are logged, not
relayed.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from travelhooks import results
from travelhooks.config import SearchConfig
from travelhooks.events import raw_body, request_method
from travelhooks.results import Failure, Success

logger = logging.getLogger(__name__)

FLIGHTS_PATH = "/v1/prices/monthly"
HOTELS_PATH = "/data/hotels_search_by_cityid"
CURRENCY = "usd"


@dataclass(frozen=True)
class FlightsSearch:
    origin: str
    destination: str
    departure_date: str
    return_date: Optional[str] = None


@dataclass(frozen=True)
class HotelsSearch:
    destination: str
    check_in_date: str
    check_out_date: str


def _missing(params, names):
    return [name for name in names if not params.get(name)]


def parse_search_request(payload):
    """
    Validate a {type, params} request body into a search variant.

    Args:
        payload: Decoded JSON request body

    Returns:
        Success wrapping FlightsSearch or HotelsSearch, or a 400 Failure
    """
    if not isinstance(payload, dict):
        return results.bad_request("Invalid request body.")

    search_type = payload.get("type")
    params = payload.get("params")
    if not isinstance(params, dict):
        params = {}

    if search_type == "flights":
        if _missing(params, ("origin", "destination", "departure_date")):
            return results.bad_request("Missing flight search parameters.")
        return Success(FlightsSearch(
            origin=params["origin"],
            destination=params["destination"],
            departure_date=params["departure_date"],
            return_date=params.get("return_date") or None,
        ))

    if search_type == "hotels":
        if _missing(params, ("destination", "check_in_date", "check_out_date")):
            return results.bad_request("Missing hotel search parameters.")
        return Success(HotelsSearch(
            destination=params["destination"],
            check_in_date=params["check_in_date"],
            check_out_date=params["check_out_date"],
        ))

    return results.bad_request("Invalid search type.")


def build_upstream_request(search, config):
    """
    Build the Travelpayouts URL and query parameters for a search.

    Args:
        search: FlightsSearch or HotelsSearch
        config: SearchConfig with the API token and base URL

    Returns:
        tuple: (url, params) for requests.get
    """
    if isinstance(search, FlightsSearch):
        # The monthly prices endpoint takes no dates; they stay on the variant
        url = f"{config.base_url}{FLIGHTS_PATH}"
        params = {
            "currency": CURRENCY,
            "origin": search.origin,
            "destination": search.destination,
            "token": config.api_token,
        }
    elif isinstance(search, HotelsSearch):
        url = f"{config.base_url}{HOTELS_PATH}"
        params = {
            "locationId": search.destination,
            "checkIn": search.check_in_date,
            "checkOut": search.check_out_date,
            "token": config.api_token,
        }
    else:
        raise TypeError(f"Unsupported search: {search!r}")
    return url, params


def fetch_results(search, config, session):
    """
    Make the single upstream call for a validated search.

    Args:
        search: FlightsSearch or HotelsSearch
        config: SearchConfig
        session: requests.Session (or anything with a compatible get)

    Returns:
        Success with {"results": data}, or a Failure carrying the upstream status

    Raises:
        requests.exceptions.RequestException: If the upstream call fails
        ValueError: If a 2xx upstream body is not JSON
    """
    url, params = build_upstream_request(search, config)
    headers = {
        "X-Access-Token": config.api_token,
        "Content-Type": "application/json",
    }
    resp = session.get(url, params=params, headers=headers, timeout=config.timeout)

    # resp.ok is true for 3xx; anything outside 2xx is an upstream failure
    if not 200 <= resp.status_code < 300:
        logger.error("❌ Travelpayouts API Error (%s): %s", resp.status_code, resp.text)
        return Failure(
            results.UPSTREAM_FAILURE, resp.status_code,
            "Failed to fetch data from the Aviasales API.",
        )

    return Success({"results": resp.json()})


def misconfigured(message):
    return Failure(results.MISCONFIGURED, 500, message)


def proxy_search(event, config, session):
    if request_method(event) != "POST":
        return results.method_not_allowed()

    if config is None:
        try:
            config = SearchConfig.from_env()
        except ValueError as e:
            logger.error("❌ Invalid Travelpayouts configuration: %s", e)
            return misconfigured("Server misconfiguration: TRAVELPAYOUTS_TIMEOUT is not a number.")

    if not config.is_configured:
        logger.error("❌ Travelpayouts credentials are not set.")
        return misconfigured("Server misconfiguration: API_TOKEN and PARTNER_ID are not set.")

    try:
        payload = json.loads(raw_body(event) or b"null")
    except ValueError:
        return results.bad_request("Invalid request body.")

    parsed = parse_search_request(payload)
    if isinstance(parsed, Failure):
        return parsed
    return fetch_results(parsed.payload, config, session)


def process_search(event, config=None, session=None):
    """
    Main search proxy function.

    Args:
        event: Dictionary containing request details:
            - httpMethod: Only POST is accepted
            - body: JSON {"type": "flights"|"hotels", "params": {...}}
        config: SearchConfig with Travelpayouts credentials; read from the
            environment when omitted
        session: Optional requests.Session; a new one is used per call otherwise

    Returns:
        dict: Response containing statusCode, headers and body
    """
    try:
        if session is None:
            with requests.Session() as session:
                result = proxy_search(event, config, session)
        else:
            result = proxy_search(event, config, session)
    except Exception:
        logger.exception("❌ Server error")
        result = results.internal_error()
    return results.render(result)
