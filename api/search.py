# api/search.py

"""
Travel Search Proxy (Vercel Serverless Function)
Endpoint: /api/search

- Accepts {"type": "flights"|"hotels", "params": {...}} from the frontend.
- Calls the Travelpayouts API with TRAVELPAYOUTS_API_TOKEN and returns the data.
"""

from travelhooks.travel_search import process_search


def handler(event, context):
    # Config is read from the environment on every call
    return process_search(event)
