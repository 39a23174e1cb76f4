"""
Serverless handlers for the travel site.

- tracking_webhook: verifies and acknowledges TrackingMore shipment events.
- travel_search: proxies flight/hotel searches to the Travelpayouts API
  using server-held credentials.
"""
