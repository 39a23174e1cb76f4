"""
Local development server

This Flask application mirrors the Vercel deployment:
- /api/trackingmore-webhook and /api/search run the serverless handlers
- every /api/* response carries Access-Control-Allow-Origin: *
- any other path is served from the travel/ site directory

Configuration is read from the environment (or .env) on every request,
the same way the deployed functions read it.
"""

import logging
import os

from flask import Flask, abort, request, send_from_directory

from travelhooks.config import WebhookConfig
from travelhooks.tracking_webhook import process_webhook
from travelhooks.travel_search import process_search

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# OPTIONS goes to the handlers, which answer 405 to every non-POST method
API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

app = Flask(__name__, static_folder=None)
app.config["SITE_ROOT"] = os.path.join(os.path.dirname(os.path.abspath(__file__)), "travel")


def to_event():
    """
    Format the current Flask request as a serverless proxy event.

    Returns:
        dict: Event with httpMethod, headers, raw body bytes and query parameters
    """
    return {
        "httpMethod": request.method,
        "headers": dict(request.headers),
        "body": request.get_data(),
        "queryStringParameters": dict(request.args) if request.args else {},
    }


def to_flask(result):
    return (result["body"], result["statusCode"], result.get("headers", {}))


@app.route("/api/trackingmore-webhook", methods=API_METHODS, provide_automatic_options=False)
def trackingmore_webhook():
    return to_flask(process_webhook(to_event(), WebhookConfig.from_env()))


@app.route("/api/search", methods=API_METHODS, provide_automatic_options=False)
def travel_search():
    return to_flask(process_search(to_event()))


@app.route("/", defaults={"path": ""})
@app.route("/<path:path>")
def site(path):
    # /api/* never falls through to the static site
    if path == "api" or path.startswith("api/"):
        abort(404)
    root = app.config["SITE_ROOT"]
    if not path or os.path.isdir(os.path.join(root, path)):
        path = os.path.join(path, "index.html")
    return send_from_directory(root, path)


@app.after_request
def add_cors_headers(response):
    if request.path.startswith("/api/"):
        response.headers["Access-Control-Allow-Origin"] = "*"
    return response


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5001)), debug=True)
