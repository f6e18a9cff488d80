"""The web application and its command-line entry point."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, Response, request

from .cep_service import CEPService
from .handlers import WeatherHandler
from .weather_service import WeatherService

_log = logging.getLogger(__name__)

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Origin, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization"
    ),
}


def create_app(handler: WeatherHandler | None = None) -> Flask:
    """Build the application; without *handler*, live services are used."""
    if handler is None:
        handler = WeatherHandler(CEPService(), WeatherService.from_env())

    app = Flask(__name__)

    @app.before_request
    def _preflight() -> Response | None:
        if request.method == "OPTIONS":
            return Response(status=204)
        return None

    @app.after_request
    def _cors(response: Response) -> Response:
        for name, value in _CORS_HEADERS.items():
            response.headers[name] = value
        return response

    app.add_url_rule("/health", "health", handler.health_check, methods=["GET"])

    def temperature(cep: str) -> Response:
        return handler.get_temperature_by_cep(cep)

    app.add_url_rule("/temperature/<cep>", "temperature", temperature, methods=["GET"])
    return app


def main(argv: list[str] | None = None) -> int:
    """Load settings from .env and the environment, then serve the API."""
    parser = argparse.ArgumentParser(
        prog="weathercep",
        description="Serve current temperatures for Brazilian postal codes.",
    )
    parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    if load_dotenv(Path.cwd() / ".env"):
        _log.info(".env file loaded")
    else:
        _log.info(".env file not found or empty; using system environment variables")

    if os.environ.get("GIN_MODE") == "release":
        logging.getLogger("werkzeug").setLevel(logging.WARNING)

    app = create_app()

    port_text = os.environ.get("PORT") or "8080"
    try:
        port = int(port_text)
    except ValueError:
        _log.error("error starting server: invalid port %r", port_text)
        return 1

    _log.info("server starting on port %s", port)
    _log.info("available endpoints:")
    _log.info("  GET /health - health check")
    _log.info("  GET /temperature/:cep - temperature by postal code")

    try:
        app.run(host="0.0.0.0", port=port)
    except OSError as err:
        _log.error("error starting server: %s", err)
        return 1
    return 0