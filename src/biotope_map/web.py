"""
Local HTTP surface for the map page.

Routes::

    GET /                    map page (interactive)
    GET /api/city            ?name=<city>&category=..&threatened=1&invasive=1
    GET /api/observations    ?category=..&threatened=1&invasive=1

API responses are JSON view models; failures are ``{"error", "kind"}``
objects with a 4xx/5xx status, which the page shows in an alert. A
``stale_load`` conflict is dropped silently: the newer load draws its own view.
"""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import parse_qs, urlparse

from biotope_map import explorer
from biotope_map.datasources.inaturalist import DEFAULT_RADIUS_KM
from biotope_map.errors import (
    BiotopeMapError,
    CityNotFound,
    EmptyInput,
    StaleLoad,
    TransportFailure,
)
from biotope_map.renderers.page import build_page_html
from biotope_map.schemas import FilterState

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[BiotopeMapError], HTTPStatus] = {
    EmptyInput: HTTPStatus.BAD_REQUEST,
    CityNotFound: HTTPStatus.NOT_FOUND,
    StaleLoad: HTTPStatus.CONFLICT,
    TransportFailure: HTTPStatus.BAD_GATEWAY,
}


class MapServer(ThreadingHTTPServer):
    """Threaded server owning the application state shared by all requests."""

    daemon_threads = True

    def __init__(
        self,
        address: tuple[str, int],
        state: explorer.AppState | None = None,
        *,
        radius_km: float = DEFAULT_RADIUS_KM,
    ) -> None:
        super().__init__(address, MapRequestHandler)
        self.state = state or explorer.AppState()
        self.radius_km = radius_km


class MapRequestHandler(BaseHTTPRequestHandler):
    server: MapServer

    def _send(self, body: bytes, content_type: str, status: int = HTTPStatus.OK) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(body)

    def _send_html(self, html: str, status: int = HTTPStatus.OK) -> None:
        self._send(html.encode("utf-8"), "text/html; charset=utf-8", status)

    def _send_json(self, payload: Any, status: int = HTTPStatus.OK) -> None:
        self._send(json.dumps(payload).encode("utf-8"), "application/json", status)

    def _send_error(self, exc: BiotopeMapError) -> None:
        status = ERROR_STATUS.get(type(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
        logger.warning("%s: %s", exc.kind, exc)
        self._send_json({"error": str(exc), "kind": exc.kind}, status)

    def do_GET(self) -> None:  # noqa: N802
        parsed = urlparse(self.path)
        query = parse_qs(parsed.query)

        if parsed.path == "/":
            self._send_html(build_page_html(interactive=True))
            return

        try:
            if parsed.path == "/api/city":
                name = query.get("name", [""])[-1]
                view = explorer.load_city(
                    self.server.state,
                    name,
                    FilterState.from_query(query),
                    radius_km=self.server.radius_km,
                )
            elif parsed.path == "/api/observations":
                view = explorer.refilter(self.server.state, FilterState.from_query(query))
            else:
                self._send_json({"error": "Not found", "kind": "not_found"}, HTTPStatus.NOT_FOUND)
                return
        except BiotopeMapError as exc:
            self._send_error(exc)
            return

        self._send_json(view.model_dump(mode="json"))

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


def create_server(
    host: str,
    port: int,
    *,
    radius_km: float = DEFAULT_RADIUS_KM,
) -> MapServer:
    """Bind a server with a fresh application state."""
    return MapServer((host, port), radius_km=radius_km)
