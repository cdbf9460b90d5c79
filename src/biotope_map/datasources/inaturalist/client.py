"""
iNaturalist API client.

Low-level HTTP client for the iNaturalist API v1.

API docs: https://api.inaturalist.org/v1/docs/
"""

from __future__ import annotations

from typing import Any

import requests

from biotope_map.errors import TransportFailure
from biotope_map.services.http import session

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.inaturalist.org/v1"
OBSERVATION_PAGE_URL = "https://www.inaturalist.org/observations"
SERVICE_NAME = "iNaturalist"

MAX_PER_PAGE = 200  # API maximum for /observations; only the first page is fetched
DEFAULT_RADIUS_KM = 20


def _get(endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
    """GET an API v1 endpoint and decode the JSON object."""
    url = f"{API_BASE}/{endpoint}"
    try:
        resp = session.get(url, params=params or {})
        resp.raise_for_status()
        data: Any = resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise TransportFailure(SERVICE_NAME, exc) from exc
    if not isinstance(data, dict):
        raise TransportFailure(SERVICE_NAME, ValueError("expected a JSON object"))
    return data


def get_observations(params: dict[str, Any]) -> dict[str, Any]:
    """GET /observations — search observations."""
    return _get("observations", params)
