"""Resolve a city name to coordinates."""

from __future__ import annotations

import logging
from typing import Any

import requests

from biotope_map.datasources.nominatim.client import SEARCH_URL, SERVICE_NAME
from biotope_map.errors import CityNotFound, TransportFailure
from biotope_map.schemas import CityLocation
from biotope_map.services.http import session

logger = logging.getLogger(__name__)


def resolve_city(name: str) -> CityLocation:
    """
    Look up ``name`` and return the first matching place.

    Raises:
        CityNotFound: The search returned an empty list.
        TransportFailure: Network error, HTTP error status or malformed response.
    """
    try:
        resp = session.get(SEARCH_URL, params={"format": "json", "q": name})
        resp.raise_for_status()
        results: Any = resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise TransportFailure(SERVICE_NAME, exc) from exc

    if not isinstance(results, list):
        raise TransportFailure(SERVICE_NAME, ValueError("expected a JSON array"))
    if not results:
        raise CityNotFound(name)

    first = results[0]
    try:
        lat = float(first["lat"])
        lon = float(first["lon"])
    except (KeyError, TypeError, ValueError) as exc:
        raise TransportFailure(SERVICE_NAME, exc) from exc

    logger.debug("Resolved %r to (%s, %s)", name, lat, lon)
    return CityLocation(
        name=name,
        display_name=first.get("display_name") or name,
        latitude=lat,
        longitude=lon,
    )
