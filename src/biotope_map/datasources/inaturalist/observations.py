"""Observation fetching and parsing."""

from __future__ import annotations

import logging
from typing import Any

from biotope_map.datasources.inaturalist import client
from biotope_map.errors import TransportFailure
from biotope_map.schemas import Observation, ObservationBatch

logger = logging.getLogger(__name__)

UNKNOWN_SPECIES = "Unknown"

# =============================================================================
# Parsing
# =============================================================================


def _parse_coordinates(geojson: Any) -> tuple[float, float] | None:
    """Return (longitude, latitude) from a GeoJSON point, or None."""
    if not isinstance(geojson, dict):
        return None
    coords = geojson.get("coordinates")
    if not isinstance(coords, list | tuple) or len(coords) < 2:
        return None
    try:
        return (float(coords[0]), float(coords[1]))
    except (TypeError, ValueError):
        return None


def _photo_url(photos: Any) -> str | None:
    """First photo URL, switched from the square thumbnail to the medium size."""
    if not photos or not isinstance(photos[0], dict):
        return None
    url = photos[0].get("url")
    if not url:
        return None
    return str(url).replace("square", "medium", 1)


def _is_introduced(establishment_means: Any) -> bool:
    # Newer API responses nest the value in an object
    if isinstance(establishment_means, dict):
        establishment_means = establishment_means.get("establishment_means")
    return establishment_means == "introduced"


def parse_observation(raw: dict[str, Any]) -> Observation:
    """Normalize one raw observation record. Missing location yields ``coordinates=None``."""
    taxon = raw.get("taxon") or {}
    obs_id = raw.get("id")

    return Observation(
        id=obs_id,
        species_label=raw.get("species_guess") or taxon.get("name") or UNKNOWN_SPECIES,
        coordinates=_parse_coordinates(raw.get("geojson")),
        photo_url=_photo_url(raw.get("photos")),
        wikipedia_url=taxon.get("wikipedia_url") or None,
        url=f"{client.OBSERVATION_PAGE_URL}/{obs_id}" if obs_id is not None else None,
        is_threatened=bool(taxon.get("threatened") or False),
        is_invasive=_is_introduced(taxon.get("establishment_means")),
    )


# =============================================================================
# API Fetching
# =============================================================================


def fetch_observations(
    latitude: float,
    longitude: float,
    radius_km: float = client.DEFAULT_RADIUS_KM,
) -> ObservationBatch:
    """
    Fetch the first page of observations around a point.

    Only one page of ``MAX_PER_PAGE`` results is requested; the batch's
    ``truncated`` flag tells whether the API had more.

    Args:
        latitude: Centre latitude.
        longitude: Centre longitude.
        radius_km: Search radius in kilometres.

    Returns:
        ObservationBatch with the raw ``results`` and the API's ``total_results``.
    """
    params: dict[str, Any] = {
        "lat": latitude,
        "lng": longitude,
        "radius": radius_km,
        "per_page": client.MAX_PER_PAGE,
    }
    data = client.get_observations(params)

    results = data.get("results")
    if not isinstance(results, list):
        raise TransportFailure(client.SERVICE_NAME, ValueError("response has no results list"))

    try:
        total = int(data.get("total_results", len(results)))
    except (TypeError, ValueError):
        total = len(results)

    logger.info(
        "Fetched %d of %d observations near (%s, %s)", len(results), total, latitude, longitude
    )
    return ObservationBatch(results=results, total_results=max(total, len(results)))
