"""iNaturalist observation data source.

Fetches the first page of observations within a radius of a coordinate and
normalizes each record into an ``Observation``.

Public API:
  - client: API URLs, page size, low-level GET
  - observations: fetch_observations, parse_observation
"""

from biotope_map.datasources.inaturalist.client import DEFAULT_RADIUS_KM, MAX_PER_PAGE
from biotope_map.datasources.inaturalist.observations import (
    fetch_observations,
    parse_observation,
)

__all__ = [
    "DEFAULT_RADIUS_KM",
    "MAX_PER_PAGE",
    "fetch_observations",
    "parse_observation",
]
