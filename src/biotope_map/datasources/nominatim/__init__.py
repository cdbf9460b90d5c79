"""Nominatim (OpenStreetMap) place search.

Public API:
  - search: resolve_city (city name -> CityLocation)
  - client: API URL
"""

from biotope_map.datasources.nominatim.client import SEARCH_URL
from biotope_map.datasources.nominatim.search import resolve_city

__all__ = ["SEARCH_URL", "resolve_city"]
