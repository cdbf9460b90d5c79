"""Map view defaults."""

from __future__ import annotations

# Lucerne, shown before any city is loaded
DEFAULT_CENTER: tuple[float, float] = (47.0502, 8.3093)

# Zoom used for the initial view and after every successful city load
CITY_ZOOM = 12

TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = "&copy; OSM contributors"
TILE_MAX_ZOOM = 19
