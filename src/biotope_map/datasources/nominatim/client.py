"""Nominatim API constants.

API docs: https://nominatim.org/release-docs/latest/api/Search/
Usage policy: https://operations.osmfoundation.org/policies/nominatim/
(requires an identifying User-Agent, which the shared session sets)
"""

SEARCH_URL = "https://nominatim.openstreetmap.org/search"
SERVICE_NAME = "Nominatim"
