"""Biotope Map - city biodiversity observations on an interactive map.

Architecture::

    datasources/   External APIs (Nominatim place search, iNaturalist observations)
    reference/     Static keyword tables and curated city biotopes
    analysis/      Classification and filtering (pure, no I/O)
    renderers/     Pure data -> view models and HTML fragments
    explorer.py    Application state and the load/refilter handlers
    web.py         Local HTTP surface for the map page
    flows/         Prefect orchestration (static snapshot export)
    services/      Shared utilities (HTTP client with retry)

Data flow: nominatim -> inaturalist -> analysis -> renderers -> page
"""

__version__ = "0.1.0"

from biotope_map.config import Settings
from biotope_map.schemas import Category, FilterState, Observation

__all__ = ["Category", "FilterState", "Observation", "Settings", "__version__"]
