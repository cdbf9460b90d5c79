"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, low-level GET
    └── {feature}.py      # Fetch/parse functions (one per endpoint/concept)

Fetch functions use the shared session from ``services/http.py`` and turn
transport or decoding problems into ``errors.TransportFailure``.

- nominatim/    Place search (city name -> coordinates)
- inaturalist/  Observation search around a coordinate
"""
