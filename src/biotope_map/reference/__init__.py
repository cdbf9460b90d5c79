"""Static reference data.

Data that doesn't change with API calls: keyword tables for classification,
curated city biotopes, default map view.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from biotope_map.reference.biotopes import BIOTOPE_KEYWORDS as BIOTOPE_KEYWORDS
from biotope_map.reference.biotopes import CATEGORY_KEYWORDS as CATEGORY_KEYWORDS
from biotope_map.reference.biotopes import CITY_BIOTOPES as CITY_BIOTOPES
from biotope_map.reference.biotopes import FALLBACK_BIOTOPE as FALLBACK_BIOTOPE
from biotope_map.reference.biotopes import GENERIC_CITY_BIOTOPES as GENERIC_CITY_BIOTOPES
from biotope_map.reference.geography import CITY_ZOOM as CITY_ZOOM
from biotope_map.reference.geography import DEFAULT_CENTER as DEFAULT_CENTER
