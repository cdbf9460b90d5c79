"""Classification and filtering of observations.

Dependency rule: analysis/ imports schemas and reference/ data only.
It never fetches data or produces HTML.

Modules:
  - classify: species label -> category / biotope, curated city biotopes
  - filters: filter state -> visible observations

Public API re-exported here.
"""

from biotope_map.analysis.classify import (
    annotate,
    city_biotopes,
    classify_category,
    infer_biotope,
    merged_biotopes,
)
from biotope_map.analysis.filters import apply_filters, matches

__all__ = [
    "annotate",
    "apply_filters",
    "city_biotopes",
    "classify_category",
    "infer_biotope",
    "matches",
    "merged_biotopes",
]
