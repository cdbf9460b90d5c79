"""
Prefect flows.

Flows:
- snapshot: Load one city and export a static, non-interactive map page

Usage (local):
    python -m biotope_map.flows.snapshot Lucerne
    biotope-map snapshot Lucerne --category Bird

Usage (Prefect):
    prefect server start  # Optional, for dashboard
"""
