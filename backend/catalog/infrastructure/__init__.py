"""Infrastructure Layer: upstream API clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All upstream failures mapped to CatalogAPIError (core/errors.py)
"""
