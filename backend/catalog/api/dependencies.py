"""Route Dependencies: explicit handles injected into listing routes.

Invariants:
    - The catalog source lives on app.state, built by the lifespan; there is
      no module-level client
    - Tests swap either dependency via app.dependency_overrides
"""

import random

from fastapi import Request

from catalog.core.errors import CatalogError, ErrorCategory, ErrorSeverity
from catalog.core.repository_protocols import CatalogSource


def get_catalog_source(request: Request) -> CatalogSource:
    source = getattr(request.app.state, "catalog_source", None)
    if source is None:
        raise CatalogError(
            "Catalog source not initialized", "SOURCE_NOT_READY",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, http_status=503,
        )
    return source


def get_card_rng() -> random.Random:
    """Random source for display-only card decorations."""
    return random.Random()  # nosec B311
