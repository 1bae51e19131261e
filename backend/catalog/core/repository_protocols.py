"""Boundary Protocols: contracts between the listing core and its data sources.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Sources return ordered sequences of records and raise on failure
    - Sources do not mutate their inputs and are safe to call repeatedly

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - The source is an explicit handle passed into each controller, never a
      module-level singleton
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol, TypeVar

from catalog.core.records import Course, School

R = TypeVar("R")

# A zero-argument coroutine factory, e.g. `source.fetch_courses`.
FetchFn = Callable[[], Awaitable[Sequence[R]]]


class CatalogSource(Protocol):
    """Contract for the catalog data-access layer: implemented by infrastructure."""
    async def fetch_courses(self) -> Sequence[Course]: ...
    async def fetch_schools(self) -> Sequence[School]: ...
