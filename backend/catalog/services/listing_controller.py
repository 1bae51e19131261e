"""Listing Controller: loader + filter criteria + derived view state for one section.

Invariants:
    - view_state is recomputed after every collection change and every
      criteria change; there is no cached result across criteria changes
    - Criteria change only through set_category / set_search_term / reset
    - Subscribers receive each fresh ViewState and cannot mutate controller state
    - unmount() disposes the loader: an in-flight fetch never updates the view;
      a later mount() runs a fresh fetch cycle
    - A listener that raises is logged and skipped; the others still run

Design Decisions:
    - The data source is passed in explicitly (no singleton API client);
      factory helpers bind the right fetch method and profile
    - Recompute eagerly on change rather than lazily on read: subscribers
      (the rendering layer) are push-driven
"""

import logging
from collections.abc import Callable
from dataclasses import replace

from catalog.core.domain_types import ALL_CATEGORIES, ListingStatus
from catalog.core.filter_resources import build_view_state
from catalog.core.listing_state import (
    COURSE_PROFILE, SCHOOL_PROFILE, FilterCriteria, ListingProfile, ViewState,
)
from catalog.core.records import ResourceRecord
from catalog.core.repository_protocols import CatalogSource, FetchFn
from catalog.services.resource_loader import ResourceLoader

logger = logging.getLogger(__name__)

COURSE_PREVIEW_LIMIT = 6

ViewListener = Callable[[ViewState], None]


class ListingController:
    """Filterable resource listing for one UI section."""

    def __init__(
        self,
        fetch: FetchFn[ResourceRecord],
        profile: ListingProfile,
        *,
        preview_limit: int | None = None,
        criteria: FilterCriteria | None = None,
    ):
        self.profile = profile
        self._criteria = criteria or FilterCriteria()
        self._listeners: list[ViewListener] = []
        self.loader: ResourceLoader[ResourceRecord] = ResourceLoader(
            fetch,
            name=profile.kind.value,
            preview_limit=preview_limit,
            on_change=lambda _loader: self._recompute(),
        )
        self._view = build_view_state(
            self.loader.status, self.loader.collection, self._criteria, profile,
        )

    async def __aenter__(self) -> "ListingController":
        await self.mount()
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.unmount()

    # ─── lifecycle ───────────────────────────────────────────────

    async def mount(self) -> ViewState:
        """Run the fetch for this mount. Re-mounting starts a fresh cycle."""
        self.loader.reopen()
        await self.loader.load()
        return self._view

    def unmount(self) -> None:
        self.loader.dispose()
        self._listeners.clear()

    # ─── criteria setters ───────────────────────────────────────

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def set_category(self, category: str) -> ViewState:
        return self._update(replace(self._criteria, selected_category=category))

    def set_search_term(self, term: str) -> ViewState:
        return self._update(replace(self._criteria, search_term=term))

    def reset_filters(self) -> ViewState:
        return self._update(FilterCriteria())

    # ─── derived state ───────────────────────────────────────────

    @property
    def view_state(self) -> ViewState:
        return self._view

    @property
    def status(self) -> ListingStatus:
        return self._view.status

    @property
    def visible_items(self) -> tuple[ResourceRecord, ...]:
        return self._view.visible_items

    @property
    def is_empty(self) -> bool:
        return self._view.is_empty

    @property
    def collection(self) -> tuple[ResourceRecord, ...]:
        return self.loader.collection

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Register a view listener. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, criteria: FilterCriteria) -> ViewState:
        self._criteria = criteria
        logger.debug(
            f"Criteria changed: category={criteria.selected_category!r} "
            f"search={criteria.search_term!r}",
            extra={"listing": self.profile.kind.value},
        )
        return self._recompute()

    def _recompute(self) -> ViewState:
        self._view = build_view_state(
            self.loader.status, self.loader.collection, self._criteria, self.profile,
        )
        for listener in list(self._listeners):
            try:
                listener(self._view)
            except Exception:
                logger.exception(
                    "View listener failed",
                    extra={"listing": self.profile.kind.value},
                )
        return self._view


# ─── Factories ───────────────────────────────────────────────────

def course_listing(
    source: CatalogSource,
    *,
    category: str = ALL_CATEGORIES,
    preview_limit: int | None = None,
) -> ListingController:
    """Course listing filtered by category (type)."""
    return ListingController(
        source.fetch_courses,
        COURSE_PROFILE,
        preview_limit=preview_limit,
        criteria=FilterCriteria(selected_category=category),
    )


def course_preview_listing(
    source: CatalogSource, *, limit: int = COURSE_PREVIEW_LIMIT,
) -> ListingController:
    """Home-page preview: first `limit` courses only."""
    return course_listing(source, preview_limit=limit)


def school_listing(source: CatalogSource, *, search_term: str = "") -> ListingController:
    """School listing searchable by name, short name and city. Unbounded."""
    return ListingController(
        source.fetch_schools,
        SCHOOL_PROFILE,
        criteria=FilterCriteria(search_term=search_term),
    )
