"""Listing State: filter criteria, derived view state, and per-listing rules.

Invariants:
    - FilterCriteria is owned by the caller; core never mutates it (frozen)
    - ViewState is derived only: always rebuilt from collection + criteria
    - is_empty is True only for a READY listing with nothing visible, so
      "no matches" stays distinct from LOADING and FAILED
"""

from dataclasses import dataclass, field

from catalog.core.domain_types import ALL_CATEGORIES, ListingKind, ListingStatus
from catalog.core.records import Course, ResourceRecord, School


@dataclass(frozen=True)
class FilterCriteria:
    """User-controlled narrowing of a listing."""
    selected_category: str = ALL_CATEGORIES
    search_term: str = ""


@dataclass(frozen=True)
class ListingProfile:
    """Which record fields the filters look at for one kind of listing.

    category_field=None or an empty search_fields tuple makes that criterion
    inert for the listing.
    """
    kind: ListingKind
    category_field: str | None = None
    search_fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class ViewState:
    """What the rendering layer receives."""
    status: ListingStatus = ListingStatus.LOADING
    visible_items: tuple[ResourceRecord, ...] = field(default_factory=tuple)
    is_empty: bool = False
    total_items: int = 0


COURSE_PROFILE = ListingProfile(
    kind=ListingKind.COURSES,
    category_field="type",
)

SCHOOL_PROFILE = ListingProfile(
    kind=ListingKind.SCHOOLS,
    search_fields=("name", "short_name", "city"),
)

PROFILES_BY_RECORD: dict[type, ListingProfile] = {
    Course: COURSE_PROFILE,
    School: SCHOOL_PROFILE,
}
