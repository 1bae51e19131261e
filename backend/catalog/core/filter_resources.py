"""Resource Filter: the pure visible-subset computation behind every listing.

Invariants:
    - Pure function: no IO, no async, no randomness
    - Output is a subsequence of the input collection in original order
    - "all" category + empty search returns the collection unchanged
    - Category match is case-sensitive on the identifier; search match is a
      trimmed, case-insensitive substring over the profile's search fields
    - Both criteria active -> AND
    - Duplicate ids pass through (no dedup)

Design Decisions:
    - Full recomputation on every change, no incremental index: collections
      are small and the result is trivially correct
    - Profile inferred per record type when not given, so mixed callers and
      tests can use the two-argument form
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any

from catalog.core.domain_types import ALL_CATEGORIES, ListingStatus
from catalog.core.listing_state import (
    FilterCriteria, ListingProfile, PROFILES_BY_RECORD, ViewState,
)
from catalog.core.records import ResourceRecord


def normalize_search_term(term: str) -> str:
    """Trimmed, case-folded search term. Empty means 'match everything'."""
    return (term or "").strip().casefold()


def _category_id(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _profile_for(item: ResourceRecord, profile: ListingProfile | None) -> ListingProfile | None:
    if profile is not None:
        return profile
    return PROFILES_BY_RECORD.get(type(item))


def matches_category(
    item: ResourceRecord, category: str, profile: ListingProfile | None = None,
) -> bool:
    """Exact identifier match on the profile's category field."""
    if category == ALL_CATEGORIES:
        return True
    rules = _profile_for(item, profile)
    if rules is None or rules.category_field is None:
        return True
    return _category_id(getattr(item, rules.category_field, None)) == category


def matches_search(
    item: ResourceRecord, needle: str, profile: ListingProfile | None = None,
) -> bool:
    """Substring match of an already-normalized needle in any search field."""
    if not needle:
        return True
    rules = _profile_for(item, profile)
    if rules is None or not rules.search_fields:
        return True
    for name in rules.search_fields:
        value = getattr(item, name, None)
        if value and needle in str(value).casefold():
            return True
    return False


def compute_visible(
    collection: Sequence[ResourceRecord],
    criteria: FilterCriteria,
    profile: ListingProfile | None = None,
) -> tuple[ResourceRecord, ...]:
    """Visible subset of a collection for the given criteria. Pure."""
    needle = normalize_search_term(criteria.search_term)
    category = criteria.selected_category
    return tuple(
        item for item in collection
        if matches_category(item, category, profile)
        and matches_search(item, needle, profile)
    )


def build_view_state(
    status: ListingStatus,
    collection: Sequence[ResourceRecord],
    criteria: FilterCriteria,
    profile: ListingProfile | None = None,
) -> ViewState:
    """Derive the full view state. Only READY listings expose items."""
    if status is not ListingStatus.READY:
        return ViewState(status=status)
    visible = compute_visible(collection, criteria, profile)
    return ViewState(
        status=status,
        visible_items=visible,
        is_empty=not visible,
        total_items=len(collection),
    )
