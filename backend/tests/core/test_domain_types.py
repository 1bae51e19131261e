"""Domain Types: enum values and the category catalogue."""

from catalog.core.domain_types import (
    ALL_CATEGORIES, COURSE_CATEGORIES, CourseType, ListingStatus, RecordId,
)


def test_listing_status_has_three_states():
    assert {s.value for s in ListingStatus} == {"loading", "ready", "failed"}


def test_course_type_values_match_upstream_identifiers():
    assert CourseType.SELF_PACED == "Self-paced"
    assert CourseType("VILT") is CourseType.VILT


def test_category_catalogue_starts_with_all():
    ids = [cid for cid, _ in COURSE_CATEGORIES]
    assert ids[0] == ALL_CATEGORIES
    assert len(ids) == len(set(ids))


def test_record_id_wraps_str():
    assert RecordId("42") == "42"
