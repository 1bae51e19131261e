"""Resource Filter tests: pure visible-subset computation.

Tests cover:
    - "all" + empty search returns the collection unchanged
    - Category exact, case-sensitive match on the identifier
    - Unknown category identifier yields nothing
    - Search: trimmed, case-insensitive, over name / short name / city
    - AND combination of both criteria
    - Order preservation, purity, duplicates passing through
    - Inert criteria for listings that do not support them
    - build_view_state: is_empty only for READY listings

Design Decisions:
    - Pure core function: no mocks, no fixtures, just data in → data out
"""

from catalog.core.domain_types import CourseType, ListingKind, ListingStatus
from catalog.core.filter_resources import (
    build_view_state, compute_visible, normalize_search_term,
)
from catalog.core.listing_state import (
    COURSE_PROFILE, SCHOOL_PROFILE, FilterCriteria, ListingProfile,
)
from catalog.infrastructure.static_catalog import SAMPLE_SCHOOLS
from catalog.core.normalize_records import schools_from_raw

from tests.services.fake_catalog import make_course, make_school


def _mixed_courses():
    return [
        make_course(id="1", title="Classroom basics", type=CourseType.ILT),
        make_course(id="2", title="Virtual assessment", type=CourseType.VILT),
        make_course(id="3", title="Leadership online", type=CourseType.SELF_PACED),
        make_course(id="4", title="Classroom advanced", type=CourseType.ILT),
    ]


def _schools():
    return schools_from_raw(SAMPLE_SCHOOLS)


# ─── identity ─────────────────────────────────────────────────────

def test_default_criteria_returns_whole_collection():
    courses = _mixed_courses()
    assert compute_visible(courses, FilterCriteria()) == tuple(courses)


def test_default_criteria_on_empty_collection():
    assert compute_visible([], FilterCriteria()) == ()


def test_default_criteria_returns_all_schools():
    schools = _schools()
    assert compute_visible(schools, FilterCriteria(), SCHOOL_PROFILE) == tuple(schools)


# ─── category ─────────────────────────────────────────────────────

def test_category_keeps_only_matching_type_in_order():
    result = compute_visible(_mixed_courses(), FilterCriteria(selected_category="ILT"))
    assert [c.id for c in result] == ["1", "4"]


def test_category_matches_self_paced_identifier():
    result = compute_visible(
        _mixed_courses(), FilterCriteria(selected_category="Self-paced"),
    )
    assert [c.id for c in result] == ["3"]


def test_category_match_is_case_sensitive():
    result = compute_visible(_mixed_courses(), FilterCriteria(selected_category="ilt"))
    assert result == ()


def test_category_with_no_matching_type_is_empty():
    result = compute_visible(
        _mixed_courses(), FilterCriteria(selected_category="technology"),
    )
    assert result == ()


def test_category_is_inert_for_school_listing():
    schools = _schools()
    result = compute_visible(
        schools, FilterCriteria(selected_category="technology"), SCHOOL_PROFILE,
    )
    assert result == tuple(schools)


# ─── search ───────────────────────────────────────────────────────

def test_search_matches_city_in_any_case():
    for term in ("jeddah", "JEDDAH", "JeDdAh"):
        result = compute_visible(_schools(), FilterCriteria(search_term=term))
        assert [s.name for s in result] == ["Jeddah Excellence School"]


def test_search_matches_short_name():
    result = compute_visible(_schools(), FilterCriteria(search_term="dma"))
    assert [s.short_name for s in result] == ["DMA"]


def test_search_matches_name_substring():
    result = compute_visible(_schools(), FilterCriteria(search_term="school"))
    assert [s.id for s in result] == ["1", "3", "4"]


def test_search_term_is_trimmed():
    result = compute_visible(_schools(), FilterCriteria(search_term="  dubai  "))
    assert [s.id for s in result] == ["2"]


def test_whitespace_only_search_matches_everything():
    schools = _schools()
    assert compute_visible(schools, FilterCriteria(search_term="   ")) == tuple(schools)


def test_search_does_not_look_at_description_or_country():
    # "Saudi Arabia" is a country, "Innovation" a description word
    assert compute_visible(_schools(), FilterCriteria(search_term="saudi")) == ()
    assert compute_visible(_schools(), FilterCriteria(search_term="innovation")) == ()


def test_search_without_match_is_empty():
    assert compute_visible(_schools(), FilterCriteria(search_term="zzz")) == ()


def test_search_skips_missing_city():
    schools = [make_school(id="x", name="Nowhere", short_name="NW", city=None)]
    assert compute_visible(schools, FilterCriteria(search_term="riyadh")) == ()


def test_search_is_inert_for_course_listing():
    courses = _mixed_courses()
    result = compute_visible(courses, FilterCriteria(search_term="zzz"), COURSE_PROFILE)
    assert result == tuple(courses)


def test_normalize_search_term():
    assert normalize_search_term("  Jeddah ") == "jeddah"
    assert normalize_search_term("") == ""


# ─── combination ──────────────────────────────────────────────────

def test_both_criteria_combine_with_and():
    profile = ListingProfile(
        kind=ListingKind.COURSES, category_field="type", search_fields=("title",),
    )
    criteria = FilterCriteria(selected_category="ILT", search_term="advanced")
    result = compute_visible(_mixed_courses(), criteria, profile)
    assert [c.id for c in result] == ["4"]


def test_combination_with_one_failing_criterion_excludes_item():
    profile = ListingProfile(
        kind=ListingKind.COURSES, category_field="type", search_fields=("title",),
    )
    criteria = FilterCriteria(selected_category="VILT", search_term="classroom")
    assert compute_visible(_mixed_courses(), criteria, profile) == ()


# ─── determinism ──────────────────────────────────────────────────

def test_compute_visible_is_idempotent():
    courses = _mixed_courses()
    criteria = FilterCriteria(selected_category="ILT")
    assert compute_visible(courses, criteria) == compute_visible(courses, criteria)


def test_result_is_ordered_subsequence_of_input():
    courses = _mixed_courses()
    result = compute_visible(courses, FilterCriteria(selected_category="ILT"))
    positions = [courses.index(c) for c in result]
    assert positions == sorted(positions)


def test_input_collection_is_not_mutated():
    courses = _mixed_courses()
    snapshot = list(courses)
    compute_visible(courses, FilterCriteria(selected_category="VILT"))
    assert courses == snapshot


def test_duplicate_ids_pass_through():
    courses = [make_course(id="dup"), make_course(id="dup")]
    assert len(compute_visible(courses, FilterCriteria())) == 2


# ─── view state ───────────────────────────────────────────────────

def test_view_state_empty_search_result_is_explicit():
    schools = [s for s in _schools() if s.name == "Dubai Modern Academy"]
    view = build_view_state(
        ListingStatus.READY, schools, FilterCriteria(search_term="zzz"), SCHOOL_PROFILE,
    )
    assert view.status is ListingStatus.READY
    assert view.visible_items == ()
    assert view.is_empty is True
    assert view.total_items == 1


def test_view_state_with_items_is_not_empty():
    view = build_view_state(ListingStatus.READY, _mixed_courses(), FilterCriteria())
    assert view.is_empty is False
    assert len(view.visible_items) == 4


def test_loading_view_state_is_not_empty():
    view = build_view_state(ListingStatus.LOADING, [], FilterCriteria())
    assert view.status is ListingStatus.LOADING
    assert view.is_empty is False
    assert view.visible_items == ()


def test_failed_view_state_is_not_empty():
    view = build_view_state(ListingStatus.FAILED, [], FilterCriteria())
    assert view.status is ListingStatus.FAILED
    assert view.is_empty is False
