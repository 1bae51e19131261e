"""Listing Renderer: maps a ViewState to the cards and status message the UI paints.

Invariants:
    - Read-only over the view state: never mutates records or controller state
    - The randomized enrolled count lives only here, drawn from an injected
      random.Random; it never feeds back into filtering or identity
    - Status messages are three distinct texts: loading, failed, no matches

Design Decisions:
    - Injected Random over module random: tests seed it, callers may share one
"""

import random
import re

from catalog.core.domain_types import CourseType, ListingKind, ListingStatus
from catalog.core.listing_state import ViewState
from catalog.core.records import Course, School
from catalog.schemas.listing import CourseCard, ListingResponse, SchoolCard

SUMMARY_MAX_CHARS = 120
FALLBACK_SUMMARY = (
    "Comprehensive training program designed to enhance your professional skills."
)
DEFAULT_TYPE_BADGE = CourseType.SELF_PACED.value
CARD_TAG_LIMIT = 2
ENROLLED_MIN = 100
ENROLLED_MAX = 599

_TAG_RE = re.compile(r"<[^>]*>")

_MESSAGES = {
    ListingKind.COURSES: {
        ListingStatus.LOADING: "Loading courses...",
        ListingStatus.FAILED: "Couldn't load courses",
        "empty": "No courses found",
    },
    ListingKind.SCHOOLS: {
        ListingStatus.LOADING: "Loading schools...",
        ListingStatus.FAILED: "Couldn't load schools",
        "empty": "No schools found",
    },
}


def clip_summary(summary: str) -> str:
    """Strip markup and clip to the card length.

    Blank summaries, including ones that are nothing but markup, get the stock
    text instead of a bare "...".
    """
    if not summary:
        return FALLBACK_SUMMARY
    text = _TAG_RE.sub("", summary)
    if not text.strip():
        return FALLBACK_SUMMARY
    return text[:SUMMARY_MAX_CHARS] + "..."


def type_badge(course: Course) -> str:
    if course.type is CourseType.UNKNOWN:
        return DEFAULT_TYPE_BADGE
    return course.type.value


def status_message(kind: ListingKind, view: ViewState) -> str | None:
    messages = _MESSAGES[kind]
    if view.status is not ListingStatus.READY:
        return messages[view.status]
    if view.is_empty:
        return messages["empty"]
    return None


def render_course(course: Course, rng: random.Random) -> CourseCard:
    return CourseCard(
        id=course.id,
        title=course.title,
        summary=clip_summary(course.summary),
        type_badge=type_badge(course),
        tags=list(course.tags[:CARD_TAG_LIMIT]),
        enrolled_count=rng.randint(ENROLLED_MIN, ENROLLED_MAX),  # nosec B311
    )


def render_school(school: School) -> SchoolCard:
    location = None
    if school.city:
        location = f"{school.city}, {school.country}" if school.country else school.city
    return SchoolCard(
        id=school.id,
        name=school.name,
        short_name=school.short_name,
        description=school.description,
        location=location,
        country=school.country,
        logo=school.logo,
        user_count=school.user_count,
        course_count=school.course_count,
        status=school.status.value,
    )


def render_listing(
    kind: ListingKind, view: ViewState, rng: random.Random | None = None,
) -> ListingResponse:
    """Render a view state into the response the browser paints."""
    rng = rng or random.Random()  # nosec B311
    cards: list = []
    for item in view.visible_items:
        if isinstance(item, Course):
            cards.append(render_course(item, rng))
        elif isinstance(item, School):
            cards.append(render_school(item))
    return ListingResponse(
        status=view.status,
        items=cards,
        is_empty=view.is_empty,
        message=status_message(kind, view),
        total=view.total_items,
    )
