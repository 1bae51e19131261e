"""Listing Schemas: Pydantic models for the card grid the browser paints.

Invariants:
    - status mirrors ListingStatus; message is one of three distinct texts
      (loading, failed, no matches) or None when cards are shown
    - Cards carry display values only; enrolled_count is a display decoration
      and never an identity or filter input

Design Decisions:
    - Separate card models per record variant: the grid template differs
    - Literal type over str enum for card kind: Pydantic validates natively
"""

from typing import Literal, Union

from pydantic import BaseModel, Field

from catalog.core.domain_types import ListingStatus


class CourseCard(BaseModel):
    """One course card."""
    kind: Literal["course"] = "course"
    id: str
    title: str
    summary: str
    type_badge: str
    tags: list[str] = []
    duration_label: str = "8 weeks"
    enrolled_count: int = Field(ge=0)


class SchoolCard(BaseModel):
    """One school card."""
    kind: Literal["school"] = "school"
    id: str
    name: str
    short_name: str
    description: str | None = None
    location: str | None = None
    country: str | None = None
    logo: str | None = None
    user_count: int | None = None
    course_count: int | None = None
    status: str


ListingCard = Union[CourseCard, SchoolCard]


class ListingResponse(BaseModel):
    """View state as rendered for the browser."""
    status: ListingStatus
    items: list[ListingCard] = []
    is_empty: bool = False
    message: str | None = None
    total: int = 0


class CategoryOption(BaseModel):
    """One entry of the category selector."""
    id: str
    name: str
