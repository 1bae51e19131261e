"""Resource Records: the two record variants a listing can hold.

Invariants:
    - Records are frozen: a loaded collection is never mutated in place
    - `id` is the identity field; uniqueness is NOT enforced here
    - Records carry upstream data only (no display-only decorations)
"""

from dataclasses import dataclass, field
from typing import Union

from catalog.core.domain_types import CourseType, RecordId, SchoolStatus


@dataclass(frozen=True)
class Course:
    """One course as exposed by the LMS."""
    id: RecordId
    title: str
    summary: str = ""
    type: CourseType = CourseType.UNKNOWN
    tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class School:
    """One partnered school (LMS company)."""
    id: RecordId
    name: str
    short_name: str
    description: str | None = None
    city: str | None = None
    country: str | None = None
    logo: str | None = None
    user_count: int | None = None
    course_count: int | None = None
    status: SchoolStatus = SchoolStatus.ACTIVE


ResourceRecord = Union[Course, School]
