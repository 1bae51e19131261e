"""Record Normalization: raw upstream mappings to Course / School records.

Invariants:
    - Pure functions: no IO, never raise on a malformed item
    - A record missing identity/display fields passes through with fallback
      values; one bad item never rejects the whole collection
    - Unknown course types map to CourseType.UNKNOWN; the raw value is not kept
    - Input order is preserved by the batch helpers

Design Decisions:
    - Accepts both LMS field names (fullname, shortname, usercount) and
      camelCase variants (userCount, courseCount) seen in company payloads
    - Missing-field reporting is separate from conversion so the shell decides
      how loudly to log
"""

from collections.abc import Iterable, Mapping
from typing import Any

from catalog.core.domain_types import CourseType, RecordId, SchoolStatus
from catalog.core.records import Course, School

UNTITLED_COURSE = "Untitled course"
UNNAMED_SCHOOL = "Unnamed school"

# Each entry is a group of alias keys; any one of them satisfies the group.
COURSE_REQUIRED_FIELDS = (("id",), ("fullname", "title", "displayname"))
SCHOOL_REQUIRED_FIELDS = (("id",), ("name",), ("shortname", "shortName", "short_name"))

_COURSE_TYPES = {t.value: t for t in CourseType}


def _as_mapping(raw: Any) -> Mapping[str, Any]:
    return raw if isinstance(raw, Mapping) else {}


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    """First non-empty value among alias keys."""
    for key in keys:
        val = raw.get(key)
        if val is not None and val != "":
            return val
    return None


def _text(val: Any, default: str = "") -> str:
    if val is None:
        return default
    text = str(val).strip()
    return text or default


def _optional_text(val: Any) -> str | None:
    text = _text(val)
    return text or None


def _optional_int(val: Any) -> int | None:
    if isinstance(val, bool):
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        return None


def _tags(val: Any) -> tuple[str, ...]:
    """Tags arrive as plain strings or as {"name": ...} objects."""
    if not isinstance(val, (list, tuple)):
        return ()
    out: list[str] = []
    for tag in val:
        if isinstance(tag, Mapping):
            tag = _first(tag, "name", "rawname")
        name = _text(tag)
        if name:
            out.append(name)
    return tuple(out)


def course_type_from_raw(val: Any) -> CourseType:
    return _COURSE_TYPES.get(_text(val), CourseType.UNKNOWN)


def course_from_raw(raw: Any) -> Course:
    """Convert one upstream course item. Never raises."""
    data = _as_mapping(raw)
    return Course(
        id=RecordId(_text(data.get("id"))),
        title=_text(_first(data, "fullname", "title", "displayname"), UNTITLED_COURSE),
        summary=_text(data.get("summary")),
        type=course_type_from_raw(data.get("type")),
        tags=_tags(data.get("tags")),
    )


def school_from_raw(raw: Any) -> School:
    """Convert one upstream school (company) item. Never raises."""
    data = _as_mapping(raw)
    status = _text(data.get("status"), SchoolStatus.ACTIVE.value).lower()
    return School(
        id=RecordId(_text(data.get("id"))),
        name=_text(data.get("name"), UNNAMED_SCHOOL),
        short_name=_text(_first(data, "shortname", "shortName", "short_name")),
        description=_optional_text(data.get("description")),
        city=_optional_text(data.get("city")),
        country=_optional_text(data.get("country")),
        logo=_optional_text(data.get("logo")),
        user_count=_optional_int(_first(data, "userCount", "usercount", "user_count")),
        course_count=_optional_int(_first(data, "courseCount", "coursecount", "course_count")),
        status=(
            SchoolStatus.INACTIVE if status == SchoolStatus.INACTIVE.value
            else SchoolStatus.ACTIVE
        ),
    )


def missing_fields(raw: Any, required: Iterable[tuple[str, ...]]) -> list[str]:
    """Required field groups absent or blank in a raw item, named by first alias."""
    data = _as_mapping(raw)
    return [group[0] for group in required if not _text(_first(data, *group))]


def courses_from_raw(items: Iterable[Any]) -> list[Course]:
    return [course_from_raw(item) for item in items]


def schools_from_raw(items: Iterable[Any]) -> list[School]:
    return [school_from_raw(item) for item in items]
