"""Domain Types: enums and identity types shared by every listing.

Invariants:
    - RecordId wraps the upstream string id: never compared as int
    - All valid states encoded as Enums: no raw string matching outside core
    - ALL_CATEGORIES is the only category value that disables category filtering

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to the upstream identifiers and serialize to JSON as-is
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ListingStatus(str, Enum):
    """Fetch lifecycle of one listing. LOADING until the single fetch resolves."""
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class CourseType(str, Enum):
    """Delivery format of a course. Anything unrecognized maps to UNKNOWN."""
    ILT = "ILT"
    VILT = "VILT"
    SELF_PACED = "Self-paced"
    UNKNOWN = "unknown"


class SchoolStatus(str, Enum):
    """Partnership status of a school."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class ListingKind(str, Enum):
    """Resource collections the portal knows how to list."""
    COURSES = "courses"
    SCHOOLS = "schools"


# ─── Categories ──────────────────────────────────────────────────

ALL_CATEGORIES = "all"

# (identifier, display label). Matching always uses the identifier.
COURSE_CATEGORIES: tuple[tuple[str, str], ...] = (
    (ALL_CATEGORIES, "All Courses"),
    ("teaching", "Teaching Skills"),
    ("assessment", "Assessment"),
    ("leadership", "Leadership"),
    ("technology", "Technology"),
)
