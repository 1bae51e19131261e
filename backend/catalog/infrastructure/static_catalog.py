"""Static Catalog Source: built-in partner schools for when the company API is unavailable.

Invariants:
    - fetch_schools() returns the same four schools in the same order every call
    - fetch_courses() delegates to the wrapped source, or returns [] without one
    - Returned sequences are fresh lists; callers cannot mutate the fixtures
"""

from collections.abc import Sequence

from catalog.core.normalize_records import schools_from_raw
from catalog.core.records import Course, School
from catalog.core.repository_protocols import CatalogSource

SAMPLE_SCHOOLS: tuple[dict, ...] = (
    {
        "id": "1",
        "name": "Al Riyadh International School",
        "shortname": "ARIS",
        "description": "Leading educational institution in Riyadh",
        "city": "Riyadh",
        "country": "Saudi Arabia",
        "userCount": 150,
        "courseCount": 25,
        "status": "active",
    },
    {
        "id": "2",
        "name": "Dubai Modern Academy",
        "shortname": "DMA",
        "description": "Innovation-focused learning environment",
        "city": "Dubai",
        "country": "UAE",
        "userCount": 200,
        "courseCount": 30,
        "status": "active",
    },
    {
        "id": "3",
        "name": "Jeddah Excellence School",
        "shortname": "JES",
        "description": "Excellence in education and character building",
        "city": "Jeddah",
        "country": "Saudi Arabia",
        "userCount": 120,
        "courseCount": 20,
        "status": "active",
    },
    {
        "id": "4",
        "name": "Abu Dhabi Future School",
        "shortname": "ADFS",
        "description": "Preparing students for the future",
        "city": "Abu Dhabi",
        "country": "UAE",
        "userCount": 180,
        "courseCount": 28,
        "status": "inactive",
    },
)


class StaticCatalogSource:
    """Serves SAMPLE_SCHOOLS; courses come from `courses_source` if given."""

    def __init__(self, courses_source: CatalogSource | None = None):
        self.courses_source = courses_source

    async def fetch_courses(self) -> Sequence[Course]:
        if self.courses_source is None:
            return []
        return await self.courses_source.fetch_courses()

    async def fetch_schools(self) -> Sequence[School]:
        return schools_from_raw(SAMPLE_SCHOOLS)
