"""HTTP Catalog Client: wraps httpx.AsyncClient for the upstream LMS catalog API.

Invariants:
    - Transport errors, timeouts, non-2xx and non-list payloads all map to
      CatalogAPIError (core/errors.py); nothing else escapes fetch_*()
    - One HTTP request per fetch call; no retry (the loader owns the lifecycle)
    - Items are normalized through core; malformed items pass through with
      fallback values and are logged, never dropped

Design Decisions:
    - Wrapper over raw client: isolates error mapping from the loader
    - Optional transport argument: tests inject httpx.MockTransport
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

import httpx

from catalog.core.errors import CatalogAPIError, ErrorContext, MalformedPayloadError
from catalog.core.normalize_records import (
    COURSE_REQUIRED_FIELDS, SCHOOL_REQUIRED_FIELDS,
    course_from_raw, missing_fields, school_from_raw,
)
from catalog.core.records import Course, School

logger = logging.getLogger(__name__)


class HttpCatalogClient:
    """Fetches course and school collections from the catalog API."""

    COURSES_PATH = "/courses"
    SCHOOLS_PATH = "/schools"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "HttpCatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_courses(self) -> Sequence[Course]:
        items = await self._get_items(self.COURSES_PATH, "courses")
        return self._normalize(
            items, "courses", course_from_raw, COURSE_REQUIRED_FIELDS,
        )

    async def fetch_schools(self) -> Sequence[School]:
        items = await self._get_items(self.SCHOOLS_PATH, "schools")
        return self._normalize(
            items, "schools", school_from_raw, SCHOOL_REQUIRED_FIELDS,
        )

    async def _get_items(self, path: str, listing: str) -> list[Any]:
        """GET a collection endpoint and return its raw item list."""
        context = ErrorContext(listing=listing, endpoint=path)
        try:
            response = await self.client.get(path)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise CatalogAPIError(str(e) or "request timed out", "timeout", context=context)
        except httpx.HTTPStatusError as e:
            context.status_code = e.response.status_code
            raise CatalogAPIError(
                f"upstream returned {e.response.status_code}", "http_status", context=context,
            )
        except httpx.HTTPError as e:
            raise CatalogAPIError(str(e), "connection_error", context=context)

        try:
            payload = response.json()
        except ValueError:
            raise MalformedPayloadError("response body is not JSON", context=context)
        return self._extract_items(payload, listing, context)

    @staticmethod
    def _extract_items(payload: Any, listing: str, context: ErrorContext) -> list[Any]:
        """Accept a bare list or an envelope keyed by the listing name."""
        if isinstance(payload, dict):
            payload = payload.get(listing)
        if not isinstance(payload, list):
            raise MalformedPayloadError(
                f"expected a list of {listing}", context=context,
            )
        return payload

    @staticmethod
    def _normalize(
        items: list[Any],
        listing: str,
        convert: Callable[[Any], Any],
        required: tuple[tuple[str, ...], ...],
    ) -> list:
        records = []
        for index, raw in enumerate(items):
            missing = missing_fields(raw, required)
            if missing:
                logger.warning(
                    f"Malformed {listing} record at index {index}, using fallbacks",
                    extra={"listing": listing, "missing_fields": missing},
                )
            records.append(convert(raw))
        return records
