"""Listing Routes: course and school listings rendered for the browser.

Invariants:
    - One controller per request: one fetch, then the query criteria are
      applied through the controller setters
    - A failed upstream fetch is a 200 with status="failed", never a 5xx
    - Course listings are capped at the configured preview limit unless
      limit is given (limit=0 disables the cap); school listings are unbounded
"""

import random

from fastapi import APIRouter, Depends, Query

from catalog.config import get_settings
from catalog.core.domain_types import ALL_CATEGORIES, COURSE_CATEGORIES, ListingKind
from catalog.core.repository_protocols import CatalogSource
from catalog.schemas.listing import CategoryOption, ListingResponse
from catalog.services.listing_controller import course_listing, school_listing
from catalog.services.render_listing import render_listing
from catalog.api.dependencies import get_card_rng, get_catalog_source

router = APIRouter(prefix="/api/v1", tags=["listings"])


@router.get("/courses", response_model=ListingResponse)
async def list_courses(
    category: str = Query(ALL_CATEGORIES, max_length=64),
    limit: int | None = Query(None, ge=0, le=500),
    source: CatalogSource = Depends(get_catalog_source),
    rng: random.Random = Depends(get_card_rng),
):
    """Course cards, optionally narrowed to one category identifier."""
    cap = get_settings().course_preview_limit if limit is None else limit
    async with course_listing(source, preview_limit=cap or None) as listing:
        view = listing.set_category(category)
    return render_listing(ListingKind.COURSES, view, rng)


@router.get("/courses/categories", response_model=list[CategoryOption])
async def list_course_categories():
    """The fixed category selector entries."""
    return [CategoryOption(id=cid, name=name) for cid, name in COURSE_CATEGORIES]


@router.get("/schools", response_model=ListingResponse)
async def list_schools(
    search: str = Query("", max_length=200),
    source: CatalogSource = Depends(get_catalog_source),
):
    """School cards matching the search term on name, short name or city."""
    async with school_listing(source) as listing:
        view = listing.set_search_term(search)
    return render_listing(ListingKind.SCHOOLS, view)
