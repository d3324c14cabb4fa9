"""Shows API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query

from showscout.dependencies import get_pipeline
from showscout.schemas import ShowsQuery, ShowsResponse
from showscout.services.pipeline import ShowPipeline
from showscout.services.show_filters import filter_shows, sort_shows

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/shows", response_model=ShowsResponse)
async def get_shows(
    category: str = Query("all", pattern="^(all|musical|play|other)$", description="Show type"),
    sort: str = Query(
        "a-z",
        pattern="^(a-z|z-a|opening-earliest|opening-latest)$",
        description="Sort order",
    ),
    previews_only: bool = Query(False, description="Only shows that have not opened yet"),
    search: str | None = Query(None, max_length=200, description="Title search"),
    pipeline: ShowPipeline = Depends(get_pipeline),
) -> ShowsResponse:
    """
    List current West End shows.

    Served from the pipeline cache; a miss scrapes both sources first.
    """
    result = await pipeline.get_shows()

    shows = filter_shows(
        result.shows,
        category=category,
        previews_only=previews_only,
        search=search,
    )
    shows = sort_shows(shows, sort)

    return ShowsResponse.from_result(
        result,
        shows=shows,
        query=ShowsQuery(
            category=category,
            sort=sort,
            previews_only=previews_only,
            search=search,
        ),
    )


@router.post("/shows/refresh", response_model=ShowsResponse)
async def refresh_shows(
    pipeline: ShowPipeline = Depends(get_pipeline),
) -> ShowsResponse:
    """Discard the cached show list and scrape both sources again."""
    logger.info("Manual refresh requested")
    result = await pipeline.refresh()
    return ShowsResponse.from_result(result)
