"""Pydantic schemas for show data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from showscout.models.show import ShowsResult

EMPTY_MESSAGE = "No West End shows found at this time."


class ShowResponse(BaseModel):
    """Single enriched show."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    category: str
    opening_date: str
    closing_date: str
    image_url: str
    link: str
    matched: bool = False


class ShowsQuery(BaseModel):
    """Filters applied to the show list."""

    category: str = "all"
    sort: str = "a-z"
    previews_only: bool = False
    search: str | None = None


class ShowsResponse(BaseModel):
    """Response for the show list endpoints."""

    shows: list[ShowResponse]
    total: int
    listing_count: int
    reference_count: int
    fetched_at: datetime
    message: str | None = None
    query: ShowsQuery | None = None

    @classmethod
    def from_result(
        cls,
        result: ShowsResult,
        shows: list | None = None,
        query: ShowsQuery | None = None,
    ) -> "ShowsResponse":
        """Build a response from a pipeline result, optionally with a filtered show list."""
        selected = result.shows if shows is None else shows
        return cls(
            shows=[ShowResponse.model_validate(show) for show in selected],
            total=len(selected),
            listing_count=result.listing_count,
            reference_count=result.reference_count,
            fetched_at=result.fetched_at,
            message=EMPTY_MESSAGE if result.is_empty else None,
            query=query,
        )
