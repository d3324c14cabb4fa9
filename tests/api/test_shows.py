"""Tests for the shows API endpoints."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from showscout.dependencies import get_pipeline
from showscout.models.show import EnrichedShow, ShowsResult

FETCHED_AT = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Test data helpers
# ---------------------------------------------------------------------------


def make_show(
    title: str,
    category: str = "Musical",
    opening_date: str = "N/A",
    matched: bool = True,
) -> EnrichedShow:
    return EnrichedShow(
        title=title,
        category=category,
        opening_date=opening_date,
        closing_date="Open-ended",
        image_url=f"https://example.org/{title.lower()}.jpg",
        link=f"https://www.londontheatre.co.uk/{title.lower()}",
        matched=matched,
    )


def make_result(shows: list[EnrichedShow]) -> ShowsResult:
    return ShowsResult(
        shows=shows,
        listing_count=len(shows),
        reference_count=len(shows),
        fetched_at=FETCHED_AT,
    )


def make_pipeline(result: ShowsResult) -> MagicMock:
    pipeline = MagicMock()
    pipeline.get_shows = AsyncMock(return_value=result)
    pipeline.refresh = AsyncMock(return_value=result)
    return pipeline


def override_pipeline(app: FastAPI, pipeline: MagicMock) -> None:
    app.dependency_overrides[get_pipeline] = lambda: pipeline


SHOWS = [
    make_show("Wicked", "Musical", "2006-09-27"),
    make_show("Hamilton", "Musical", "2017-12-21"),
    make_show("The Mousetrap", "Play", "1952-11-25", matched=False),
]


# ---------------------------------------------------------------------------
# GET /api/shows
# ---------------------------------------------------------------------------


async def test_returns_all_shows_sorted_a_to_z(test_app: FastAPI) -> None:
    override_pipeline(test_app, make_pipeline(make_result(SHOWS)))

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/shows")

    assert response.status_code == 200
    data = response.json()
    assert [s["title"] for s in data["shows"]] == ["Hamilton", "The Mousetrap", "Wicked"]
    assert data["total"] == 3
    assert data["message"] is None
    assert data["query"] == {
        "category": "all",
        "sort": "a-z",
        "previews_only": False,
        "search": None,
    }


async def test_show_fields_are_serialised(test_app: FastAPI) -> None:
    override_pipeline(test_app, make_pipeline(make_result([SHOWS[1]])))

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/shows")

    show = response.json()["shows"][0]
    assert show == {
        "title": "Hamilton",
        "category": "Musical",
        "opening_date": "2017-12-21",
        "closing_date": "Open-ended",
        "image_url": "https://example.org/hamilton.jpg",
        "link": "https://www.londontheatre.co.uk/hamilton",
        "matched": True,
    }


async def test_filters_by_category_and_sorts_by_opening(test_app: FastAPI) -> None:
    override_pipeline(test_app, make_pipeline(make_result(SHOWS)))

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get(
            "/api/shows", params={"category": "musical", "sort": "opening-latest"}
        )

    data = response.json()
    assert [s["title"] for s in data["shows"]] == ["Hamilton", "Wicked"]
    assert data["total"] == 2
    assert data["listing_count"] == 3


async def test_search_by_title(test_app: FastAPI) -> None:
    override_pipeline(test_app, make_pipeline(make_result(SHOWS)))

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/shows", params={"search": "MOUSE"})

    assert [s["title"] for s in response.json()["shows"]] == ["The Mousetrap"]


async def test_empty_result_has_message(test_app: FastAPI) -> None:
    override_pipeline(test_app, make_pipeline(make_result([])))

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/shows")

    data = response.json()
    assert data["shows"] == []
    assert data["message"] == "No West End shows found at this time."


async def test_rejects_unknown_category(test_app: FastAPI) -> None:
    override_pipeline(test_app, make_pipeline(make_result(SHOWS)))

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/shows", params={"category": "opera"})

    assert response.status_code == 422


async def test_rejects_unknown_sort(test_app: FastAPI) -> None:
    override_pipeline(test_app, make_pipeline(make_result(SHOWS)))

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/shows", params={"sort": "random"})

    assert response.status_code == 422


# ---------------------------------------------------------------------------
# POST /api/shows/refresh
# ---------------------------------------------------------------------------


async def test_refresh_rebuilds_cache(test_app: FastAPI) -> None:
    pipeline = make_pipeline(make_result(SHOWS))
    override_pipeline(test_app, pipeline)

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.post("/api/shows/refresh")

    assert response.status_code == 200
    pipeline.refresh.assert_awaited_once()
    pipeline.get_shows.assert_not_called()
    data = response.json()
    assert [s["title"] for s in data["shows"]] == ["Wicked", "Hamilton", "The Mousetrap"]
    assert data["query"] is None
