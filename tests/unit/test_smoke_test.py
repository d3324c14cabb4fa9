"""Tests for the smoke test script."""

from unittest.mock import AsyncMock, MagicMock

from showscout.models.show import EnrichedShow, ShowsResult
from showscout.scripts.smoke_test import run_smoke_test


def make_show(title: str, matched: bool = True) -> EnrichedShow:
    return EnrichedShow(
        title=title,
        category="Musical",
        opening_date="N/A",
        closing_date="N/A",
        image_url="https://example.org/default.jpg",
        matched=matched,
    )


class TestSmokeTest:
    async def test_reports_counts(self) -> None:
        pipeline = MagicMock()
        pipeline.run = AsyncMock(
            return_value=ShowsResult(
                shows=[make_show("Hamilton"), make_show("Les Misérables", matched=False)],
                listing_count=40,
                reference_count=2,
            )
        )

        report = await run_smoke_test(min_shows=1, pipeline=pipeline)

        assert report == {
            "min_shows": 1,
            "listing_count": 40,
            "reference_count": 2,
            "show_count": 2,
            "matched_count": 1,
            "ok": True,
        }

    async def test_fails_below_minimum(self) -> None:
        pipeline = MagicMock()
        pipeline.run = AsyncMock(return_value=ShowsResult(shows=[]))

        report = await run_smoke_test(min_shows=5, pipeline=pipeline)

        assert report["ok"] is False
