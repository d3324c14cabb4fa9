"""Unit tests for show list filtering and sorting."""

from datetime import date

from showscout.models.show import EnrichedShow
from showscout.services.show_filters import (
    filter_shows,
    is_in_previews,
    parse_show_date,
    sort_shows,
)

TODAY = date(2026, 10, 19)


def make_show(title: str, category: str = "Musical", opening_date: str = "N/A") -> EnrichedShow:
    return EnrichedShow(
        title=title,
        category=category,
        opening_date=opening_date,
        closing_date="Open-ended",
        image_url="https://example.org/default.jpg",
    )


SHOWS = [
    make_show("Wicked", "Musical", "27 September 2006"),
    make_show("The Mousetrap", "Play", "25 November 1952"),
    make_show("Cirque du Soleil", "Circus", "N/A"),
    make_show("New Musical", "Musical comedy", "2027-02-01"),
]


class TestParseShowDate:
    def test_iso_date(self) -> None:
        assert parse_show_date("2017-12-21") == date(2017, 12, 21)

    def test_iso_prefix_with_trailing_text(self) -> None:
        assert parse_show_date("2017-12-21 (previews)") == date(2017, 12, 21)

    def test_day_month_year(self) -> None:
        assert parse_show_date("21 December 2017") == date(2017, 12, 21)

    def test_month_day_year(self) -> None:
        assert parse_show_date("December 21, 2017") == date(2017, 12, 21)

    def test_month_year(self) -> None:
        assert parse_show_date("March 2026") == date(2026, 3, 1)

    def test_sentinels_are_none(self) -> None:
        assert parse_show_date("N/A") is None
        assert parse_show_date("Open-ended") is None
        assert parse_show_date("") is None
        assert parse_show_date(None) is None

    def test_garbage_is_none(self) -> None:
        assert parse_show_date("sometime soon") is None


class TestIsInPreviews:
    def test_future_opening_is_in_previews(self) -> None:
        assert is_in_previews(make_show("X", opening_date="2027-01-01"), TODAY)

    def test_past_opening_is_not(self) -> None:
        assert not is_in_previews(make_show("X", opening_date="2017-12-21"), TODAY)

    def test_undated_is_not(self) -> None:
        assert not is_in_previews(make_show("X"), TODAY)


class TestFilterShows:
    def test_all_keeps_everything(self) -> None:
        assert filter_shows(SHOWS, today=TODAY) == SHOWS

    def test_musical(self) -> None:
        titles = [s.title for s in filter_shows(SHOWS, category="musical", today=TODAY)]
        assert titles == ["Wicked", "New Musical"]

    def test_play(self) -> None:
        titles = [s.title for s in filter_shows(SHOWS, category="play", today=TODAY)]
        assert titles == ["The Mousetrap"]

    def test_other(self) -> None:
        titles = [s.title for s in filter_shows(SHOWS, category="other", today=TODAY)]
        assert titles == ["Cirque du Soleil"]

    def test_previews_only(self) -> None:
        titles = [s.title for s in filter_shows(SHOWS, previews_only=True, today=TODAY)]
        assert titles == ["New Musical"]

    def test_search_is_case_insensitive_and_trimmed(self) -> None:
        titles = [s.title for s in filter_shows(SHOWS, search="  mouse ", today=TODAY)]
        assert titles == ["The Mousetrap"]

    def test_filters_combine(self) -> None:
        assert filter_shows(SHOWS, category="play", search="wicked", today=TODAY) == []


class TestSortShows:
    def test_a_to_z(self) -> None:
        titles = [s.title for s in sort_shows(SHOWS, "a-z")]
        assert titles == ["Cirque du Soleil", "New Musical", "The Mousetrap", "Wicked"]

    def test_z_to_a(self) -> None:
        titles = [s.title for s in sort_shows(SHOWS, "z-a")]
        assert titles == ["Wicked", "The Mousetrap", "New Musical", "Cirque du Soleil"]

    def test_opening_earliest_puts_undated_first(self) -> None:
        titles = [s.title for s in sort_shows(SHOWS, "opening-earliest")]
        assert titles == ["Cirque du Soleil", "The Mousetrap", "Wicked", "New Musical"]

    def test_opening_latest_puts_undated_last(self) -> None:
        titles = [s.title for s in sort_shows(SHOWS, "opening-latest")]
        assert titles == ["New Musical", "Wicked", "The Mousetrap", "Cirque du Soleil"]

    def test_does_not_mutate_input(self) -> None:
        shows = list(SHOWS)
        sort_shows(shows, "z-a")
        assert shows == SHOWS
