"""Filtering and sorting for the show list endpoint."""

import re
from datetime import date, datetime

from showscout.models.show import EnrichedShow

CATEGORIES = ("all", "musical", "play", "other")
SORT_ORDERS = ("a-z", "z-a", "opening-earliest", "opening-latest")

NO_DATE_VALUES = {"", "n/a", "open-ended", "tba", "tbc"}

# Formats seen in the Wikipedia table, tried after the ISO prefix
DATE_FORMATS = (
    "%d %B %Y",  # 21 December 2017
    "%d %b %Y",  # 21 Dec 2017
    "%B %d, %Y",  # December 21, 2017
    "%B %d %Y",
    "%B %Y",  # December 2017
    "%b %Y",
    "%Y",
)


def parse_show_date(text: str | None) -> date | None:
    """
    Parse an opening/closing date string.

    Examples:
        "2017-12-21"         → date(2017, 12, 21)
        "21 December 2017"   → date(2017, 12, 21)
        "Open-ended", "N/A"  → None

    Returns:
        Parsed date or None if the text is a sentinel or unparseable
    """
    if not text:
        return None

    text = re.sub(r"\s+", " ", text).strip()
    if text.lower() in NO_DATE_VALUES:
        return None

    iso = re.match(r"^(\d{4}-\d{2}-\d{2})", text)
    if iso:
        try:
            return date.fromisoformat(iso.group(1))
        except ValueError:
            return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None


def is_in_previews(show: EnrichedShow, today: date) -> bool:
    """A show is in previews until its opening night."""
    opening = parse_show_date(show.opening_date)
    return opening is not None and opening > today


def matches_category(show: EnrichedShow, category: str) -> bool:
    kind = show.category.lower()
    if category == "musical":
        return "musical" in kind
    if category == "play":
        return "play" in kind
    if category == "other":
        return "musical" not in kind and "play" not in kind
    return True


def filter_shows(
    shows: list[EnrichedShow],
    category: str = "all",
    previews_only: bool = False,
    search: str | None = None,
    today: date | None = None,
) -> list[EnrichedShow]:
    """
    Filter shows by category, preview status and title search.

    Args:
        shows: Shows to filter
        category: One of CATEGORIES
        previews_only: Keep only shows whose opening date is in the future
        search: Case-insensitive title substring
        today: Reference date for previews (defaults to today)

    Returns:
        Filtered list in the original order
    """
    today = today or date.today()
    term = (search or "").strip().lower()

    return [
        show
        for show in shows
        if matches_category(show, category)
        and (not previews_only or is_in_previews(show, today))
        and (not term or term in show.title.lower())
    ]


def sort_shows(shows: list[EnrichedShow], sort: str = "a-z") -> list[EnrichedShow]:
    """
    Sort shows by title or opening date.

    Undated shows come first for "opening-earliest" and last for
    "opening-latest".
    """
    if sort == "a-z":
        return sorted(shows, key=lambda s: s.title.casefold())
    if sort == "z-a":
        return sorted(shows, key=lambda s: s.title.casefold(), reverse=True)
    if sort == "opening-earliest":
        return sorted(shows, key=lambda s: parse_show_date(s.opening_date) or date.min)
    if sort == "opening-latest":
        return sorted(
            shows,
            key=lambda s: parse_show_date(s.opening_date) or date.min,
            reverse=True,
        )
    return list(shows)
