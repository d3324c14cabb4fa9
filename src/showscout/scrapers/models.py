"""Data models for scrapers."""

from dataclasses import dataclass


@dataclass
class RawListing:
    """
    Raw show data from the ticketing "what's on" page.

    URLs are kept as scraped (possibly relative); the enricher resolves them.
    """

    title: str  # Show title as it appears on the listing page
    url: str | None = None  # Link to the show page
    image_candidate: str | None = None  # Poster image src/srcset entry

    def __post_init__(self) -> None:
        """Validate that the title is present."""
        if not self.title or not self.title.strip():
            raise ValueError("title must not be empty")


@dataclass
class RawReference:
    """
    Raw show data from the Wikipedia West End theatre table.

    This is the authoritative source for category and dates. Missing values
    use sentinel strings so consumers never see None.
    """

    title: str  # Current production name
    category: str = "Unknown"  # e.g. "Musical", "Play"
    opening_date: str = "N/A"  # Free text or ISO date
    closing_date: str = "N/A"  # Free text, ISO date or "Open-ended"
    image_candidate: str | None = None  # Inline table image
    detail_link: str | None = None  # Production article, used for infobox lookup

    def __post_init__(self) -> None:
        """Validate that the title is present."""
        if not self.title or not self.title.strip():
            raise ValueError("title must not be empty")
