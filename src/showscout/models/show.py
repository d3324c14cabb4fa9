"""Pipeline result models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from showscout.scrapers.models import RawListing, RawReference

PLACEHOLDER_LINK = "#"


@dataclass(frozen=True)
class MatchResult:
    """A reference record paired with zero or one listing record."""

    reference: RawReference
    listing: RawListing | None
    score: float  # Similarity of the chosen (or best rejected) candidate, 0..1

    def __post_init__(self) -> None:
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"score must be within [0, 1], got {self.score}")

    @property
    def matched(self) -> bool:
        return self.listing is not None


@dataclass
class EnrichedShow:
    """
    Final show record served to clients.

    Every field is always set; missing data uses "N/A", "Unknown" or "#".
    """

    title: str
    category: str
    opening_date: str
    closing_date: str
    image_url: str
    link: str = PLACEHOLDER_LINK
    matched: bool = False


@dataclass
class ShowsResult:
    """Output of one pipeline run."""

    shows: list[EnrichedShow]
    listing_count: int = 0
    reference_count: int = 0
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_empty(self) -> bool:
        return not self.shows
