"""Enrichment service that merges a matched pair into one show record."""

import logging

from showscout.config import settings
from showscout.models.show import PLACEHOLDER_LINK, EnrichedShow, MatchResult
from showscout.scrapers.models import RawReference
from showscout.services.image_client import ImageClient
from showscout.utils.text import normalise_url

logger = logging.getLogger(__name__)


class ShowEnricher:
    """
    Service for resolving the image and link of each show.

    Image resolution order (first valid wins):
    1. Listing poster image
    2. Wikipedia table image
    3. Wikipedia infobox image (only looked up when 1 and 2 are both missing)
    4. Default placeholder image

    Link resolution order:
    1. Listing show page
    2. Wikipedia article
    3. "#"
    """

    def __init__(
        self,
        image_client: ImageClient | None = None,
        default_image: str | None = None,
        drop_unmatched: bool | None = None,
        listing_base_url: str | None = None,
        reference_base_url: str | None = None,
    ) -> None:
        """
        Initialize show enricher.

        Args:
            image_client: Client for infobox lookup and validation (creates default if not provided)
            default_image: Placeholder image URL (uses settings if not provided)
            drop_unmatched: Drop productions with no listing instead of keeping them
            listing_base_url: Origin for relative listing URLs
            reference_base_url: Origin for relative Wikipedia URLs
        """
        self.image_client = image_client or ImageClient()
        self.default_image = default_image or settings.default_image_url
        self.drop_unmatched = settings.drop_unmatched if drop_unmatched is None else drop_unmatched
        self.listing_base_url = listing_base_url or settings.listing_base_url
        self.reference_base_url = reference_base_url or settings.reference_base_url

    async def enrich(self, match: MatchResult) -> EnrichedShow | None:
        """
        Build the final show record for a match.

        Args:
            match: Reference record and its listing (if any)

        Returns:
            EnrichedShow, or None if the match is absent and unmatched
            productions are dropped
        """
        if not match.matched and self.drop_unmatched:
            logger.debug(f"Dropping unmatched production: {match.reference.title}")
            return None

        reference = match.reference
        return EnrichedShow(
            title=reference.title,
            category=reference.category,
            opening_date=reference.opening_date,
            closing_date=reference.closing_date,
            image_url=await self.resolve_image(match),
            link=self.resolve_link(match),
            matched=match.matched,
        )

    def fallback(self, reference: RawReference) -> EnrichedShow:
        """Show record built without any network calls."""
        return EnrichedShow(
            title=reference.title,
            category=reference.category,
            opening_date=reference.opening_date,
            closing_date=reference.closing_date,
            image_url=self.default_image,
            link=self._reference_link(reference) or PLACEHOLDER_LINK,
        )

    async def resolve_image(self, match: MatchResult) -> str:
        """Walk the image candidates in priority order."""
        inline_candidates = [self._listing_image(match), self._reference_image(match)]

        for candidate in inline_candidates:
            if not candidate:
                continue
            if await self.image_client.validate_image(candidate):
                return candidate

        if not any(inline_candidates):
            infobox = await self._infobox_image(match)
            if infobox and await self.image_client.validate_image(infobox):
                return infobox

        return self.default_image

    def resolve_link(self, match: MatchResult) -> str:
        """Listing page, else Wikipedia article, else "#"."""
        if match.listing:
            url = normalise_url(match.listing.url, self.listing_base_url)
            if url:
                return url
        return self._reference_link(match.reference) or PLACEHOLDER_LINK

    def _listing_image(self, match: MatchResult) -> str | None:
        if not match.listing:
            return None
        return normalise_url(match.listing.image_candidate, self.listing_base_url)

    def _reference_image(self, match: MatchResult) -> str | None:
        return normalise_url(match.reference.image_candidate, self.reference_base_url)

    async def _infobox_image(self, match: MatchResult) -> str | None:
        link = self._reference_link(match.reference)
        if not link:
            return None
        return await self.image_client.get_infobox_image(link)

    def _reference_link(self, reference: RawReference) -> str | None:
        return normalise_url(reference.detail_link, self.reference_base_url)
