"""Show matching service with exact and fuzzy title matching."""

import logging

from rapidfuzz import fuzz

from showscout.config import settings
from showscout.models.show import MatchResult
from showscout.scrapers.models import RawListing, RawReference
from showscout.utils.text import normalise_title

logger = logging.getLogger(__name__)


class ShowMatcher:
    """
    Service for pairing Wikipedia productions with ticketing listings.

    Uses a two-stage matching process:
    1. Exact match on normalized title (first listing in page order wins)
    2. Fuzzy match against every listing, accepted only above the threshold
    """

    def __init__(self, threshold: float | None = None) -> None:
        """
        Initialize show matcher.

        Args:
            threshold: Minimum similarity (0..1, exclusive) for a fuzzy match
                (uses settings if not provided)
        """
        self.threshold = settings.match_threshold if threshold is None else threshold

    def match_all(
        self,
        references: list[RawReference],
        listings: list[RawListing],
    ) -> list[MatchResult]:
        """Match every reference, preserving reference order."""
        keyed = [(normalise_title(listing.title), listing) for listing in listings]
        results = [self._match_keyed(reference, keyed) for reference in references]

        matched = sum(1 for r in results if r.matched)
        logger.info(f"Matched {matched}/{len(results)} productions to listings")
        return results

    def match(self, reference: RawReference, listings: list[RawListing]) -> MatchResult:
        """
        Match a single reference record against the listings.

        Args:
            reference: Production from the reference source
            listings: Listings in the order the fetcher produced them

        Returns:
            MatchResult with the chosen listing, or listing=None if nothing
            cleared the threshold
        """
        keyed = [(normalise_title(listing.title), listing) for listing in listings]
        return self._match_keyed(reference, keyed)

    def _match_keyed(
        self,
        reference: RawReference,
        keyed: list[tuple[str, RawListing]],
    ) -> MatchResult:
        key = normalise_title(reference.title)

        # Stage 1: exact normalized match
        listing = self._exact_match(key, keyed)
        if listing:
            logger.debug(f"Exact match: '{reference.title}' -> '{listing.title}'")
            return MatchResult(reference=reference, listing=listing, score=1.0)

        # Stage 2: fuzzy match
        best_listing, best_score = self._fuzzy_match(key, keyed)
        if best_listing and best_score > self.threshold:
            logger.info(
                f"Fuzzy match: {best_score:.2f} - '{reference.title}' -> '{best_listing.title}'"
            )
            return MatchResult(reference=reference, listing=best_listing, score=best_score)

        logger.debug(f"No match for '{reference.title}' (best score {best_score:.2f})")
        return MatchResult(reference=reference, listing=None, score=best_score)

    def _exact_match(self, key: str, keyed: list[tuple[str, RawListing]]) -> RawListing | None:
        for listing_key, listing in keyed:
            if listing_key == key:
                return listing
        return None

    def _fuzzy_match(
        self,
        key: str,
        keyed: list[tuple[str, RawListing]],
    ) -> tuple[RawListing | None, float]:
        """Return the best scoring listing; the earliest one wins ties."""
        best_score = 0.0
        best_listing = None

        for listing_key, listing in keyed:
            score = self.similarity(key, listing_key)
            if score > best_score:
                best_score = score
                best_listing = listing

        return best_listing, best_score

    @staticmethod
    def similarity(a: str, b: str) -> float:
        """Symmetric similarity of two normalized keys in [0, 1]."""
        if not a or not b:
            return 0.0
        return min(fuzz.ratio(a, b) / 100.0, 1.0)
