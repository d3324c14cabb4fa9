"""Fetch, match, enrich and cache the West End show list."""

import asyncio
import logging

from showscout.config import settings
from showscout.models.show import EnrichedShow, MatchResult, ShowsResult
from showscout.scrapers.base import BaseFetcher
from showscout.scrapers.london_theatre import LondonTheatreScraper
from showscout.scrapers.models import RawListing, RawReference
from showscout.scrapers.wikipedia import WikipediaScraper
from showscout.services.cache import ResultCache
from showscout.services.enricher import ShowEnricher
from showscout.services.show_matcher import ShowMatcher

logger = logging.getLogger(__name__)

CACHE_KEY = "west-end-shows"


class ShowPipeline:
    """
    Orchestrates one run of the show pipeline and owns its result cache.

    On a cache miss:
    1. Fetch listings and Wikipedia productions concurrently
    2. Match every production to a listing
    3. Enrich matches with at most `max_concurrency` in flight
    4. Cache the result (only if at least one source returned data)
    """

    def __init__(
        self,
        listing_fetcher: BaseFetcher[RawListing] | None = None,
        reference_fetcher: BaseFetcher[RawReference] | None = None,
        matcher: ShowMatcher | None = None,
        enricher: ShowEnricher | None = None,
        cache: ResultCache | None = None,
        max_concurrency: int | None = None,
    ) -> None:
        self.listing_fetcher = listing_fetcher or LondonTheatreScraper()
        self.reference_fetcher = reference_fetcher or WikipediaScraper()
        self.matcher = matcher or ShowMatcher()
        self.enricher = enricher or ShowEnricher()
        self.cache = cache or ResultCache(ttl_seconds=settings.cache_ttl_seconds)
        self.max_concurrency = max_concurrency or settings.enrich_concurrency

    async def get_shows(self) -> ShowsResult:
        """Return the cached show list, running the pipeline on a miss."""
        cached = self.cache.get(CACHE_KEY)
        if cached is not None:
            logger.debug("Serving shows from cache")
            return cached

        result = await self.run()
        self._store(result)
        return result

    async def refresh(self) -> ShowsResult:
        """Rebuild the show list and replace the cached entry.

        The previous entry stays in place while the pipeline runs, so
        concurrent requests keep being served from cache. If both sources
        come back empty the previous entry is kept and returned.

        Returns:
            The fresh result, or the still-cached one when the run was empty.
        """
        result = await self.run()
        if self._store(result):
            return result

        previous = self.cache.get(CACHE_KEY)
        if previous is not None:
            logger.warning("Refresh found no shows, keeping previous cached result")
            return previous
        return result

    def _store(self, result: ShowsResult) -> bool:
        """Cache a result unless both sources were empty."""
        if not (result.listing_count or result.reference_count):
            logger.warning("Both sources returned nothing, result not cached")
            return False
        self.cache.set(CACHE_KEY, result)
        return True

    async def run(self) -> ShowsResult:
        """Run fetch, match and enrich without touching the cache."""
        logger.info("Starting show pipeline run")

        listings, references = await asyncio.gather(
            self._fetch(self.listing_fetcher),
            self._fetch(self.reference_fetcher),
        )

        matches = self.matcher.match_all(references, listings)
        shows = await self.enrich_all(matches)

        logger.info(
            f"Show pipeline complete: {len(listings)} listings, "
            f"{len(references)} productions, {len(shows)} shows"
        )
        return ShowsResult(
            shows=shows,
            listing_count=len(listings),
            reference_count=len(references),
        )

    async def enrich_all(self, matches: list[MatchResult]) -> list[EnrichedShow]:
        """Enrich matches concurrently; output follows the input order."""
        sem = asyncio.Semaphore(self.max_concurrency)
        tasks = [self._enrich_one(sem, match) for match in matches]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        shows: list[EnrichedShow] = []
        for match, result in zip(matches, results):
            if isinstance(result, Exception):
                logger.warning(f"Enrichment failed for '{match.reference.title}': {result}")
                shows.append(self.enricher.fallback(match.reference))
                continue
            if result is None:
                continue  # dropped by policy
            shows.append(result)

        return shows

    async def _enrich_one(
        self,
        sem: asyncio.Semaphore,
        match: MatchResult,
    ) -> EnrichedShow | None:
        async with sem:
            return await self.enricher.enrich(match)

    async def _fetch(self, fetcher: BaseFetcher) -> list:
        """Run a fetcher; one that raises counts as an empty source."""
        try:
            return await fetcher.fetch()
        except Exception as e:
            logger.error(f"{fetcher.name} fetch failed: {e}", exc_info=True)
            return []
