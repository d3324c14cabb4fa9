"""London Theatre "what's on" scraper."""

import logging
import re

import httpx
from bs4 import BeautifulSoup, Tag

from showscout.config import settings
from showscout.scrapers.base import BaseFetcher
from showscout.scrapers.models import RawListing
from showscout.utils.text import first_srcset_url

logger = logging.getLogger(__name__)

POSTER_ATTR = "data-test-id"
POSTER_PREFIX = "poster-"
DESKTOP_MEDIA = "(min-width: 768px)"


class LondonTheatreScraper(BaseFetcher[RawListing]):
    """
    Scraper for londontheatre.co.uk.

    The what's-on page is server rendered: every show is a poster container
    `div[data-test-id="poster-<title>"]` holding an anchor to the show page
    and a <picture> with responsive <source> elements.
    """

    name = "London Theatre"

    def __init__(self, base_url: str | None = None, path: str | None = None) -> None:
        self.base_url = (base_url or settings.listing_base_url).rstrip("/")
        self.path = path or settings.listing_path

    @property
    def whats_on_url(self) -> str:
        return f"{self.base_url}{self.path}"

    async def fetch(self) -> list[RawListing]:
        """Fetch listings from the what's-on page."""
        listings: list[RawListing] = []

        try:
            async with httpx.AsyncClient(
                timeout=settings.scrape_timeout,
                follow_redirects=True,
                headers={"User-Agent": settings.user_agent},
            ) as client:
                response = await client.get(self.whats_on_url)
                response.raise_for_status()

                listings = self._parse_html(response.text)

        except Exception as e:
            logger.error(f"London Theatre scraper error: {e}", exc_info=True)
            return []

        logger.info(f"London Theatre: Found {len(listings)} shows")
        return listings

    def _parse_html(self, html: str) -> list[RawListing]:
        """Parse the what's-on HTML into raw listings."""
        soup = BeautifulSoup(html, "html.parser")
        listings: list[RawListing] = []

        posters = soup.find_all("div", attrs={POSTER_ATTR: re.compile(rf"^{POSTER_PREFIX}")})
        logger.debug(f"Found {len(posters)} poster containers")

        for poster in posters:
            try:
                listing = self._parse_poster(poster)
                if listing:
                    listings.append(listing)
            except Exception as e:
                logger.warning(f"London Theatre: skipping malformed poster: {e}")

        return listings

    def _parse_poster(self, poster: Tag) -> RawListing | None:
        title = poster.get(POSTER_ATTR, "")[len(POSTER_PREFIX):].strip()
        if not title:
            img = poster.find("img")
            title = (img.get("alt") or "").strip() if img else ""
        if not title:
            return None

        link = poster.find("a", href=True)
        url = link["href"] if link else None

        return RawListing(
            title=title,
            url=url,
            image_candidate=self._extract_image(poster),
        )

    def _extract_image(self, poster: Tag) -> str | None:
        """Desktop <source> first, then any <source>, then a plain <img>."""
        desktop = poster.find("source", attrs={"media": DESKTOP_MEDIA})
        if desktop and desktop.get("srcset"):
            return first_srcset_url(desktop["srcset"])

        source = poster.find("source", srcset=True)
        if source:
            return first_srcset_url(source["srcset"])

        img = poster.find("img", src=True)
        if img:
            return img["src"].strip() or None

        return None
