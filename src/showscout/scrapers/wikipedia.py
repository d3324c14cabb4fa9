"""Wikipedia West End theatre table scraper."""

import logging

import httpx
from bs4 import BeautifulSoup, Tag

from showscout.config import settings
from showscout.scrapers.base import BaseFetcher
from showscout.scrapers.models import RawReference
from showscout.utils.text import normalise_url

logger = logging.getLogger(__name__)

# Column offsets in the "Current productions" table
THEATRE_COL = 3
PRODUCTION_COL = 4
CATEGORY_COL = 5
OPENING_COL = 6
CLOSING_COL = 7

MIN_COLUMNS = 5
EMPTY_CELL = "•"


class WikipediaScraper(BaseFetcher[RawReference]):
    """
    Scraper for the West End theatre article on Wikipedia.

    The first sortable wikitable lists one theatre per row with its current
    production, genre, opening and closing dates. Rows for dark theatres
    show a bullet instead of a production and are skipped.
    """

    name = "Wikipedia"

    def __init__(self, url: str | None = None, base_url: str | None = None) -> None:
        self.url = url or settings.reference_url
        self.base_url = base_url or settings.reference_base_url

    async def fetch(self) -> list[RawReference]:
        """Fetch current productions from the Wikipedia table."""
        references: list[RawReference] = []

        try:
            async with httpx.AsyncClient(
                timeout=settings.scrape_timeout,
                follow_redirects=True,
                headers={
                    "User-Agent": settings.user_agent,
                    "Accept-Language": "en-US,en;q=0.9",
                },
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()

                references = self._parse_html(response.text)

        except Exception as e:
            logger.error(f"Wikipedia scraper error: {e}", exc_info=True)
            return []

        logger.info(f"Wikipedia: Found {len(references)} productions")
        return references

    def _parse_html(self, html: str) -> list[RawReference]:
        """Parse the article HTML into raw references."""
        soup = BeautifulSoup(html, "html.parser")
        references: list[RawReference] = []

        table = soup.select_one("table.wikitable.sortable")
        if not table:
            logger.warning("Wikipedia: No sortable wikitable found")
            return []

        body = table.find("tbody") or table
        for row in body.find_all("tr"):
            try:
                reference = self._parse_row(row)
                if reference:
                    references.append(reference)
            except Exception as e:
                logger.warning(f"Wikipedia: skipping malformed row: {e}")

        return references

    def _parse_row(self, row: Tag) -> RawReference | None:
        cells = row.find_all("td")
        if len(cells) < MIN_COLUMNS:
            return None

        production_cell = cells[PRODUCTION_COL]
        raw_title = production_cell.get_text(" ", strip=True) or cells[THEATRE_COL].get_text(
            " ", strip=True
        )
        if not raw_title or raw_title == EMPTY_CELL:
            return None

        title = self.clean_title(raw_title)
        if not title:
            return None

        # Footnote anchors ("#cite_note-3") are not article links
        link = production_cell.find("a", href=lambda h: bool(h) and not h.startswith("#"))
        detail_link = normalise_url(link["href"], self.base_url) if link else None

        img = production_cell.find("img", src=True)
        image_candidate = normalise_url(img["src"], self.base_url) if img else None

        return RawReference(
            title=title,
            category=self._cell_text(cells, CATEGORY_COL) or "Unknown",
            opening_date=self._cell_text(cells, OPENING_COL) or "N/A",
            closing_date=self._cell_text(cells, CLOSING_COL) or "N/A",
            image_candidate=image_candidate,
            detail_link=detail_link,
        )

    def _cell_text(self, cells: list[Tag], index: int) -> str:
        if index >= len(cells):
            return ""
        return self.clean_title(cells[index].get_text(" ", strip=True))
