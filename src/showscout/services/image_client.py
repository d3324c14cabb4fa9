"""HTTP client for poster image lookup and validation."""

import logging

import httpx
from bs4 import BeautifulSoup

from showscout.config import settings
from showscout.utils.text import normalise_url

logger = logging.getLogger(__name__)

INFOBOX_IMAGE_SELECTOR = ".infobox-image img"


class ImageClient:
    """Client for checking image URLs and reading Wikipedia infobox images."""

    def __init__(self, timeout: float | None = None, user_agent: str | None = None) -> None:
        """
        Initialize image client.

        Args:
            timeout: Request timeout in seconds (uses settings if not provided)
            user_agent: User-Agent header (uses settings if not provided)
        """
        self.timeout = timeout or settings.scrape_timeout
        self.user_agent = user_agent or settings.user_agent

    async def validate_image(self, url: str | None) -> str | None:
        """
        Check that an image URL resolves with a HEAD request.

        Args:
            url: Absolute image URL

        Returns:
            The same URL if the server answered 2xx, otherwise None
        """
        if not url:
            return None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
            ) as client:
                response = await client.head(url)

                if response.is_success:
                    return url

                logger.warning(f"Image rejected ({response.status_code}): {url}")
                return None

        except Exception as e:
            logger.warning(f"Image validation error for '{url}': {e}")
            return None

    async def get_infobox_image(self, page_url: str | None) -> str | None:
        """
        Get the main infobox image from a Wikipedia article.

        Args:
            page_url: Absolute URL of the production's article

        Returns:
            Absolute image URL or None if the page has no infobox image
        """
        if not page_url:
            return None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
            ) as client:
                response = await client.get(page_url)
                response.raise_for_status()
                return self.extract_infobox_image(response.text)

        except Exception as e:
            logger.error(f"Infobox image error for '{page_url}': {e}")
            return None

    def extract_infobox_image(self, html: str) -> str | None:
        """
        Extract the infobox image src from article HTML.

        Args:
            html: Wikipedia article HTML

        Returns:
            Absolute image URL or None
        """
        soup = BeautifulSoup(html, "html.parser")
        img = soup.select_one(INFOBOX_IMAGE_SELECTOR)
        if not img or not img.get("src"):
            return None
        return normalise_url(img["src"], settings.reference_base_url)
