"""Base fetcher interface for show sources."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from showscout.utils.text import clean_title

RecordT = TypeVar("RecordT")


class BaseFetcher(ABC, Generic[RecordT]):
    """
    Abstract base class for all source fetchers.

    Each fetcher is tied to one external page and owns the mapping from that
    page's HTML to raw records.
    """

    name: str = "source"

    @abstractmethod
    async def fetch(self) -> list[RecordT]:
        """
        Fetch all records from the source.

        Returns:
            List of raw records in page order

        Raises:
            Should NOT raise exceptions. Return empty list on errors and log them.
        """
        pass

    def clean_title(self, title: str) -> str:
        """
        Clean a display title using the standard cleanup function.

        Args:
            title: Raw title text from the page

        Returns:
            Title without footnote markers or extra whitespace
        """
        return clean_title(title)
