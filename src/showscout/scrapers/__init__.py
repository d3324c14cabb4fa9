"""Source fetchers for the listing and reference pages."""

from showscout.scrapers.base import BaseFetcher
from showscout.scrapers.london_theatre import LondonTheatreScraper
from showscout.scrapers.models import RawListing, RawReference
from showscout.scrapers.wikipedia import WikipediaScraper

__all__ = [
    "BaseFetcher",
    "LondonTheatreScraper",
    "RawListing",
    "RawReference",
    "WikipediaScraper",
]
