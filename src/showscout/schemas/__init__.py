"""Pydantic schemas for API responses."""

from showscout.schemas.show import EMPTY_MESSAGE, ShowResponse, ShowsQuery, ShowsResponse

__all__ = [
    "EMPTY_MESSAGE",
    "ShowResponse",
    "ShowsQuery",
    "ShowsResponse",
]
