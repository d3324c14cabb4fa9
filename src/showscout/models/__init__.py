"""Pipeline result models."""

from showscout.models.show import PLACEHOLDER_LINK, EnrichedShow, MatchResult, ShowsResult

__all__ = ["PLACEHOLDER_LINK", "EnrichedShow", "MatchResult", "ShowsResult"]
