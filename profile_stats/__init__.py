"""SVG profile card summarizing a GitHub user's languages, stars and recent commits."""

from .aggregator import StatsAggregator
from .cache import StatsCache
from .card import ProfileStatsCard, handler, is_local_request
from .github_base import ClientInputError, GitHubClient, ProfileStatsError, UpstreamError
from .models import LanguageShare, ProfileStats
from .renderer import render

__all__ = [
    "ClientInputError",
    "GitHubClient",
    "LanguageShare",
    "ProfileStats",
    "ProfileStatsCard",
    "ProfileStatsError",
    "StatsAggregator",
    "StatsCache",
    "UpstreamError",
    "handler",
    "is_local_request",
    "render",
]
