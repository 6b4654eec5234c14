"""Reduce a user's repositories and recent commits to a ProfileStats."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Callable, List, Optional

from dateutil.relativedelta import relativedelta

from .github_base import ACTIVE_REPO_LIMIT, TOP_LANGUAGE_COUNT, GitHubClient
from .log import get_logger
from .models import CommitFetchOutcome, LanguageShare, ProfileStats, RepositorySummary

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def commit_cutoff(now: datetime) -> datetime:
    """One calendar month before ``now``; day-of-month clamps (31 Mar -> 28/29 Feb)."""
    return now - relativedelta(months=1)


def format_since(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def percentage(count: int, total: int) -> int:
    """Integer percentage, rounding halves up."""
    if total <= 0:
        return 0
    return (200 * count + total) // (2 * total)


def rank_languages(counts: Counter, total: int, limit: int = TOP_LANGUAGE_COUNT) -> tuple[LanguageShare, ...]:
    # Ties on count fall back to the language name so ordering never depends on input order.
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:limit]
    return tuple(LanguageShare(name, percentage(count, total)) for name, count in ranked)


class StatsAggregator:
    def __init__(self, client: Optional[GitHubClient] = None, clock: Callable[[], datetime] = utc_now):
        self.client = client or GitHubClient()
        self.clock = clock

    def fetch_repositories(self, username: str) -> List[RepositorySummary]:
        # UpstreamError from the client propagates to the caller.
        return [RepositorySummary.from_api(r) for r in self.client.list_repositories(username)]

    def fetch_commit_count(self, username: str, repo: str, cutoff: datetime) -> CommitFetchOutcome:
        try:
            commits = self.client.list_commits(username, repo, format_since(cutoff))
        except Exception as e:
            logger.warning("Error fetching commits for repository %s/%s: %s", username, repo, e)
            return CommitFetchOutcome(repo, 0, error=str(e) or type(e).__name__)
        return CommitFetchOutcome(repo, len(commits))

    def aggregate(self, username: str) -> ProfileStats:
        repos = self.fetch_repositories(username)

        language_counts: Counter = Counter()
        total_stars = 0
        for repo in repos:
            if repo.language:
                language_counts[repo.language] += 1
            total_stars += repo.star_count

        cutoff = commit_cutoff(self.clock())
        # The API already sorted by last update; only the head is inspected.
        active = repos[:ACTIVE_REPO_LIMIT]
        outcomes = [self.fetch_commit_count(username, repo.name, cutoff) for repo in active]

        stats = ProfileStats(
            top_languages=rank_languages(language_counts, len(repos)),
            total_stars=total_stars,
            recent_commits=sum(o.count for o in outcomes),
            last_updated=self.clock(),
            skipped_repositories=tuple(o.repository for o in outcomes if not o.ok),
        )
        logger.debug(
            "Aggregated %s: %d repos, %d stars, %d recent commits, %d skipped",
            username, len(repos), stats.total_stars, stats.recent_commits, len(stats.skipped_repositories),
        )
        return stats
