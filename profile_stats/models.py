"""Value types passed between the aggregator, cache and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class LanguageShare:
    name: str
    percentage: int


@dataclass(frozen=True)
class ProfileStats:
    top_languages: tuple[LanguageShare, ...]
    total_stars: int
    recent_commits: int
    last_updated: datetime
    # Repositories whose commit history could not be fetched. Not rendered.
    skipped_repositories: tuple[str, ...] = field(default=(), compare=False)

    def restamped(self, when: datetime) -> "ProfileStats":
        return replace(self, last_updated=when)


@dataclass(frozen=True)
class RepositorySummary:
    name: str
    language: Optional[str]
    star_count: int

    @classmethod
    def from_api(cls, payload: dict) -> "RepositorySummary":
        return cls(
            name=payload["name"],
            language=payload.get("language") or None,
            star_count=max(int(payload.get("stargazers_count") or 0), 0),
        )


@dataclass(frozen=True)
class CommitFetchOutcome:
    repository: str
    count: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
