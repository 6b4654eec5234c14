from datetime import datetime, timezone

import pytest

from profile_stats.cache import StatsCache
from profile_stats.card import ProfileStatsCard
from profile_stats.github_base import CACHE_TTL, UpstreamError
from profile_stats.models import LanguageShare, ProfileStats

from conftest import FakeClient, repo


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_stats(stars=1):
    return ProfileStats((LanguageShare('Go', 100),), stars, 0, datetime(2026, 10, 18, tzinfo=timezone.utc))


def test_missing_key_is_absent():
    assert StatsCache().get('github-stats-nobody') is None


def test_entry_expires_strictly_at_ttl():
    clock = FakeClock()
    cache = StatsCache(ttl=60, clock=clock)
    stats = make_stats()
    cache.put('k', stats)

    clock.advance(59.999)
    assert cache.get('k') is stats
    clock.advance(0.001)
    assert cache.get('k') is None


def test_put_overwrites_existing_entry():
    cache = StatsCache()
    cache.put('k', make_stats(1))
    cache.put('k', make_stats(2))
    assert cache.get('k').total_stars == 2
    assert len(cache) == 1


def test_put_accepts_ttl_override():
    clock = FakeClock()
    cache = StatsCache(ttl=60, clock=clock)
    cache.put('k', make_stats(), ttl=5)
    clock.advance(5)
    assert cache.get('k') is None


def test_key_includes_username():
    assert StatsCache.key_for('alice') == 'github-stats-alice'


def test_card_reuses_cached_stats_for_a_day(make_aggregator):
    clock = FakeClock()
    cache = StatsCache(clock=clock)
    client = FakeClient([repo('a', 'Python', 3)])
    card = ProfileStatsCard('alice', cache=cache, aggregator=make_aggregator(client))

    card.process()
    clock.advance(CACHE_TTL - 1)
    card.process()
    assert len(client.repo_calls) == 1

    clock.advance(2)
    card.process()
    card.process()
    assert len(client.repo_calls) == 2


def test_failed_aggregation_is_not_cached(make_aggregator):
    cache = StatsCache()
    client = FakeClient(repo_error=UpstreamError('GitHub API error: 502 Bad Gateway', status=502))
    card = ProfileStatsCard('alice', cache=cache, aggregator=make_aggregator(client))
    with pytest.raises(UpstreamError):
        card.process()
    assert cache.get(StatsCache.key_for('alice')) is None
