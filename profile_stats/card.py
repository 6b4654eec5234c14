# card.py

from __future__ import annotations

from datetime import datetime, timezone
from http.server import BaseHTTPRequestHandler
from typing import Callable, Optional
from urllib.parse import parse_qs, urlsplit

from .aggregator import StatsAggregator, utc_now
from .cache import StatsCache
from .github_base import CLIENT_CACHE_MAX_AGE, ClientInputError
from .log import get_logger
from .models import LanguageShare, ProfileStats
from .renderer import ProfileCardRenderer

logger = get_logger(__name__)

MISSING_USER_MESSAGE = "Please provide a GitHub username: ?user=username"
UPSTREAM_FAILURE_MESSAGE = "Error fetching GitHub data"
LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})

SAMPLE_STATS = ProfileStats(
    top_languages=(
        LanguageShare("TypeScript", 35),
        LanguageShare("JavaScript", 28),
        LanguageShare("Python", 20),
    ),
    total_stars=1337,
    recent_commits=42,
    last_updated=datetime(1970, 1, 1, tzinfo=timezone.utc),
)


def is_local_request(host: Optional[str]) -> bool:
    """True when the request targets a loopback host (``Host`` header value, port optional)."""
    if not host:
        return False
    try:
        hostname = urlsplit(f"//{host}").hostname or ""
    except ValueError:
        return False
    return hostname in LOOPBACK_HOSTS or "localhost" in hostname


class ProfileStatsCard:
    """Resolves stats for one username and renders them."""

    def __init__(
        self,
        username: str,
        cache: StatsCache,
        aggregator: Optional[StatsAggregator] = None,
        local: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.user = username
        self.cache = cache
        self.aggregator = aggregator or StatsAggregator()
        self.local = local
        self.clock = clock
        self.renderer = ProfileCardRenderer()

    def fetch_data(self) -> ProfileStats:
        if self.local:
            logger.info("Using sample data for local development")
            return SAMPLE_STATS.restamped(self.clock())

        key = StatsCache.key_for(self.user)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", self.user)
            return cached

        logger.debug("Cache miss for %s, aggregating", self.user)
        stats = self.aggregator.aggregate(self.user)
        self.cache.put(key, stats)
        return stats

    def render_body(self, stats: ProfileStats) -> str:
        return self.renderer.render(stats, self.user)

    def process(self) -> str:
        """Main execution flow."""
        if not self.user:
            raise ClientInputError(MISSING_USER_MESSAGE)
        return self.render_body(self.fetch_data())


def _send(request_handler: BaseHTTPRequestHandler, status: int, content_type: str, body: str, headers=None):
    payload = body.encode()
    request_handler.send_response(status)
    request_handler.send_header("Content-Type", content_type)
    request_handler.send_header("Content-Length", str(len(payload)))
    for name, value in (headers or {}).items():
        request_handler.send_header(name, value)
    request_handler.end_headers()
    request_handler.wfile.write(payload)


def _respond_with_card(request_handler: BaseHTTPRequestHandler, cache: Optional[StatsCache] = None,
                       aggregator: Optional[StatsAggregator] = None):
    query = parse_qs(urlsplit(request_handler.path).query)
    card = ProfileStatsCard(
        query.get("user", [""])[0],
        cache=cache if cache is not None else handler_cache(request_handler),
        aggregator=aggregator,
        local=is_local_request(request_handler.headers.get("Host")),
    )

    try:
        svg = card.process()
    except ClientInputError as e:
        _send(request_handler, 400, "text/plain; charset=utf-8", str(e))
        return
    except Exception:
        logger.exception("Failed to build profile card for %r", card.user)
        _send(request_handler, 500, "text/plain; charset=utf-8", UPSTREAM_FAILURE_MESSAGE)
        return

    _send(request_handler, 200, "image/svg+xml", svg, headers={
        "Cache-Control": f"public, max-age={CLIENT_CACHE_MAX_AGE}",
        "Access-Control-Allow-Origin": "*",
    })


def handler_cache(request_handler: BaseHTTPRequestHandler) -> StatsCache:
    # A server may own its cache; otherwise the handler class's cache lives for the process.
    server_cache = getattr(getattr(request_handler, "server", None), "stats_cache", None)
    if isinstance(server_cache, StatsCache):
        return server_cache
    return handler.stats_cache


class handler(BaseHTTPRequestHandler):
    stats_cache = StatsCache()

    def do_GET(self):
        _respond_with_card(self)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)
