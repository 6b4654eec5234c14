"""Local development server: ``python -m profile_stats``.

Requests arrive on a loopback host, so the card is built from sample data.
"""

import os
from http.server import ThreadingHTTPServer

from .cache import StatsCache
from .card import handler
from .log import get_logger

logger = get_logger(__name__)


class ProfileStatsServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address, handler_class=handler):
        super().__init__(address, handler_class)
        self.stats_cache = StatsCache()


def main():
    port = int(os.environ.get("PORT", 8787))
    server = ProfileStatsServer(("127.0.0.1", port))
    logger.info("Serving profile cards on http://localhost:%d/?user=octocat", port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
