# github_base.py

from __future__ import annotations

import json
import os
import urllib.error
import urllib.request
from typing import Any, Optional
from urllib.parse import quote, urlencode

# --- SHARED CONFIG ---
API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com").rstrip("/")
REQUEST_TIMEOUT = float(os.environ.get("PROFILE_STATS_TIMEOUT", "10"))
USER_AGENT = "GitHub-Profile-Widget"
HEADERS = {"User-Agent": USER_AGENT, "Accept": "application/vnd.github+json"}

REPO_LIMIT = 100
ACTIVE_REPO_LIMIT = 5
COMMIT_LIMIT = 50
TOP_LANGUAGE_COUNT = 3

CACHE_TTL = 24 * 60 * 60      # 24 hours
CLIENT_CACHE_MAX_AGE = 3600   # 1 hour, sent to embedding clients


# --- ERRORS ---
class ProfileStatsError(Exception):
    """Base class for errors raised while building a profile card."""


class ClientInputError(ProfileStatsError):
    """The inbound request is missing or has an invalid parameter."""


class UpstreamError(ProfileStatsError):
    """The GitHub API could not supply the repository list."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


# --- UTILITIES ---
def escape_xml(text):
    """Sanitize text for SVG output."""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def format_count(value: int) -> str:
    return f"{value:,}"


class GitHubClient:
    """Minimal GitHub REST client: one GET per call, JSON decoded."""

    def __init__(self, api_url: str = API_URL, timeout: float = REQUEST_TIMEOUT):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def build_url(self, path: str, params: Optional[dict] = None) -> str:
        url = f"{self.api_url}{path}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def _make_request(self, url: str) -> Any:
        """Shared HTTP handler. Raises urllib errors on non-2xx or transport failure."""
        req = urllib.request.Request(url, headers=HEADERS)
        with urllib.request.urlopen(req, timeout=self.timeout) as resp:
            return json.load(resp)

    def list_repositories(self, username: str) -> list:
        url = self.build_url(
            f"/users/{quote(username, safe='')}/repos",
            {"per_page": REPO_LIMIT, "sort": "updated"},
        )
        try:
            repos = self._make_request(url)
        except urllib.error.HTTPError as e:
            raise UpstreamError(f"GitHub API error: {e.code} {e.reason}", status=e.code) from e
        except (urllib.error.URLError, OSError, ValueError) as e:
            raise UpstreamError(f"GitHub API request failed: {e}") from e

        if not isinstance(repos, list):
            raise UpstreamError("GitHub API error: unexpected repository payload")
        return repos

    def list_commits(self, username: str, repo: str, since: str) -> list:
        url = self.build_url(
            f"/repos/{quote(username, safe='')}/{quote(repo, safe='')}/commits",
            {"author": username, "since": since, "per_page": COMMIT_LIMIT},
        )
        commits = self._make_request(url)
        if not isinstance(commits, list):
            raise ValueError(f"unexpected commit payload for {repo}")
        return commits
