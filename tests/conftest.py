import io
import os
import sys
from datetime import datetime, timezone

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from profile_stats.aggregator import StatsAggregator

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def repo(name, language=None, stars=0):
    return {'name': name, 'language': language, 'stargazers_count': stars}


def commit(date):
    return {'sha': date, 'commit': {'author': {'name': 'alice', 'date': date}}}


class FakeClient:
    """Stands in for GitHubClient; records every call."""

    def __init__(self, repos=None, commits=None, repo_error=None, commit_errors=None):
        self.repos = repos or []
        self.commits = commits or {}
        self.repo_error = repo_error
        self.commit_errors = commit_errors or {}
        self.repo_calls = []
        self.commit_calls = []

    def list_repositories(self, username):
        self.repo_calls.append(username)
        if self.repo_error:
            raise self.repo_error
        return list(self.repos)

    def list_commits(self, username, repo, since):
        self.commit_calls.append((username, repo, since))
        if repo in self.commit_errors:
            raise self.commit_errors[repo]
        return list(self.commits.get(repo, []))


class FakeRequest:
    """Just enough of BaseHTTPRequestHandler for _respond_with_card."""

    def __init__(self, path, host='stats.example.com'):
        self.path = path
        self.headers = {'Host': host} if host else {}
        self.wfile = io.BytesIO()
        self.status = None
        self.sent_headers = {}

    def send_response(self, status):
        self.status = status

    def send_header(self, name, value):
        self.sent_headers[name] = value

    def end_headers(self):
        pass

    @property
    def body(self):
        return self.wfile.getvalue().decode()


@pytest.fixture
def make_aggregator():
    def _make(client):
        return StatsAggregator(client, clock=lambda: NOW)
    return _make
