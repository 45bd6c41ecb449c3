"""Cached GitHub REST client using httpx + Cachetta, with backoff on rate limiting."""

import hashlib
import json
import logging
import time
from datetime import timedelta
from pathlib import Path

import httpx
from cachetta import Cachetta

from .exceptions import ParseError, RetryExhausted, TransportError
from .settings import Settings, get_settings

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

# GitHub answers primary rate limiting with 403
RATE_LIMIT_STATUS = 403

# Rate limit backoff settings: 2s, 4s, 8s, ...
INITIAL_BACKOFF = 2
BACKOFF_FACTOR = 2

DEFAULT_DURATION = timedelta(days=30)

# Batch workload: connect within 2 minutes, then wait up to 90 minutes on I/O
TIMEOUT = httpx.Timeout(90 * 60.0, connect=2 * 60.0)


class _RateLimitError(Exception):
    pass


def _cache_key(url: str) -> str:
    return hashlib.sha256(url.encode()).hexdigest()[:16]


class GitHubClient:
    """Sequential GitHub client: one request at a time, 2xx bodies cached on disk."""

    def __init__(self, settings: Settings | None = None, skip_cache: bool = False):
        settings = settings or get_settings()
        headers = {"Accept": "application/vnd.github+json"}
        if settings.github_token:
            headers["Authorization"] = f"token {settings.github_token}"
        self._client = httpx.Client(headers=headers, timeout=TIMEOUT, follow_redirects=True)
        self.api_base = settings.api_base.rstrip("/")
        self.max_retries = settings.retry_ceiling
        self.retries = 0  # rate-limited attempts that were retried

        cache_dir = Path(settings.cache_dir)
        cache_dir.mkdir(parents=True, exist_ok=True)

        # Pure fetch function -- no retry logic.
        # Cachetta handles caching; exceptions propagate (not cached).
        def _do_fetch(url):
            resp = self._client.request("GET", url)

            if resp.status_code == RATE_LIMIT_STATUS:
                raise _RateLimitError()

            if 200 <= resp.status_code < 300:
                return {"status": resp.status_code, "body": resp.text}

            raise TransportError(resp.status_code, url)

        def _cache_path(url):
            return cache_dir / f"{_cache_key(url)}.json"

        cache = Cachetta(path=_cache_path, duration=DEFAULT_DURATION)
        if skip_cache:
            self._fetch = cache.copy(read=False)(_do_fetch)
        else:
            self._fetch = cache(_do_fetch)

    def resolve(self, url: str, params: dict | None = None) -> str:
        """Build an absolute URL from an API path or a full URL plus query params."""
        if not url.startswith(("http://", "https://")):
            url = f"{self.api_base}/{url.lstrip('/')}"
        if params:
            url = str(httpx.URL(url).copy_merge_params(params))
        return url

    def fetch_text(self, url: str, params: dict | None = None, max_retries: int | None = None) -> str:
        """GET a URL and return the response body unmodified.

        A 403 is treated as rate limiting: wait, double the wait and try again,
        up to ``max_retries`` attempts in total. Any other non-2xx status raises
        TransportError on the first attempt.
        """
        url = self.resolve(url, params)
        if max_retries is None:
            max_retries = self.max_retries

        backoff = INITIAL_BACKOFF
        for attempt in range(1, max_retries + 1):
            try:
                return self._fetch(url)["body"]
            except _RateLimitError:
                if attempt == max_retries:
                    break
                print(
                    f"Received {RATE_LIMIT_STATUS} - Rate limit exceeded. Retrying in {backoff} seconds...",
                    flush=True,
                )
                self.retries += 1
                time.sleep(backoff)
                backoff *= BACKOFF_FACTOR

        raise RetryExhausted(url, max_retries)

    def fetch_json(self, url: str, params: dict | None = None, max_retries: int | None = None):
        """Like fetch_text, decoding the body as JSON."""
        text = self.fetch_text(url, params=params, max_retries=max_retries)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON from {self.resolve(url, params)}: {e}") from e

    def close(self):
        self._client.close()


# Client instances keyed by config
_clients: dict[tuple, GitHubClient] = {}


def get_client(settings: Settings | None = None, skip_cache: bool = False) -> GitHubClient:
    """Get or create a GitHub client with the given configuration."""
    settings = settings or get_settings()
    key = (settings.github_token, settings.api_base, str(settings.cache_dir), settings.retry_ceiling, skip_cache)
    if key not in _clients:
        _clients[key] = GitHubClient(settings, skip_cache=skip_cache)
    return _clients[key]
