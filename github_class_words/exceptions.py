"""Errors raised while talking to the GitHub REST API.

Request-level errors propagate unchanged through discovery and traversal.
The crawl loop catches them per repository.
"""


class CrawlerError(Exception):
    """Base exception for the crawler."""


class TransportError(CrawlerError):
    """Non-2xx response that is not a rate-limit signal. Never retried."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"Unexpected code {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class RetryExhausted(CrawlerError):
    """Rate limiting persisted past the retry ceiling."""

    def __init__(self, url: str, attempts: int):
        super().__init__(f"Max retries ({attempts}) reached for {url}")
        self.url = url
        self.attempts = attempts


class ParseError(CrawlerError):
    """Response body is malformed or lacks an expected field."""
