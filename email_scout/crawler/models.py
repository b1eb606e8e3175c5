"""
Data models for the EmailScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from email_scout.config import CrawlerConfig
from email_scout.utils import is_absolute_http_url, origin_of


class InvalidStartURL(ValueError):
    """Start URL is missing or is not an absolute http(s) URL."""


@dataclass(frozen=True, slots=True)
class CrawlJob:
    """One crawl invocation: where to start and how much to do."""

    start_url: str
    base_origin: str
    page_budget: int = 100
    concurrency: int = 5

    @classmethod
    def create(cls, start_url: str, config: CrawlerConfig) -> CrawlJob:
        if not isinstance(start_url, str) or not start_url.strip():
            raise InvalidStartURL("Please provide a valid URL")
        if not is_absolute_http_url(start_url):
            raise InvalidStartURL(f"Invalid URL: {start_url!r}")
        return cls(
            start_url=start_url,
            base_origin=origin_of(start_url),
            page_budget=config.page_budget,
            concurrency=config.concurrency,
        )


@dataclass(slots=True)
class FetchSuccess:
    """Page retrieved: declared content type and decoded body."""

    url: str
    content_type: str
    body: str

    ok = True


@dataclass(slots=True)
class FetchFailure:
    """Page could not be retrieved after all attempts."""

    url: str
    error: str

    ok = False


FetchOutcome = Union[FetchSuccess, FetchFailure]


@dataclass(slots=True)
class CrawlResult:
    """Emails found during one crawl plus bookkeeping for reports."""

    start_url: str
    emails: List[str] = field(default_factory=list)
    pages_visited: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """JSON payload returned by the HTTP API."""
        return {"emails": list(self.emails)}
