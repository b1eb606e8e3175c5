# email_scout/crawler/fetcher.py
"""
Fetcher module: one GET per attempt with timeout, bounded retry and optional
exponential backoff. Failures are returned as values, never raised.
"""
from __future__ import annotations

import asyncio
import logging

from aiohttp import ClientError, ClientSession, ClientTimeout

from email_scout.config import CrawlerConfig
from email_scout.crawler.models import FetchFailure, FetchOutcome, FetchSuccess
from email_scout.logger import LOGGER_NAME


class Fetcher:
    """Retrieves raw page content, tolerating transient failures."""

    def __init__(self, session: ClientSession, config: CrawlerConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.timeout)
        self.logger = logging.getLogger(LOGGER_NAME)

    async def fetch(self, url: str) -> FetchOutcome:
        """
        GET *url* up to ``max_retries + 1`` times.

        Any network error, timeout or non-2xx status counts as a failed
        attempt. Returns FetchSuccess with the declared content type and the
        body text, or FetchFailure carrying the last error.
        """
        attempts = self.config.max_retries + 1
        last_error = "no attempt made"
        for attempt in range(1, attempts + 1):
            try:
                async with self.session.get(url, timeout=self._timeout) as resp:
                    resp.raise_for_status()
                    content_type = resp.headers.get("Content-Type", "")
                    body = await resp.text(errors="replace")
                    return FetchSuccess(url=url, content_type=content_type, body=body)
            except (ClientError, asyncio.TimeoutError) as exc:
                last_error = str(exc) or type(exc).__name__
            if attempt < attempts:
                self.logger.debug("Retrying %s (%d/%d): %s", url, attempt, self.config.max_retries, last_error)
                if self.config.retry_backoff:
                    await asyncio.sleep(min(60, self.config.retry_backoff * 2 ** (attempt - 1)))

        self.logger.warning(
            "Failed to fetch %s after %d retries: %s", url, self.config.max_retries, last_error
        )
        return FetchFailure(url=url, error=f"Failed to fetch {url}: {last_error}")
