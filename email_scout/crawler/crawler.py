# === FILE: email_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional, Set

from aiohttp import ClientSession

from email_scout.config import CrawlerConfig
from email_scout.crawler.extractor import extract_emails, extract_links, is_binary_file
from email_scout.crawler.fetcher import Fetcher
from email_scout.crawler.frontier import Frontier
from email_scout.crawler.models import CrawlJob, CrawlResult, FetchFailure
from email_scout.logger import LOGGER_NAME

__all__ = ("EmailCrawler", "crawl_website_for_emails")


class EmailCrawler:
    """Асинхронный BFS-краулер, собирающий email-адреса в пределах одного origin."""

    def __init__(self, config: Optional[CrawlerConfig] = None, session: Optional[ClientSession] = None) -> None:
        self.config = config or CrawlerConfig()
        self.session = session
        self._owns_session = session is None
        self.frontier: Optional[Frontier] = None
        self.found_emails: Set[str] = set()
        self.failed_urls: List[str] = []
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> EmailCrawler:
        if self.session is None:
            self.session = ClientSession(
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, start_url: str) -> CrawlResult:
        job = CrawlJob.create(start_url, self.config)
        if not self.session:
            raise RuntimeError("Session not initialized")

        self.logger.info("Starting email crawl for %s", job.start_url)
        start = time.monotonic()
        frontier = self.frontier = Frontier(job.start_url, job.page_budget)
        self.found_emails = set()
        self.failed_urls = []
        fetcher = Fetcher(self.session, self.config)

        workers = [asyncio.create_task(self._worker(job, fetcher, frontier)) for _ in range(job.concurrency)]
        try:
            await asyncio.gather(*workers)
        except Exception as exc:
            for w in workers:
                w.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
            self.logger.error("Crawl error: %s", exc)
            raise

        duration = time.monotonic() - start
        self.logger.info(
            "Crawl complete: %d emails from %d pages in %.2f s",
            len(self.found_emails), len(frontier.visited), duration,
        )
        return CrawlResult(
            start_url=job.start_url,
            emails=sorted(self.found_emails),
            pages_visited=len(frontier.visited),
        )

    async def stop(self) -> None:
        """Ask the workers to finish after the pages they are processing."""
        if self.frontier is not None:
            await self.frontier.close()

    async def _worker(self, job: CrawlJob, fetcher: Fetcher, frontier: Frontier) -> None:
        while True:
            url = await frontier.claim()
            if url is None:
                break
            try:
                await self._process(job, fetcher, frontier, url)
            except Exception as exc:
                self.logger.warning("Failed to process %s: %s", url, exc)
            finally:
                await frontier.release()

    async def _process(self, job: CrawlJob, fetcher: Fetcher, frontier: Frontier, url: str) -> None:
        self.logger.info("Crawling: %s (%d/%d)", url, len(frontier.visited), job.page_budget)

        if is_binary_file(url):
            self.logger.info("Skipping binary file: %s", url)
            return

        outcome = await fetcher.fetch(url)
        if isinstance(outcome, FetchFailure):
            self.failed_urls.append(url)
            return

        if "text/html" not in outcome.content_type.lower():
            self.logger.info("Not HTML (%s): %s", outcome.content_type, url)
            return

        self.found_emails.update(extract_emails(outcome.body))
        for link in extract_links(job.base_origin, outcome.body):
            frontier.offer(link)


async def crawl_website_for_emails(
    start_url: str, config: Optional[CrawlerConfig] = None
) -> CrawlResult:
    """Crawl *start_url* with a fresh session and return the emails found."""
    async with EmailCrawler(config) as crawler:
        return await crawler.crawl(start_url)
