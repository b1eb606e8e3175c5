# === FILE: email_scout/scanner.py ===
"""
Wrapper that runs one email crawl for the CLI and the HTTP API.
"""
from typing import Optional

from email_scout.config import CrawlerConfig
from email_scout.crawler.crawler import EmailCrawler
from email_scout.crawler.models import CrawlResult


async def start_crawl(start_url: str, cfg: Optional[CrawlerConfig] = None) -> CrawlResult:
    """
    Run the crawler inside its context and return the result.

    Parameters
    ----------
    start_url : str
        Absolute http(s) URL the crawl starts from.
    cfg : CrawlerConfig, optional
        Crawl settings; built-in defaults when omitted.

    Returns
    -------
    CrawlResult
        Unique emails found, plus the number of visited pages.
    """
    async with EmailCrawler(cfg) as crawler:
        result = await crawler.crawl(start_url)
    return result

__all__ = ["start_crawl"]
