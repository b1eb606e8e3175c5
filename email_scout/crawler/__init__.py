"""Concurrent breadth-first email crawler."""
from email_scout.crawler.crawler import EmailCrawler, crawl_website_for_emails
from email_scout.crawler.models import CrawlJob, CrawlResult, InvalidStartURL

__all__ = ["EmailCrawler", "crawl_website_for_emails", "CrawlJob", "CrawlResult", "InvalidStartURL"]
