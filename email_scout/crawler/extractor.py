# email_scout/crawler/extractor.py
"""
Page processing for EmailScout: email matching, same-origin link extraction
and the binary-extension filter.
"""
from __future__ import annotations

import re
from typing import Set
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from email_scout.logger import logger
from email_scout.utils import lower_scheme_host

# TLD part is lower-case only; uppercase TLDs are not matched.
EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-z]{2,}")

BINARY_EXTENSIONS = (
    "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
    "zip", "rar", "7z", "tar", "gz",
    "mp4", "mov", "avi", "wmv", "mp3", "wav",
    "jpg", "jpeg", "png", "gif", "svg",
)
_BINARY_RE = re.compile(r"\.(%s)$" % "|".join(BINARY_EXTENSIONS), re.IGNORECASE)


def extract_emails(body: str) -> Set[str]:
    """Return every substring of *body* matching :data:`EMAIL_RE`, as found."""
    if not body:
        return set()
    return set(EMAIL_RE.findall(body))


def extract_links(base_origin: str, html: str) -> Set[str]:
    """
    Resolve every ``<a href>`` against *base_origin* and keep the absolute URLs
    that start with it.

    Scope is a plain string-prefix test, so ``https://example.com.evil.com``
    passes for origin ``https://example.com``. Unresolvable hrefs are skipped.
    """
    if not isinstance(html, str) or not html.strip():
        logger.debug("Empty or non-text markup for %s, no links", base_origin)
        return set()

    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as exc:
        logger.warning("Could not parse markup from %s: %s", base_origin, exc)
        return set()

    links: Set[str] = set()
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        try:
            absolute = lower_scheme_host(urljoin(base_origin, href.strip()))
        except ValueError:
            logger.debug("Skipping malformed href %r", href)
            continue
        if absolute.startswith(base_origin):
            links.add(absolute)

    logger.debug("Extracted %d links from %s", len(links), base_origin)
    return links


def is_binary_file(url: str) -> bool:
    """True if the URL path ends with a known non-HTML extension."""
    return bool(_BINARY_RE.search(urlsplit(url).path))
