# === FILE: email_scout/server.py ===
"""
HTTP API for EmailScout (aiohttp.web).

Routes:
  POST /api/email-scraper   {"url": ...}  -> {"emails": [...]}
  POST /api/hyphen-remover  {"text": ...} -> {"text": ...}

Errors are returned as ``{"error": message}`` with status 400 for bad input
and 500 for failures of the crawl itself.
"""
from __future__ import annotations

from typing import Any, Optional

from aiohttp import web

from email_scout.config import CrawlerConfig
from email_scout.crawler.models import InvalidStartURL
from email_scout.logger import logger
from email_scout.sanitizer import sanitize_text
from email_scout.scanner import start_crawl

CONFIG_KEY = web.AppKey("config", CrawlerConfig)

_INVALID_URL = "Please provide a valid URL"


async def _read_json(request: web.Request) -> Optional[dict[str, Any]]:
    try:
        payload = await request.json()
    except (ValueError, LookupError, web.HTTPUnsupportedMediaType):
        # malformed JSON, undecodable bytes or an unknown charset
        return None
    return payload if isinstance(payload, dict) else None


def _error(message: str, status: int) -> web.Response:
    return web.json_response({"error": message}, status=status)


async def handle_email_scraper(request: web.Request) -> web.Response:
    logger.info("Received POST request to /api/email-scraper")
    payload = await _read_json(request)
    url = payload.get("url") if payload else None
    if not isinstance(url, str) or not url.strip():
        logger.info("Missing or invalid URL")
        return _error(_INVALID_URL, 400)

    try:
        result = await start_crawl(url.strip(), request.app[CONFIG_KEY])
    except InvalidStartURL as exc:
        return _error(str(exc), 400)
    except Exception as exc:
        logger.error("Error processing request: %s", exc)
        return _error(str(exc) or "Failed to crawl website", 500)

    logger.info("Crawl result: %d emails found", len(result.emails))
    return web.json_response(result.to_dict())


async def handle_hyphen_remover(request: web.Request) -> web.Response:
    payload = await _read_json(request)
    text = payload.get("text") if payload else None
    try:
        sanitized = sanitize_text(text if isinstance(text, str) else "")
    except ValueError as exc:
        return _error(str(exc), 400)
    return web.json_response({"text": sanitized})


def create_app(config: Optional[CrawlerConfig] = None) -> web.Application:
    app = web.Application()
    app[CONFIG_KEY] = config or CrawlerConfig()
    app.router.add_post("/api/email-scraper", handle_email_scraper)
    app.router.add_post("/api/hyphen-remover", handle_hyphen_remover)
    return app


def run_server(config: Optional[CrawlerConfig] = None, host: str = "127.0.0.1", port: int = 8080) -> None:
    """Serve the API until interrupted."""
    logger.info("Serving EmailScout API on http://%s:%d", host, port)
    web.run_app(create_app(config), host=host, port=port, print=None)


__all__ = ["create_app", "run_server", "CONFIG_KEY"]
