# File: tests/conftest.py
from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from aiohttp import web

from email_scout.config import CrawlerConfig
from email_scout.logger import configure


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Point the project logger back at the real stderr after CliRunner swapped it."""
    yield
    configure(level="INFO")


@pytest.fixture()
def fast_config() -> CrawlerConfig:
    """
    Return a CrawlerConfig with short timeouts for tests against local servers.
    """
    return CrawlerConfig(
        page_budget=100,
        concurrency=5,
        timeout=2.0,
        max_retries=2,
        user_agent="TestAgent/1.0",
    )


@pytest.fixture()
def html_page() -> str:
    """
    Markup with one relative, one mailto and one cross-origin link plus a plain-text email.
    """
    return (
        "<html><body>"
        '<a href="/about">About</a>'
        '<a href="mailto:x@y.com">Mail</a>'
        '<a href="https://other.com/x">Other</a>'
        "<p>contact: jane@example.com</p>"
        "</body></html>"
    )


@pytest_asyncio.fixture
async def serve(
    unused_tcp_port_factory,
) -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """Start aiohttp apps on free ports, yield their base URLs, clean up afterwards."""
    runners: list[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        port = unused_tcp_port_factory()
        runner = web.AppRunner(app)
        await runner.setup()
        runners.append(runner)
        await web.TCPSite(runner, "127.0.0.1", port).start()
        return f"http://127.0.0.1:{port}"

    yield _serve
    for runner in runners:
        await runner.cleanup()
