"""
Loaders - get markup from files, URLs and browser pages into a DOMNode
"""

import time
from dataclasses import replace
import logging
import aiofiles
import aiohttp
from playwright.async_api import Page
from .config import ParserConfig, FetchConfig
from .dom import DOMNode
from .error_handler import ErrorHandler, FetchError
from .parser import HTMLParser

logger = logging.getLogger(__name__)


async def load_file(path, config: ParserConfig = None) -> DOMNode:
    """Read an HTML file and parse it; the parser handles the encoding"""
    async with aiofiles.open(path, 'rb') as f:
        content = await f.read()

    logger.info(f"Loaded {len(content)} bytes from {path}")
    return HTMLParser(config).parse(content)


async def fetch(url: str, config: ParserConfig = None, fetch_config: FetchConfig = None,
                session: aiohttp.ClientSession = None) -> DOMNode:
    """
    Download url and parse the response body

    Args:
        url: http(s) URL of the document
        config: Parser configuration
        fetch_config: User agent, timeout and retry settings
        session: Existing session to reuse; a temporary one is opened otherwise

    Raises:
        FetchError: non-200 response after any retries
        ParseError: the body could not be parsed
    """
    fetch_config = fetch_config or FetchConfig()
    error_handler = ErrorHandler(fetch_config.retry)

    if session is None:
        async with aiohttp.ClientSession() as own_session:
            content, charset = await error_handler.execute_with_retry(
                _download, url, own_session, url, fetch_config
            )
    else:
        content, charset = await error_handler.execute_with_retry(
            _download, url, session, url, fetch_config
        )

    config = config or ParserConfig()
    if charset and not config.from_encoding:
        config = replace(config, from_encoding=charset)

    return HTMLParser(config).parse(content)


async def _download(session: aiohttp.ClientSession, url: str, fetch_config: FetchConfig):
    """Return the raw body and the charset from the Content-Type header, if any"""
    start_time = time.time()
    headers = {'User-Agent': fetch_config.user_agent}
    timeout = aiohttp.ClientTimeout(total=fetch_config.timeout)

    async with session.get(url, headers=headers, timeout=timeout) as response:
        response_time = time.time() - start_time

        if response.status != 200:
            raise FetchError(url, f"HTTP {response.status}", response.status)

        content = await response.read()
        logger.info(f"Fetched {url} ({len(content)} bytes, {response_time:.2f}s)")
        return content, response.charset


async def from_page(page: Page, config: ParserConfig = None) -> DOMNode:
    """Parse the current rendered HTML of a playwright page"""
    html_content = await page.content()
    logger.debug(f"Parsing rendered content of {page.url}")
    return HTMLParser(config).parse(html_content)
