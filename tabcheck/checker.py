# checker.py
import logging
from typing import Any, Dict, Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page

from .aria import get_aria_report
from .constants import (
    INVALID_PAYLOAD_ERROR, INVALID_PAYLOAD_SUMMARY, MISSING_URL_ERROR, MISSING_URL_SUMMARY,
    build_config,
)
from .models import AccessibilityCheckState
from .tab_order import build_tab_order_report
from .utils import normalize_url, url_from_payload

logger = logging.getLogger(__name__)


class AccessibilityChecker:
    """One browser session for one check; closed on every exit path."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.playwright = None
        self.browser: Browser | None = None
        self.context: BrowserContext | None = None
        self.page: Page | None = None

    async def __aenter__(self):
        try:
            await self.initialize()
        except BaseException:
            await self.cleanup()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()

    async def initialize(self):
        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(
            headless=not self.config.get('headful', False)
        )
        self.context = await self.browser.new_context(ignore_https_errors=True)
        self.page = await self.context.new_page()

    async def cleanup(self):
        for resource, method in (
            (self.page, 'close'),
            (self.context, 'close'),
            (self.browser, 'close'),
            (self.playwright, 'stop'),
        ):
            if resource is None:
                continue
            try:
                await getattr(resource, method)()
            except Exception as e:
                logger.debug(f"Ignoring error during cleanup: {e}")
        self.page = self.context = self.browser = self.playwright = None

    async def run(self, url: str) -> AccessibilityCheckState:
        page = self.page
        logger.info(f"Navigating to {url}")
        await page.goto(
            url,
            wait_until='domcontentloaded',
            timeout=self.config['navigation_timeout_ms'],
        )
        await page.wait_for_timeout(self.config['post_navigation_wait_ms'])

        tab_order = await build_tab_order_report(page, self.config)
        aria = await get_aria_report(page)
        return AccessibilityCheckState.success(url, tab_order, aria)


async def check_accessibility(url: Optional[str], config: Optional[Dict[str, Any]] = None) -> AccessibilityCheckState:
    raw_url = (url or '').strip()
    if not raw_url:
        return AccessibilityCheckState.failure(MISSING_URL_SUMMARY, [MISSING_URL_ERROR])

    normalized_url = normalize_url(raw_url)
    config = config or build_config()

    try:
        async with AccessibilityChecker(config) as checker:
            return await checker.run(normalized_url)
    except Exception as e:
        logger.error(f"Accessibility check failed for {normalized_url}: {e}")
        return AccessibilityCheckState.failure(
            f"Unable to complete accessibility check for {normalized_url}",
            [str(e) or 'Unknown error'],
            url=normalized_url,
        )


async def check_from_payload(payload: Any, config: Optional[Dict[str, Any]] = None) -> AccessibilityCheckState:
    """Entry point for a decoded JSON request body of the form {"url": ...}."""
    url = url_from_payload(payload)
    if url is None:
        return AccessibilityCheckState.failure(INVALID_PAYLOAD_SUMMARY, [INVALID_PAYLOAD_ERROR])
    return await check_accessibility(url, config)
