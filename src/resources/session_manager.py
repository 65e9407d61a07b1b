"""
Session Manager - Browser session and login handling
Manages Playwright browser lifecycle and TrueCoach authentication
"""

import logging
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, async_playwright

logger = logging.getLogger(__name__)

LOGIN_URL = 'https://app.truecoach.co/login'


class SessionManager:
    """Manages browser session and authentication"""

    def __init__(self, email: str, password: str, headless: bool = True,
                 navigation_timeout_ms: int = 30000):
        self.email = email
        self.password = password
        self.headless = headless
        self.navigation_timeout_ms = navigation_timeout_ms
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self.playwright = None

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Browser not started. Call start() first.")
        return self._page

    async def start(self):
        """Initialize browser"""
        logger.info("Starting browser...")
        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(headless=self.headless)
        self.context = await self.browser.new_context()
        self.context.set_default_navigation_timeout(self.navigation_timeout_ms)
        self._page = await self.context.new_page()
        logger.info("Browser started")

    async def stop(self):
        """Close browser and cleanup"""
        if self._page:
            await self._page.close()
            self._page = None
        if self.context:
            await self.context.close()
            self.context = None
        if self.browser:
            await self.browser.close()
            self.browser = None
        if self.playwright:
            await self.playwright.stop()
            self.playwright = None
        logger.info("Browser stopped")

    async def new_page(self) -> Page:
        """Open an extra tab sharing the logged-in cookies"""
        if not self.context:
            raise RuntimeError("Browser not started. Call start() first.")
        return await self.context.new_page()

    async def login(self) -> bool:
        """
        Perform login with email and password

        Returns:
            bool: True if the post-login navigation settled
        """
        page = self.page

        try:
            logger.info("Starting login...")

            await page.goto(LOGIN_URL, wait_until='networkidle')

            await page.fill('input[type="email"]', self.email)
            await page.fill('input[type="password"]', self.password)

            async with page.expect_navigation(wait_until='networkidle'):
                await page.click('button[type="submit"]')

            logger.info(f"Login successful, landed on {page.url}")
            return True

        except Exception as e:
            logger.error(f"Login error: {e}")
            return False

    async def __aenter__(self):
        """Context manager entry"""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        await self.stop()
