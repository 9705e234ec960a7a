# core/utils/browser.py

import logging
from playwright.sync_api import sync_playwright

logger = logging.getLogger(__name__)

DEFAULT_LAUNCH_ARGS = ['--no-sandbox', '--disable-setuid-sandbox']

class PageRenderer:
    def __init__(self,
                 timeout: float = 30.0,
                 wait_until: str = 'domcontentloaded',
                 headless: bool = True,
                 launch_args: list[str] | None = None):
        """
        Render pages with a headless Chromium.

        Args:
            timeout: Navigation timeout in seconds
            wait_until: Playwright load state to wait for before reading the page
            headless: Run the browser without a window
            launch_args: Extra Chromium command line arguments
        """
        self.timeout = timeout
        self.wait_until = wait_until
        self.headless = headless
        self.launch_args = list(DEFAULT_LAUNCH_ARGS if launch_args is None else launch_args)

    def render(self, url: str) -> str:
        """
        Load a URL and return the page HTML.

        A new browser is launched for every call and closed on every exit
        path, including navigation failures. Timeouts and navigation errors
        propagate as playwright errors.
        """
        logger.debug(f"Rendering {url}")
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch(headless=self.headless, args=self.launch_args)
            try:
                page = browser.new_page()
                try:
                    page.goto(url, wait_until=self.wait_until, timeout=self.timeout * 1000)
                    return page.content()
                finally:
                    page.close()
            finally:
                browser.close()
