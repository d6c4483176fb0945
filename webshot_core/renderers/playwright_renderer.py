"""
Playwright Renderer - same capture through the Playwright sync API

Useful where Playwright manages its own Chromium build and there is no
system browser on PATH. The virtual time budget becomes the upper bound
on waiting for network idle.
"""

import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from .base import RenderOutcome
from .chromium import DEFAULT_VIRTUAL_TIME_BUDGET

logger = logging.getLogger(__name__)

LAUNCH_ARGS = ["--disable-gpu", "--no-sandbox", "--disable-dev-shm-usage", "--hide-scrollbars"]


class PlaywrightRenderer:
    """Renders with a Playwright-managed headless Chromium."""

    name = "playwright"

    def __init__(
        self,
        virtual_time_budget: int = DEFAULT_VIRTUAL_TIME_BUDGET,
        timeout: Optional[float] = None,
    ):
        self.virtual_time_budget = virtual_time_budget
        self.timeout = timeout

    def render(self, url: str, output_path: str, width: int, height: int) -> RenderOutcome:
        # Playwright's default navigation timeout (30s) applies when no deadline is set
        nav_timeout_ms = self.timeout * 1000 if self.timeout else 30000
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=True, args=LAUNCH_ARGS)
                try:
                    page = browser.new_page(viewport={"width": width, "height": height})
                    logger.debug(f"Loading {url}")
                    page.goto(url, timeout=nav_timeout_ms)
                    try:
                        page.wait_for_load_state("networkidle", timeout=self.virtual_time_budget)
                    except PlaywrightTimeoutError:
                        logger.debug(f"Network not idle after {self.virtual_time_budget}ms, capturing anyway")
                    # No path= here: Playwright would create missing parent directories
                    image = page.screenshot(full_page=False)
                finally:
                    browser.close()
        except PlaywrightTimeoutError as e:
            logger.debug(f"Playwright timed out: {e}")
            return RenderOutcome(returncode=None, stderr=str(e), timed_out=True)
        except PlaywrightError as e:
            logger.debug(f"Playwright failed: {e}")
            return RenderOutcome(returncode=1, stderr=str(e))

        try:
            with open(output_path, "wb") as f:
                f.write(image)
        except OSError as e:
            logger.debug(f"Could not write screenshot: {e}")
            return RenderOutcome(returncode=1, stderr=f"failed to write {output_path}: {e}")

        return RenderOutcome(returncode=0)
