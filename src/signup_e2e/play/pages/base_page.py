"""
Page object model for the Base Page.
Shared helpers used by every page object in the signup suite.
"""

from datetime import datetime
from playwright.sync_api import Page, Locator
from typing import Optional, Callable, Union
import logging

from signup_e2e.utils import ensure_directory

logger = logging.getLogger(__name__)


class BasePage:
    """Represents the Base page"""

    def __init__(self, page: Page, screenshot_dir: str = "screenshots") -> None:
        self.page = page
        self.screenshot_dir = screenshot_dir

    def take_screenshot(self, filename: Optional[str] = None, full_page: bool = False) -> str:
        """
        Take a screenshot of the current page.

        Args:
            filename: Optional filename for the screenshot. If not provided, generates a timestamped name.
            full_page: If True, captures the full scrollable page

        Returns:
            Path to the saved screenshot
        """
        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"screenshot_{timestamp}.png"

        if not filename.endswith('.png'):
            filename = f"{filename}.png"

        screenshot_path = ensure_directory(self.screenshot_dir) / filename
        self.page.screenshot(path=str(screenshot_path), full_page=full_page)
        logger.info(f"Screenshot saved to {screenshot_path}")
        return str(screenshot_path)

    def is_element_visible(
            self,
            locator_or_getter: Union[Locator, Callable[[], Locator]],
            timeout: int = 5000
        ) -> bool:
        """
        Check if an element is visible on the page (Non-blocking check).

        Args:
            locator_or_getter: either a Locator or a callable that returns a Locator
            timeout: Maximum time to wait in milliseconds

        Returns:
            True if element is visible, False otherwise
        """
        try:
            self.wait_for_element(locator_or_getter, state='visible', timeout=timeout)
            return True
        except Exception:
            return False

    def wait_for_element(
        self,
        locator_or_getter: Union[Locator, Callable[[], Locator]],
        state: str = "visible",
        timeout: int = 10000
    ) -> Locator:
        """
        Wait for an element to reach a specific state.

        Args:
            locator_or_getter: Either a Locator or a callable (e.g., property) that returns a Locator
            state: The state to wait for - "visible", "attached", "detached", "hidden" (default: "visible")
            timeout: Maximum time to wait in milliseconds (default: 10000)

        Returns:
            The Locator that was waited for (useful for chaining)

        Raises:
            TimeoutError: If element doesn't reach the state within timeout

        Example:
            self.wait_for_element(self.password_input, state="attached")
            self.wait_for_element(lambda: self.locator("error_message"))
        """
        if callable(locator_or_getter):
            locator = locator_or_getter()
        else:
            locator = locator_or_getter

        locator.wait_for(state=state, timeout=timeout)
        return locator
