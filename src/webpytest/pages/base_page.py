"""
Base Page Object

Common element operations for page objects. Lookups return None (or False for
state checks) when an element is absent, callers decide whether that is an error.
"""

import logging
from typing import Optional, Tuple

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

logger = logging.getLogger(__name__)

Locator = Tuple[str, str]


class BasePage:
    """Page object base holding the driver and an explicit wait timeout."""

    def __init__(self, driver, timeout: float = 10):
        self.driver = driver
        self.timeout = timeout

    def open(self, url: str) -> None:
        self.driver.get(url)

    @property
    def title(self) -> str:
        return self.driver.title

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    def find(self, locator: Locator, timeout: Optional[float] = None) -> Optional[WebElement]:
        """
        Wait for an element to be present.

        Args:
            locator: (By, value) tuple
            timeout: Seconds to wait, defaults to the page timeout

        Returns:
            The element, or None if it did not appear
        """
        wait_time = self.timeout if timeout is None else timeout
        try:
            return WebDriverWait(self.driver, wait_time).until(EC.presence_of_element_located(locator))
        except TimeoutException:
            logger.debug(f"[@pages:base_page:find] Element not found: {locator}")
            return None
        except WebDriverException as e:
            logger.warning(f"[@pages:base_page:find] Lookup failed for {locator}: {e}")
            return None

    def is_displayed(self, locator: Locator) -> bool:
        element = self.find(locator)
        try:
            return element is not None and element.is_displayed()
        except WebDriverException:
            return False

    def is_enabled(self, locator: Locator) -> bool:
        element = self.find(locator)
        try:
            return element is not None and element.is_enabled()
        except WebDriverException:
            return False

    def get_text(self, locator: Locator) -> Optional[str]:
        element = self.find(locator)
        if element is None:
            return None
        try:
            return element.text
        except WebDriverException:
            return None

    def get_attribute(self, locator: Locator, name: str) -> Optional[str]:
        element = self.find(locator)
        if element is None:
            return None
        try:
            return element.get_attribute(name)
        except WebDriverException:
            return None

    def type_text(self, locator: Locator, text: str) -> bool:
        """Clear the field and type text. Returns False when the field is missing."""
        element = self.find(locator)
        if element is None:
            return False
        element.clear()
        element.send_keys(text)
        return True

    def click(self, locator: Locator) -> bool:
        element = self.find(locator)
        if element is None:
            return False
        element.click()
        return True
