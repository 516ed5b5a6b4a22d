"""
Selenium Web Controller Implementation

Browser engine capability for the harness: creates Selenium WebDriver instances for
the supported engine kinds, applies session timeouts, and wraps a live driver with
dict-returning commands for navigation, page info and screenshots.
Driver binaries are resolved by Selenium Manager.
"""

import logging
import platform
import time
from typing import Dict, Any, Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException

from ..base_controller import WebControllerInterface
from ...lib.exceptions import EngineInitFailed, UnsupportedEngineKind

logger = logging.getLogger(__name__)

SUPPORTED_ENGINE_KINDS = ("chrome", "firefox", "edge", "safari")


def get_chrome_flags(headless: bool = False) -> list:
    """Get Chrome launch flags for automation runs."""
    flags = []
    if headless:
        flags.append('--headless=new')
    flags.extend([
        '--disable-gpu',
        '--remote-allow-origins=*',
        '--start-maximized',
        '--disable-blink-features=AutomationControlled',
    ])
    return flags


def get_firefox_flags(headless: bool = False) -> list:
    """Get Firefox launch flags for automation runs."""
    flags = []
    if headless:
        flags.append('--headless')
    flags.extend(['--width=1920', '--height=1080'])
    return flags


def create_driver(engine_kind: str, options: Optional[Dict[str, Any]] = None):
    """
    Create a Selenium WebDriver for the requested engine kind.

    Args:
        engine_kind: One of SUPPORTED_ENGINE_KINDS
        options: Engine options, currently {'headless': bool}

    Returns:
        A live WebDriver instance

    Raises:
        UnsupportedEngineKind: engine_kind is not supported
        EngineInitFailed: the driver could not be started
    """
    options = options or {}
    headless = bool(options.get('headless', False))
    kind = str(engine_kind).strip().lower()

    if kind not in SUPPORTED_ENGINE_KINDS:
        raise UnsupportedEngineKind(engine_kind, SUPPORTED_ENGINE_KINDS)

    logger.info(f"[@controller:SeleniumWeb:create_driver] Creating {kind} driver (headless={headless})")

    try:
        if kind == 'chrome':
            chrome_options = webdriver.ChromeOptions()
            for flag in get_chrome_flags(headless):
                chrome_options.add_argument(flag)
            return webdriver.Chrome(options=chrome_options)

        if kind == 'firefox':
            firefox_options = webdriver.FirefoxOptions()
            for flag in get_firefox_flags(headless):
                firefox_options.add_argument(flag)
            return webdriver.Firefox(options=firefox_options)

        if kind == 'edge':
            edge_options = webdriver.EdgeOptions()
            if headless:
                edge_options.add_argument('--headless=new')
            return webdriver.Edge(options=edge_options)

        # Safari ships with macOS only
        if platform.system() != 'Darwin':
            raise EngineInitFailed(kind, f"safari requires macOS, running on {platform.system()}")
        return webdriver.Safari()

    except EngineInitFailed:
        raise
    except Exception as e:
        raise EngineInitFailed(kind, str(e)) from e


def configure_driver(driver, implicit_wait: int, page_load_timeout: int, maximize: bool = True) -> None:
    """Apply session timeouts and window state to a freshly created driver."""
    driver.implicitly_wait(implicit_wait)
    driver.set_page_load_timeout(page_load_timeout)
    if maximize:
        driver.maximize_window()


class SeleniumWebController(WebControllerInterface):
    """Selenium web controller wrapping one live WebDriver session."""

    def __init__(self, driver, device_name: str = "Selenium Web"):
        super().__init__(device_name, "selenium")
        self.driver = driver
        self.is_connected = driver is not None

        # Command execution state
        self.current_url = ""
        self.page_title = ""

    def navigate_to_url(self, url: str) -> Dict[str, Any]:
        """Navigate the session to a URL."""
        if not self.is_connected:
            return {'success': False, 'error': 'Not connected to browser', 'url': '', 'title': ''}

        try:
            logger.info(f"Web[{self.web_type.upper()}]: Navigating to {url}")
            start_time = time.time()
            self.driver.get(url)
            self.current_url = self.driver.current_url
            self.page_title = self.driver.title
            execution_time = int((time.time() - start_time) * 1000)
            logger.info(f"Web[{self.web_type.upper()}]: Navigation successful - {self.page_title}")
            return {
                'success': True,
                'url': self.current_url,
                'title': self.page_title,
                'execution_time': execution_time,
                'error': '',
            }
        except WebDriverException as e:
            error_msg = f"Navigation error: {e}"
            logger.error(f"Web[{self.web_type.upper()}]: {error_msg}")
            return {
                'success': False,
                'error': error_msg,
                'url': self.current_url,
                'title': self.page_title,
                'execution_time': 0,
            }

    def get_page_info(self) -> Dict[str, Any]:
        """Get current page URL and title."""
        if not self.is_connected:
            return {'success': False, 'error': 'Not connected to browser'}
        try:
            self.current_url = self.driver.current_url
            self.page_title = self.driver.title
            return {'success': True, 'url': self.current_url, 'title': self.page_title, 'error': ''}
        except WebDriverException as e:
            return {'success': False, 'error': f"Page info error: {e}"}

    def take_screenshot_base64(self) -> Optional[str]:
        """Capture the viewport as a base64 PNG, or None when the session cannot answer."""
        if not self.is_connected:
            return None
        try:
            return self.driver.get_screenshot_as_base64()
        except WebDriverException as e:
            logger.warning(f"Web[{self.web_type.upper()}]: Screenshot failed: {e}")
            return None

    def execute_command(self, command: str, params: Dict[str, Any] = None) -> Dict[str, Any]:
        """
        Execute a web automation command.

        Args:
            command: 'navigate_to_url', 'get_page_info' or 'take_screenshot'
            params: Command parameters ('url' for navigate_to_url)
        """
        params = params or {}
        logger.debug(f"Web[{self.web_type.upper()}]: Executing command '{command}' with params: {params}")

        if command == 'navigate_to_url':
            url = params.get('url')
            if not url:
                return {'success': False, 'error': 'URL parameter is required'}
            return self.navigate_to_url(url)

        if command == 'get_page_info':
            return self.get_page_info()

        if command == 'take_screenshot':
            screenshot = self.take_screenshot_base64()
            if screenshot is None:
                return {'success': False, 'error': 'Screenshot capture failed'}
            return {'success': True, 'screenshot': screenshot, 'error': ''}

        return {'success': False, 'error': f'Unknown command: {command}'}
