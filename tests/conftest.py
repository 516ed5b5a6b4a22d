"""
Shared fixtures: a fake browser engine standing in for Selenium.
"""

import threading

import pytest

pytest_plugins = ["pytester"]

HARNESS_ENV_KEYS = (
    'BROWSER', 'HEADLESS', 'IMPLICIT_WAIT', 'PAGE_LOAD_TIMEOUT', 'EXECUTION_TYPE',
    'BASE_URL', 'LOGIN_USERNAME', 'LOGIN_PASSWORD', 'REPORT_DIR', 'REPORT_NAMING', 'REPORT_NAME',
    'REPORT_MAX_COUNT', 'REPORT_TITLE', 'REPORT_AUTHOR', 'LOG_FILE', 'LOG_LEVEL',
)


class FakeDriver:
    """Records the calls the harness makes on a WebDriver."""

    def __init__(self, engine_kind, options):
        self.engine_kind = engine_kind
        self.options = options
        self.implicit_wait = None
        self.page_load_timeout = None
        self.maximized = False
        self.quit_calls = 0
        self.visited = []
        self.fail_on_quit = False
        self.current_url = ""
        self.title = ""

    def implicitly_wait(self, seconds):
        self.implicit_wait = seconds

    def set_page_load_timeout(self, seconds):
        self.page_load_timeout = seconds

    def maximize_window(self):
        self.maximized = True

    def get(self, url):
        self.visited.append(url)
        self.current_url = url
        self.title = f"Page at {url}"

    def get_screenshot_as_base64(self):
        return "iVBORw0KGgo="

    def quit(self):
        self.quit_calls += 1
        if self.fail_on_quit:
            raise RuntimeError("browser already gone")


class FakeEngineFactory:
    """Engine factory with a thread-safe call counter."""

    def __init__(self, error=None):
        self.error = error
        self.calls = 0
        self.drivers = []
        self._lock = threading.Lock()

    def __call__(self, engine_kind, options):
        with self._lock:
            self.calls += 1
        if self.error is not None:
            raise self.error
        driver = FakeDriver(engine_kind, options)
        with self._lock:
            self.drivers.append(driver)
        return driver


@pytest.fixture
def fake_factory():
    return FakeEngineFactory()


@pytest.fixture
def no_harness_env(monkeypatch):
    """Remove harness settings from the process environment."""
    for key in HARNESS_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def clean_env(no_harness_env, monkeypatch, tmp_path):
    """Run with no harness settings in the environment and no ./.env file."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
