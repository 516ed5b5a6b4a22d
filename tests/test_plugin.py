"""
Test Pytest Plugin

End-to-end runs of the plugin through pytester with a recording browser engine.
"""

import pytest

RECORDING_CONFTEST = """
import os

import pytest

QUIT_LOG = os.path.join(os.path.dirname(__file__), "quit.log")


class RecordingDriver:
    def __init__(self, engine_kind, options):
        self.engine_kind = engine_kind
        self.options = options
        self.current_url = ""
        self.title = ""

    def implicitly_wait(self, seconds):
        pass

    def set_page_load_timeout(self, seconds):
        pass

    def maximize_window(self):
        pass

    def get(self, url):
        self.current_url = url
        self.title = "Swag Labs"

    def get_screenshot_as_base64(self):
        return "iVBORw0KGgo="

    def quit(self):
        with open(QUIT_LOG, "a") as f:
            f.write(self.engine_kind + "\\n")


@pytest.fixture(scope="session")
def engine_factory():
    return RecordingDriver
"""

HARNESS_TESTS = """
import pytest

from webpytest.testing import BaseTest


def test_opens_base_url(driver):
    \"\"\"Open the application\"\"\"
    assert driver.current_url == "https://www.saucedemo.com/"


@pytest.mark.sanity
def test_broken_title(driver):
    assert driver.title == "Products"


def test_not_ready(driver):
    pytest.skip("feature flag off")


@pytest.mark.author("jdoe")
class TestLogin(BaseTest):
    def setup_page_objects(self):
        self.page_title = self.driver.title

    def test_bound_driver(self):
        self.log_step("Check bound driver")
        self.log_data(f"Title: {self.page_title}")
        self.log_verification("Title matches the application")
        self.log_warning("Running against a recording driver")
        assert self.page_title == "Swag Labs"
"""


@pytest.fixture
def harness_project(pytester, no_harness_env):
    pytester.makeconftest(RECORDING_CONFTEST)
    pytester.makepyfile(test_harness=HARNESS_TESTS)
    pytester.makefile(".env", harness="\n".join([
        "BROWSER=firefox",
        "BASE_URL=https://www.saucedemo.com/",
        "REPORT_DIR=reports",
        "REPORT_NAMING=fixed",
        "REPORT_NAME=Run",
        "REPORT_TITLE=Plugin Run",
    ]))
    return pytester


def _run(pytester, *args):
    env_file = str(pytester.path / "harness.env")
    return pytester.runpytest("-p", "webpytest.testing.plugin", "--harness-env", env_file, *args)


def test_outcomes_and_report(harness_project):
    """Test pass/fail/skip outcomes land in the HTML report"""
    result = _run(harness_project)

    result.assert_outcomes(passed=2, failed=1, skipped=1)
    content = (harness_project.path / "reports" / "Run.html").read_text(encoding="utf-8")
    assert "<title>Plugin Run</title>" in content
    assert "Test PASSED: test_harness - test_opens_base_url" in content
    assert "Test FAILED: test_harness - test_broken_title" in content
    assert "Test SKIPPED: test_harness - test_not_ready" in content
    assert "Test PASSED: TestLogin - test_bound_driver" in content
    assert "Test Description: Open the application" in content
    assert "STEP: Check bound driver" in content
    assert "DATA: Title: Swag Labs" in content
    assert "VERIFICATION: Title matches the application" in content
    assert "WARNING: Running against a recording driver" in content
    assert "FAILURE_test_broken_title" in content
    assert "Author: jdoe" in content
    assert "Tags: sanity" in content


def test_every_session_released(harness_project):
    """Test each test's browser is quit, failing ones included"""
    _run(harness_project)

    quits = (harness_project.path / "quit.log").read_text().split()
    assert quits == ["firefox"] * 4


def test_browser_option_overrides_env(harness_project):
    _run(harness_project, "--harness-browser", "chrome", "-k", "opens_base_url")

    assert (harness_project.path / "quit.log").read_text().split() == ["chrome"]


def test_unsupported_browser_errors_at_setup(harness_project):
    result = _run(harness_project, "--harness-browser", "opera", "-k", "opens_base_url")

    result.assert_outcomes(errors=1)
    assert not (harness_project.path / "quit.log").exists()
    content = (harness_project.path / "reports" / "Run.html").read_text(encoding="utf-8")
    assert "Test FAILED: test_harness - test_opens_base_url" in content


def test_invalid_config_stops_run(pytester, no_harness_env):
    pytester.makepyfile(test_nothing="def test_nothing():\n    pass\n")
    pytester.makefile(".env", harness="REPORT_NAMING=timestamped\n")

    result = _run(pytester)

    assert result.ret != pytest.ExitCode.OK


def test_unwritable_report_dir_does_not_stop_run(harness_project):
    """Test a report directory that cannot be created leaves the tests running"""
    (harness_project.path / "blocker").write_text("not a directory")
    env_file = harness_project.path / "harness.env"
    env_file.write_text(env_file.read_text() + "\nREPORT_DIR=blocker/reports\n")

    result = _run(harness_project, "-k", "opens_base_url")

    result.assert_outcomes(passed=1)
    assert (harness_project.path / "quit.log").read_text().split() == ["firefox"]


def test_plugin_idle_until_enabled(pytester, no_harness_env):
    pytester.makepyfile(test_plain="def test_plain():\n    assert True\n")

    result = pytester.runpytest("-p", "webpytest.testing.plugin")

    result.assert_outcomes(passed=1)
    assert not (pytester.path / "reports").exists()


def test_driver_without_harness_fails_clearly(pytester, no_harness_env):
    pytester.makepyfile(test_needs_driver="def test_needs_driver(driver):\n    pass\n")

    result = pytester.runpytest("-p", "webpytest.testing.plugin")

    result.assert_outcomes(errors=1)
    result.stdout.fnmatch_lines(["*webpytest is not enabled*"])


def test_harness_flag_reads_default_env_file(harness_project):
    (harness_project.path / "harness.env").rename(harness_project.path / ".env")

    result = harness_project.runpytest("-p", "webpytest.testing.plugin", "--harness", "-k", "opens_base_url")

    result.assert_outcomes(passed=1)
    assert (harness_project.path / "reports" / "Run.html").exists()


def test_ini_flag_enables_harness(harness_project):
    (harness_project.path / "harness.env").rename(harness_project.path / ".env")
    harness_project.makeini("[pytest]\nharness_enabled = true\n")

    result = harness_project.runpytest("-p", "webpytest.testing.plugin", "-k", "opens_base_url")

    result.assert_outcomes(passed=1)
    assert (harness_project.path / "reports" / "Run.html").exists()
