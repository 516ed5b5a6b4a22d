"""
Test Environment Utilities

Loading harness settings from .env files, the environment and overrides.
"""

import pytest

from webpytest.lib.exceptions import HarnessConfigError
from webpytest.utils.env_utils import (
    HarnessConfig,
    load_harness_config,
    load_properties,
    parse_bool,
    parse_int,
)


def _write_env(path, **values):
    path.write_text("".join(f"{key}={value}\n" for key, value in values.items()))
    return str(path)


def test_defaults_with_max_count(clean_env, monkeypatch):
    monkeypatch.setenv("REPORT_MAX_COUNT", "5")

    config = load_harness_config()

    assert config.browser == "chrome"
    assert config.headless is False
    assert config.implicit_wait == 10
    assert config.page_load_timeout == 30
    assert config.execution_type == "single"
    assert config.report_naming == "timestamped"
    assert config.report_name == "Automation_Report"
    assert config.report_max_count == 5
    assert config.base_url is None
    assert config.log_level == "INFO"


def test_env_file_values_loaded(clean_env):
    env_file = _write_env(
        clean_env / "harness.env",
        BROWSER="Firefox",
        HEADLESS="yes",
        IMPLICIT_WAIT="3",
        BASE_URL="https://www.saucedemo.com/",
        REPORT_NAMING="fixed",
        EXECUTION_TYPE="parallel",
        LOG_LEVEL="debug",
    )

    config = load_harness_config(env_file)

    assert config.browser == "firefox"
    assert config.headless is True
    assert config.implicit_wait == 3
    assert config.base_url == "https://www.saucedemo.com/"
    assert config.report_naming == "fixed"
    assert config.report_max_count is None
    assert config.execution_type == "parallel"
    assert config.log_level == "DEBUG"


def test_default_env_file_in_working_directory(clean_env):
    _write_env(clean_env / ".env", REPORT_NAMING="fixed", REPORT_NAME="Nightly")

    config = load_harness_config()

    assert config.report_name == "Nightly"


def test_environment_wins_over_file(clean_env, monkeypatch):
    env_file = _write_env(clean_env / "harness.env", BROWSER="firefox", REPORT_NAMING="fixed")
    monkeypatch.setenv("BROWSER", "edge")

    assert load_harness_config(env_file).browser == "edge"


def test_overrides_win_over_environment(clean_env, monkeypatch):
    monkeypatch.setenv("BROWSER", "edge")
    monkeypatch.setenv("REPORT_NAMING", "fixed")

    config = load_harness_config(overrides={'BROWSER': 'safari', 'HEADLESS': None})

    assert config.browser == "safari"
    assert config.headless is False


def test_missing_explicit_env_file(clean_env):
    with pytest.raises(HarnessConfigError):
        load_properties(str(clean_env / "missing.env"))


def test_timestamped_requires_max_count(clean_env):
    with pytest.raises(HarnessConfigError):
        load_harness_config()


def test_max_count_must_be_positive(clean_env, monkeypatch):
    monkeypatch.setenv("REPORT_MAX_COUNT", "0")
    with pytest.raises(HarnessConfigError):
        load_harness_config()


@pytest.mark.parametrize("key, value", [
    ("REPORT_NAMING", "daily"),
    ("EXECUTION_TYPE", "distributed"),
    ("HEADLESS", "maybe"),
    ("IMPLICIT_WAIT", "ten"),
])
def test_malformed_values_rejected(clean_env, monkeypatch, key, value):
    monkeypatch.setenv("REPORT_MAX_COUNT", "5")
    monkeypatch.setenv(key, value)
    with pytest.raises(HarnessConfigError):
        load_harness_config()


def test_session_config_from_harness_config():
    config = HarnessConfig(browser="firefox", headless=True, implicit_wait=4, page_load_timeout=12)
    session_config = config.session_config()

    assert session_config.engine_kind == "firefox"
    assert session_config.headless is True
    assert session_config.implicit_wait_seconds == 4
    assert session_config.page_load_timeout_seconds == 12


def test_session_config_negative_timeout_is_config_error():
    with pytest.raises(HarnessConfigError):
        HarnessConfig(implicit_wait=-1).session_config()


def test_raw_property_accessors():
    config = HarnessConfig(properties={'RETRIES': ' 3 ', 'VERBOSE': 'on', 'TEAM': 'qa'})

    assert config.get_property("TEAM") == "qa"
    assert config.get_property("ABSENT", "fallback") == "fallback"
    assert config.get_int_property("RETRIES") == 3
    assert config.get_bool_property("VERBOSE") is True
    assert config.get_bool_property("ABSENT") is False
    with pytest.raises(HarnessConfigError):
        config.require_property("ABSENT")


def test_parse_helpers():
    assert parse_bool("X", "TRUE") is True
    assert parse_bool("X", "off") is False
    assert parse_int("X", " 42 ") == 42
    with pytest.raises(HarnessConfigError):
        parse_int("X", "4.2")


def test_os_username_does_not_replace_login_user(clean_env, monkeypatch):
    """Test the OS login name in USERNAME never shadows the configured test user"""
    env_file = _write_env(clean_env / "harness.env", REPORT_NAMING="fixed",
                          LOGIN_USERNAME="standard_user", LOGIN_PASSWORD="secret_sauce")
    monkeypatch.setenv("USERNAME", "os_login_user")
    monkeypatch.setenv("PASSWORD", "os_password")

    config = load_harness_config(env_file)

    assert config.username == "standard_user"
    assert config.password == "secret_sauce"
