"""
Environment Utilities for WebPyTest

Loads harness configuration from a .env file and the process environment.
Process environment wins over the file, explicit overrides win over both.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Any
from dotenv import dotenv_values
import logging

from ..lib.exceptions import HarnessConfigError
from ..models.session import SessionConfig

logger = logging.getLogger(__name__)

TRUE_VALUES = ('true', '1', 'yes', 'y', 'on')
FALSE_VALUES = ('false', '0', 'no', 'n', 'off', '')

REPORT_NAMING_MODES = ('fixed', 'timestamped')
EXECUTION_TYPES = ('single', 'parallel')


def parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise HarnessConfigError(f"Property '{key}' must be a boolean, got {value!r}")


def parse_int(key: str, value: Any) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise HarnessConfigError(f"Property '{key}' must be an integer, got {value!r}")


@dataclass
class HarnessConfig:
    """Resolved harness settings plus the raw key/value source they came from."""

    browser: str = "chrome"
    headless: bool = False
    implicit_wait: int = 10
    page_load_timeout: int = 30
    execution_type: str = "single"
    base_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    report_dir: str = "reports"
    report_naming: str = "timestamped"
    report_name: str = "Automation_Report"
    report_max_count: Optional[int] = None
    report_title: str = "Automation Report"
    report_author: str = "AutomationTeam"
    log_file: Optional[str] = None
    log_level: str = "INFO"
    properties: Dict[str, str] = field(default_factory=dict, repr=False)

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get any raw property value, or default when missing."""
        value = self.properties.get(key)
        return value.strip() if value is not None else default

    def require_property(self, key: str) -> str:
        value = self.get_property(key)
        if value is None:
            raise HarnessConfigError(f"Property '{key}' not found in config")
        return value

    def get_int_property(self, key: str, default: Optional[int] = None) -> Optional[int]:
        value = self.get_property(key)
        return default if value is None else parse_int(key, value)

    def get_bool_property(self, key: str, default: bool = False) -> bool:
        value = self.get_property(key)
        return default if value is None else parse_bool(key, value)

    def session_config(self) -> SessionConfig:
        """Build the session options handed to the registry."""
        try:
            return SessionConfig(
                engine_kind=self.browser,
                headless=self.headless,
                implicit_wait_seconds=self.implicit_wait,
                page_load_timeout_seconds=self.page_load_timeout,
            )
        except ValueError as e:
            raise HarnessConfigError(str(e)) from e


def load_properties(env_file: Optional[str] = None) -> Dict[str, str]:
    """
    Load raw properties from a dotenv file merged under os.environ.

    Args:
        env_file: Path to a .env style file; defaults to ./.env when present

    Returns:
        Dictionary of property values
    """
    properties: Dict[str, str] = {}

    if env_file is None:
        candidate = os.path.join(os.getcwd(), '.env')
        env_file = candidate if os.path.exists(candidate) else None
    elif not os.path.exists(env_file):
        raise HarnessConfigError(f"Failed to load properties file: {env_file}")

    if env_file:
        file_values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
        properties.update(file_values)
        logger.info(f"[@utils:env_utils:load_properties] Loaded {len(file_values)} properties from {env_file}")

    properties.update(os.environ)
    return properties


def load_harness_config(env_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> HarnessConfig:
    """
    Build a HarnessConfig from a dotenv file, the environment and overrides.

    Raises:
        HarnessConfigError: a value is missing or malformed
    """
    properties = load_properties(env_file)
    for key, value in (overrides or {}).items():
        if value is not None:
            properties[key] = str(value)

    def get(key: str, default: Optional[str] = None) -> Optional[str]:
        value = properties.get(key)
        if value is None or value.strip() == '':
            return default
        return value.strip()

    report_naming = get('REPORT_NAMING', 'timestamped').lower()
    if report_naming not in REPORT_NAMING_MODES:
        raise HarnessConfigError(f"REPORT_NAMING must be one of {REPORT_NAMING_MODES}, got {report_naming!r}")

    execution_type = get('EXECUTION_TYPE', 'single').lower()
    if execution_type not in EXECUTION_TYPES:
        raise HarnessConfigError(f"EXECUTION_TYPE must be one of {EXECUTION_TYPES}, got {execution_type!r}")

    max_count_raw = get('REPORT_MAX_COUNT')
    report_max_count = parse_int('REPORT_MAX_COUNT', max_count_raw) if max_count_raw is not None else None
    if report_naming == 'timestamped':
        if report_max_count is None:
            raise HarnessConfigError("REPORT_MAX_COUNT is required when REPORT_NAMING is 'timestamped'")
        if report_max_count < 1:
            raise HarnessConfigError(f"REPORT_MAX_COUNT must be >= 1, got {report_max_count}")

    config = HarnessConfig(
        browser=get('BROWSER', 'chrome').lower(),
        headless=parse_bool('HEADLESS', get('HEADLESS', 'false')),
        implicit_wait=parse_int('IMPLICIT_WAIT', get('IMPLICIT_WAIT', '10')),
        page_load_timeout=parse_int('PAGE_LOAD_TIMEOUT', get('PAGE_LOAD_TIMEOUT', '30')),
        execution_type=execution_type,
        base_url=get('BASE_URL'),
        username=get('LOGIN_USERNAME'),
        password=get('LOGIN_PASSWORD'),
        report_dir=get('REPORT_DIR', 'reports'),
        report_naming=report_naming,
        report_name=get('REPORT_NAME', 'Automation_Report'),
        report_max_count=report_max_count,
        report_title=get('REPORT_TITLE', 'Automation Report'),
        report_author=get('REPORT_AUTHOR', 'AutomationTeam'),
        log_file=get('LOG_FILE'),
        log_level=get('LOG_LEVEL', 'INFO').upper(),
        properties=properties,
    )
    logger.debug(f"[@utils:env_utils:load_harness_config] Browser: {config.browser}, Base URL: {config.base_url}")
    return config
