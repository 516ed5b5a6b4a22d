"""
Report Manager

Process-wide report lifecycle: the artifact path is computed once at run start,
events are written during the run, and the report is flushed once at the end.
Helpers also echo each event to the harness logger.
"""

import logging
import threading
from typing import Optional

from .env_utils import HarnessConfig
from .html_report import HtmlReport, TitleOptions, default_system_info, open_report
from .logger_utils import harness_logger
from .report_retention import ArtifactNamePattern, next_artifact_path

logger = logging.getLogger(__name__)

_report: Optional[HtmlReport] = None
_report_lock = threading.Lock()


def build_name_pattern(config: HarnessConfig) -> ArtifactNamePattern:
    if config.report_naming == 'fixed':
        return ArtifactNamePattern.fixed(config.report_name)
    return ArtifactNamePattern.with_timestamp(config.report_name)


def setup_report(config: HarnessConfig) -> Optional[HtmlReport]:
    """
    Create the run report once per process and return it.

    Args:
        config: Harness configuration (report directory, naming, retention, titles)

    Returns:
        The run report, or None when the artifact could not be created
    """
    global _report
    with _report_lock:
        if _report is not None:
            return _report

        pattern = build_name_pattern(config)
        # Fixed-name mode keeps a single file, the retention window does not apply
        max_count = config.report_max_count if pattern.timestamped else 1
        path = next_artifact_path(config.report_dir, pattern, max_count)

        system_info = default_system_info()
        system_info['Browser'] = config.browser
        system_info['Execution Type'] = config.execution_type
        if config.base_url:
            system_info['Base URL'] = config.base_url

        try:
            _report = open_report(path, TitleOptions(
                document_title=config.report_title,
                report_name=config.report_title,
                system_info=system_info,
            ))
        except OSError as e:
            logger.error(f"[@utils:report_manager:setup_report] Could not create report {path}, "
                         f"running without HTML report: {e}")
            return None
        return _report


def get_report() -> Optional[HtmlReport]:
    return _report


def _log(level: str, message: str) -> None:
    report = get_report()
    if report is not None:
        report.log_event(level, message)


def info(message: str) -> None:
    _log('info', message)
    harness_logger.info(message)


def pass_(message: str) -> None:
    _log('pass', message)
    harness_logger.pass_(message)


def fail(message: str) -> None:
    _log('fail', message)
    harness_logger.fail(message)


def skip(message: str) -> None:
    _log('skip', message)
    harness_logger.skip(message)


def warning(message: str) -> None:
    _log('warning', message)
    harness_logger.warning(message)


def log_exception(error: BaseException) -> None:
    report = get_report()
    if report is not None:
        report.log_exception(error)
    harness_logger.error(f"Exception occurred: {error}")


def add_screenshot(image_base64: str, title: str) -> None:
    report = get_report()
    if report is not None:
        report.attach_image(image_base64, title)
        harness_logger.info(f"Screenshot added: {title}")


def flush_report() -> bool:
    """Write the report to disk. Never raises."""
    report = get_report()
    if report is None:
        return False
    try:
        return report.flush()
    except Exception as e:
        logger.error(f"[@utils:report_manager:flush_report] Report flush failed: {e}")
        return False


def close_report() -> None:
    """Flush and forget the process-wide report."""
    global _report
    flush_report()
    with _report_lock:
        _report = None
