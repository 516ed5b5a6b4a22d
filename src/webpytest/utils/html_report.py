"""
HTML Report Writer

Structured test-run report: cases with leveled events and embedded screenshots,
rendered to a single self-contained HTML file on every flush.
Each worker thread has its own current case, so parallel tests do not interleave events.
"""

import getpass
import html
import logging
import os
import platform
import threading
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .report_template_html import (
    create_case_html_template,
    create_report_html_template,
    get_report_css_content,
)

logger = logging.getLogger(__name__)

EVENT_LEVELS = ('info', 'pass', 'fail', 'skip', 'warning')

# Highest first: a case showing any 'fail' event is failed, and so on
STATUS_PRECEDENCE = ('fail', 'skip', 'pass', 'warning', 'info')

DISPLAY_TIME_FORMAT = '%b %d, %Y %H:%M:%S'


def format_timestamp(value: datetime) -> str:
    return value.strftime(DISPLAY_TIME_FORMAT)


def default_system_info() -> Dict[str, str]:
    try:
        user_name = getpass.getuser()
    except (KeyError, OSError):
        user_name = 'unknown'
    return {
        'Automation Framework': 'Selenium WebDriver',
        'Python Version': platform.python_version(),
        'OS': platform.system(),
        'User Name': user_name,
    }


@dataclass
class TitleOptions:
    document_title: str = 'Automation Report'
    report_name: str = 'Selenium Automation Framework'
    system_info: Dict[str, str] = field(default_factory=default_system_info)


@dataclass
class ReportEvent:
    level: str
    message: str
    image_base64: Optional[str] = None
    caption: Optional[str] = None
    preformatted: bool = False
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ReportCase:
    name: str
    tags: List[str]
    owner: str
    device: str = field(default_factory=platform.system)
    events: List[ReportEvent] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    ended_at: Optional[datetime] = None

    @property
    def status(self) -> str:
        levels = {event.level for event in self.events}
        for level in STATUS_PRECEDENCE:
            if level in levels:
                return level
        return 'info'


class HtmlReport:
    """
    Report sink writing one HTML artifact.

    Example usage:
        report = open_report("reports/run.html", TitleOptions(document_title="Nightly"))
        report.begin_case("LoginTest - test_valid_login", ["sanity"], "AutomationTeam")
        report.log_event("pass", "Logged in")
        report.flush()
    """

    def __init__(self, path: str, title_options: Optional[TitleOptions] = None):
        self.path = path
        self.title_options = title_options or TitleOptions()
        self.cases: List[ReportCase] = []
        self.started_at = datetime.now()
        self._lock = threading.Lock()
        self._local = threading.local()

    @property
    def current_case(self) -> Optional[ReportCase]:
        return getattr(self._local, 'case', None)

    def begin_case(self, name: str, tags: Optional[List[str]] = None, owner: str = '') -> ReportCase:
        """Start a case and make it the calling thread's current case."""
        case = ReportCase(name=name, tags=list(tags or ['Default']), owner=owner)
        with self._lock:
            self.cases.append(case)
        self._local.case = case
        logger.info(f"[@utils:html_report:begin_case] Test Created: {name} | Groups: {', '.join(case.tags)} | Author: {owner}")
        return case

    def end_case(self) -> None:
        case = self.current_case
        if case is not None:
            case.ended_at = datetime.now()
        self._local.case = None

    def _append(self, event: ReportEvent) -> bool:
        case = self.current_case
        if case is None:
            logger.warning(f"[@utils:html_report] No active test case, dropping {event.level} event: {event.message}")
            return False
        with self._lock:
            case.events.append(event)
        return True

    def log_event(self, level: str, message: str) -> bool:
        """
        Append a leveled event to the current case.

        Args:
            level: One of EVENT_LEVELS
            message: Event text

        Returns:
            True when the event was recorded
        """
        level = str(level).lower()
        if level not in EVENT_LEVELS:
            raise ValueError(f"Unknown report level {level!r}, expected one of {EVENT_LEVELS}")
        return self._append(ReportEvent(level=level, message=message))

    def log_exception(self, error: BaseException) -> bool:
        """Record an exception with its traceback as a failure event."""
        details = ''.join(traceback.format_exception(type(error), error, error.__traceback__))
        return self._append(ReportEvent(level='fail', message=details, preformatted=True))

    def attach_image(self, image_base64: str, caption: str = '') -> bool:
        """Embed a base64 PNG screenshot in the current case."""
        return self._append(ReportEvent(level='info', message=caption, image_base64=image_base64, caption=caption))

    def summary(self) -> Dict[str, int]:
        with self._lock:
            statuses = [case.status for case in self.cases]
        return {
            'total': len(statuses),
            'passed': statuses.count('pass'),
            'failed': statuses.count('fail'),
            'skipped': statuses.count('skip'),
        }

    def render(self) -> str:
        """Render the full report document."""
        with self._lock:
            cases = list(self.cases)
        summary = self.summary()
        options = self.title_options

        system_info_rows = '\n'.join(
            f"                <tr><td><strong>{html.escape(str(k))}</strong></td><td>{html.escape(str(v))}</td></tr>"
            for k, v in options.system_info.items()
        )
        case_sections = '\n'.join(self._render_case(case) for case in cases)

        return create_report_html_template().format(
            document_title=html.escape(options.document_title),
            report_name=html.escape(options.report_name),
            css_content=get_report_css_content(),
            start_time=format_timestamp(self.started_at),
            end_time=format_timestamp(datetime.now()),
            total_cases=summary['total'],
            passed_cases=summary['passed'],
            failed_cases=summary['failed'],
            skipped_cases=summary['skipped'],
            system_info_rows=system_info_rows,
            case_sections=case_sections,
        )

    def _render_case(self, case: ReportCase) -> str:
        events = '\n'.join(self._render_event(event) for event in list(case.events))
        return create_case_html_template().format(
            status=case.status,
            name=html.escape(case.name),
            tags=html.escape(', '.join(case.tags)),
            owner=html.escape(case.owner),
            device=html.escape(case.device),
            started_at=format_timestamp(case.started_at),
            events=events,
        )

    def _render_event(self, event: ReportEvent) -> str:
        time_text = event.timestamp.strftime('%H:%M:%S')
        if event.preformatted:
            body = f"<pre>{html.escape(event.message)}</pre>"
        else:
            body = html.escape(event.message)
        if event.image_base64:
            caption = html.escape(event.caption or '')
            body += (f'<div><img src="data:image/png;base64,{html.escape(event.image_base64)}" '
                     f'alt="{caption}" title="{caption}"></div>')
        return (f'                <div class="event"><span class="badge {event.level}">{event.level}</span>'
                f'<span class="case-meta">{time_text}</span> {body}</div>')

    def flush(self) -> bool:
        """
        Write the report to disk, replacing previous content.

        Returns:
            True if the file was written
        """
        try:
            content = self.render()
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            logger.error(f"[@utils:html_report:flush] Failed to write report {self.path}: {e}")
            return False
        logger.info(f"[@utils:html_report:flush] Report written: {self.path}")
        return True


def open_report(path: str, title_options: Optional[TitleOptions] = None) -> HtmlReport:
    """
    Create the (empty) report artifact and return its writer.

    Args:
        path: Artifact path, usually from next_artifact_path()
        title_options: Document title, report name and system info
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8'):
        pass
    logger.info(f"[@utils:html_report:open_report] Report initialized at: {path}")
    return HtmlReport(path, title_options)
