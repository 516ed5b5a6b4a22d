"""
Report Template HTML Structure

Contains the HTML structure for test run reports.
"""

from .report_template_css import get_report_css


def get_report_css_content() -> str:
    return get_report_css().strip()


def create_report_html_template() -> str:
    """Create the HTML template. Placeholders, CSS included, are filled with str.format."""
    return """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{document_title}</title>
    <style>
{css_content}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>{report_name}</h1>
            <div class="time-info">
                Start: {start_time} | Last update: {end_time}
            </div>
        </div>

        <div class="summary-grid">
            <div class="summary-item">
                <span class="label">Tests:</span>
                <span class="value">{total_cases}</span>
            </div>
            <div class="summary-item">
                <span class="label">Passed:</span>
                <span class="value pass">{passed_cases}</span>
            </div>
            <div class="summary-item">
                <span class="label">Failed:</span>
                <span class="value fail">{failed_cases}</span>
            </div>
            <div class="summary-item">
                <span class="label">Skipped:</span>
                <span class="value skip">{skipped_cases}</span>
            </div>
        </div>

        <div class="system-info">
            <table>
{system_info_rows}
            </table>
        </div>

        <div class="content">
{case_sections}
        </div>
    </div>
</body>
</html>
"""


def create_case_html_template() -> str:
    """Create the HTML fragment for one test case."""
    return """            <div class="case">
                <div class="case-header">
                    <div><span class="badge {status}">{status}</span><strong>{name}</strong></div>
                    <div class="case-meta">Tags: {tags} | Author: {owner} | Device: {device} | {started_at}</div>
                </div>
{events}
            </div>"""
