"""
Report Template CSS

Styles for the HTML test report.
"""


def get_report_css() -> str:
    """Get the CSS for the HTML test report."""
    return """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            margin: 0;
            padding: 20px;
            background-color: #f5f5f5;
            color: #333;
        }
        .container {
            max-width: 1200px;
            margin: 0 auto;
            background: #fff;
            border-radius: 8px;
            box-shadow: 0 2px 10px rgba(0, 0, 0, 0.1);
            overflow: hidden;
        }
        .header {
            background: #2c3e50;
            color: #fff;
            padding: 16px 24px;
        }
        .header h1 {
            margin: 0 0 4px 0;
            font-size: 22px;
        }
        .time-info {
            font-size: 13px;
            opacity: 0.8;
        }
        .summary-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(160px, 1fr));
            gap: 12px;
            padding: 16px 24px;
            border-bottom: 1px solid #eee;
        }
        .summary-item .label {
            font-weight: 600;
            margin-right: 6px;
        }
        .system-info {
            padding: 12px 24px;
            font-size: 13px;
            border-bottom: 1px solid #eee;
        }
        .system-info td {
            padding: 2px 12px 2px 0;
        }
        .case {
            margin: 16px 24px;
            border: 1px solid #e0e0e0;
            border-radius: 6px;
        }
        .case-header {
            display: flex;
            justify-content: space-between;
            padding: 10px 14px;
            background: #fafafa;
            border-bottom: 1px solid #e0e0e0;
        }
        .case-meta {
            font-size: 12px;
            color: #777;
        }
        .event {
            padding: 6px 14px;
            font-size: 13px;
            border-bottom: 1px solid #f3f3f3;
        }
        .event pre {
            white-space: pre-wrap;
            margin: 4px 0;
        }
        .event img {
            max-width: 480px;
            border: 1px solid #ddd;
            margin-top: 4px;
        }
        .badge {
            display: inline-block;
            min-width: 64px;
            padding: 2px 6px;
            border-radius: 4px;
            font-size: 11px;
            font-weight: 700;
            text-align: center;
            text-transform: uppercase;
            margin-right: 8px;
        }
        .pass { background: #e8f5e9; color: #2e7d32; }
        .fail { background: #ffebee; color: #c62828; }
        .skip { background: #fff8e1; color: #f57f17; }
        .warning { background: #fff3e0; color: #ef6c00; }
        .info { background: #e3f2fd; color: #1565c0; }
    """
