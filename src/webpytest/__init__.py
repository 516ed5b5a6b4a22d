"""
WebPyTest

Pytest harness for Selenium browser UI tests: worker-scoped WebDriver sessions,
page objects and HTML run reports with bounded retention.
"""

__version__ = "1.0.0"
