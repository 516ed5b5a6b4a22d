"""
WebPyTest Controllers Package

Browser engine controllers. Selenium is the only web implementation.
"""

from .base_controller import BaseController, WebControllerInterface
