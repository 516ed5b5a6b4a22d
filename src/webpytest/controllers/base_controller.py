"""
WebPyTest Controller Base Classes

Minimal base controller with only connection state.
Controllers implement their own specific functionality.
"""

from typing import Dict, Any


class BaseController:
    """
    Minimal base controller with just connection state.
    Controllers implement their own specific methods as needed.
    """

    def __init__(self, controller_type: str, device_name: str = "Unknown Device"):
        self.controller_type = controller_type
        self.device_name = device_name
        self.is_connected = False


class WebControllerInterface(BaseController):
    """Type hint interface for web controllers (selenium, etc.)."""

    def __init__(self, device_name: str = "Unknown Device", web_type: str = "generic"):
        super().__init__("web", device_name)
        self.web_type = web_type

    def execute_command(self, command: str, params: Dict[str, Any] = None) -> Dict[str, Any]:
        """
        Execute a web automation command.

        Args:
            command: Command to execute
            params: Command parameters

        Returns:
            Dict with at least 'success' and 'error'
        """
        raise NotImplementedError("Web controllers must implement execute_command")
