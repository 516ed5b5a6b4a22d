"""
Custom exception classes for the WebPyTest harness
Provides specific error types for fail-early behavior during session setup
"""


class HarnessError(Exception):
    """Base class for harness errors"""
    pass


class HarnessConfigError(HarnessError):
    """Missing or invalid harness configuration"""
    pass


class UnsupportedEngineKind(HarnessError, ValueError):
    """Requested browser engine kind is not one of the supported kinds"""

    def __init__(self, engine_kind: str, supported=None):
        self.engine_kind = engine_kind
        self.supported = tuple(supported or ())
        message = f"Unsupported browser: {engine_kind!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class EngineInitFailed(HarnessError):
    """The browser engine could not produce a session handle"""

    def __init__(self, engine_kind: str, reason: str = ""):
        self.engine_kind = engine_kind
        self.reason = reason
        message = f"Driver initialization failed for {engine_kind!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NotInitialized(HarnessError):
    """A session or process-wide component was used before it was created"""
    pass
