"""
Session Model

Represents one live browser session owned by a single worker, and the
options used to create it.
"""

import time
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SessionConfig:
    """
    Options recognized when creating a browser session.

    Example usage:
        config = SessionConfig("firefox", headless=True, implicit_wait_seconds=5)
    """

    engine_kind: str = "chrome"
    headless: bool = False
    implicit_wait_seconds: int = 10
    page_load_timeout_seconds: int = 30
    maximize: bool = True

    def __post_init__(self):
        # Normalized so 'Chrome' and 'chrome' resolve to the same engine
        object.__setattr__(self, "engine_kind", str(self.engine_kind).strip().lower())
        for name in ("implicit_wait_seconds", "page_load_timeout_seconds"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be an int >= 0, got {value!r}")


@dataclass
class Session:
    """A live engine handle registered under its owner key."""

    owner_key: str
    handle: Any
    engine_kind: str
    created_at: float = field(default_factory=time.time)

    def age_seconds(self) -> float:
        return time.time() - self.created_at
