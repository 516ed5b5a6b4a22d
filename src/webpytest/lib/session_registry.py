"""
Session Registry

Owns one browser session per worker, keyed by worker identity.
Sessions are created on first request, reused afterwards, and torn down
explicitly per worker or all at once at the end of a run.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional, Any

from ..controllers.web.selenium_web import SUPPORTED_ENGINE_KINDS, configure_driver, create_driver
from ..models.session import Session, SessionConfig
from .exceptions import EngineInitFailed, NotInitialized, UnsupportedEngineKind

logger = logging.getLogger(__name__)

EngineFactory = Callable[[str, Dict[str, Any]], Any]

SINGLE_WORKER_KEY = "MainThread"


def worker_key(execution_type: str = "single") -> str:
    """
    Resolve the owner key for the calling worker.

    Args:
        execution_type: 'parallel' keys sessions by thread name, anything else
            shares one session under SINGLE_WORKER_KEY

    Returns:
        Owner key for the registry
    """
    if str(execution_type).lower() == "parallel":
        return threading.current_thread().name
    return SINGLE_WORKER_KEY


class SessionRegistry:
    """
    Thread-safe registry mapping owner keys to live sessions.

    Example usage:
        registry = SessionRegistry()
        session = registry.acquire("worker-1", SessionConfig("chrome", headless=True))
        session.handle.get("https://example.com")
        registry.release("worker-1")
    """

    def __init__(self, engine_factory: Optional[EngineFactory] = None):
        self._engine_factory = engine_factory or create_driver
        self._sessions: Dict[str, Session] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def _key_lock(self, owner_key: str) -> threading.Lock:
        with self._lock:
            lock = self._key_locks.get(owner_key)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[owner_key] = lock
            return lock

    def acquire(self, owner_key: str, config: SessionConfig) -> Session:
        """
        Return the session for owner_key, creating it if absent.

        Args:
            owner_key: Worker identity
            config: Session options used only when a new session is created

        Returns:
            The session registered under owner_key

        Raises:
            ValueError: owner_key is empty
            UnsupportedEngineKind: config.engine_kind is not supported
            EngineInitFailed: the engine could not produce a handle
        """
        if not owner_key:
            raise ValueError("owner_key must be a non-empty string")
        if config.engine_kind not in SUPPORTED_ENGINE_KINDS:
            raise UnsupportedEngineKind(config.engine_kind, SUPPORTED_ENGINE_KINDS)

        with self._key_lock(owner_key):
            with self._lock:
                existing = self._sessions.get(owner_key)
            if existing is not None:
                logger.info(f"[@lib:session_registry:acquire] [{owner_key}] Session already initialized, reusing")
                return existing

            handle = self._create_handle(owner_key, config)
            session = Session(owner_key=owner_key, handle=handle, engine_kind=config.engine_kind)
            with self._lock:
                self._sessions[owner_key] = session

        logger.info(f"[@lib:session_registry:acquire] [{owner_key}] {config.engine_kind.upper()} session initialized")
        return session

    def _create_handle(self, owner_key: str, config: SessionConfig):
        try:
            handle = self._engine_factory(config.engine_kind, {'headless': config.headless})
        except (EngineInitFailed, UnsupportedEngineKind):
            logger.error(f"[@lib:session_registry:acquire] [{owner_key}] Driver initialization failed")
            raise
        except Exception as e:
            logger.error(f"[@lib:session_registry:acquire] [{owner_key}] Driver initialization failed: {e}")
            raise EngineInitFailed(config.engine_kind, str(e)) from e

        try:
            configure_driver(
                handle,
                config.implicit_wait_seconds,
                config.page_load_timeout_seconds,
                config.maximize,
            )
        except Exception as e:
            logger.error(f"[@lib:session_registry:acquire] [{owner_key}] Driver configuration failed: {e}")
            self._quit_handle(owner_key, handle)
            raise EngineInitFailed(config.engine_kind, f"configuration failed: {e}") from e

        return handle

    def current(self, owner_key: str) -> Session:
        """Return the live session for owner_key or raise NotInitialized."""
        with self._lock:
            session = self._sessions.get(owner_key)
        if session is None:
            raise NotInitialized(f"WebDriver is not initialized for {owner_key!r}. Call acquire() first.")
        return session

    def has_session(self, owner_key: str) -> bool:
        with self._lock:
            return owner_key in self._sessions

    def owner_keys(self) -> List[str]:
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def release(self, owner_key: str) -> None:
        """Quit and forget the session for owner_key. No-op when none exists."""
        with self._key_lock(owner_key):
            with self._lock:
                session = self._sessions.pop(owner_key, None)
            if session is None:
                return
            self._quit_handle(owner_key, session.handle)

    def release_all(self) -> None:
        """Quit every registered session, then clear the mapping."""
        for owner_key in self.owner_keys():
            self.release(owner_key)
        with self._lock:
            # Entries acquired while the sweep was running are dropped too
            leftovers = list(self._sessions.values())
            self._sessions.clear()
        for session in leftovers:
            self._quit_handle(session.owner_key, session.handle)
        with self._lock:
            # Locks of keys with no session and no creation in progress
            for owner_key in list(self._key_locks):
                if owner_key not in self._sessions and not self._key_locks[owner_key].locked():
                    del self._key_locks[owner_key]
        logger.info("[@lib:session_registry:release_all] All sessions released")

    def _quit_handle(self, owner_key: str, handle) -> None:
        try:
            handle.quit()
            logger.info(f"[@lib:session_registry:release] Driver quit successfully for: {owner_key}")
        except Exception as e:
            logger.error(f"[@lib:session_registry:release] Error while quitting driver for {owner_key}: {e}")


# Process-wide registry
_registry: Optional[SessionRegistry] = None
_registry_lock = threading.Lock()


def init_registry(engine_factory: Optional[EngineFactory] = None) -> SessionRegistry:
    """Create the process-wide registry once and return it."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = SessionRegistry(engine_factory)
        return _registry


def get_registry() -> SessionRegistry:
    """Return the process-wide registry or raise NotInitialized."""
    with _registry_lock:
        if _registry is None:
            raise NotInitialized("Session registry is not initialized. Call init_registry() first.")
        return _registry


def shutdown_registry() -> None:
    """Release every session in the process-wide registry and drop it."""
    global _registry
    with _registry_lock:
        registry, _registry = _registry, None
    if registry is not None:
        registry.release_all()
