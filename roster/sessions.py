"""
Per-session directory state.

Each browser session gets its own Directory so one user's submissions never
show up in another user's table. The Flask session (server-side via
Flask-Session) only carries an opaque token; the Directory objects live in an
in-process registry with idle expiry, suitable for single-worker setups.
"""

import time
import threading
import logging
import uuid
from typing import Callable, Dict, Optional, Tuple

from flask import current_app, session

from .domain.directory import Directory

logger = logging.getLogger(__name__)

SESSION_TOKEN_KEY = 'directory_token'
REGISTRY_EXTENSION_KEY = 'roster.directories'


class DirectoryRegistry:
    """Thread-safe token -> Directory store with idle expiry."""
    def __init__(self, factory: Callable[[], Directory], ttl_seconds: int = 3600):
        self._factory = factory
        self._ttl = max(1, int(ttl_seconds))
        self._store: Dict[str, Tuple[Directory, float]] = {}
        self._lock = threading.Lock()

    def get_or_create(self, token: str) -> Directory:
        now = time.time()
        with self._lock:
            item = self._store.get(token)
            if item and item[1] >= now:
                directory = item[0]
            else:
                directory = self._factory()
                logger.debug("Created directory for session %s", token[:8])
            self._store[token] = (directory, now + self._ttl)
            return directory

    def get(self, token: str) -> Optional[Directory]:
        now = time.time()
        with self._lock:
            item = self._store.get(token)
            if not item or item[1] < now:
                return None
            return item[0]

    def discard(self, token: str) -> None:
        with self._lock:
            if self._store.pop(token, None) is not None:
                logger.debug("Discarded directory for session %s", token[:8])

    def purge_expired(self) -> int:
        now = time.time()
        with self._lock:
            expired = [token for token, (_, exp) in self._store.items() if exp < now]
            for token in expired:
                self._store.pop(token, None)
        if expired:
            logger.debug("Evicted %d idle session directories", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


def get_registry(app=None) -> DirectoryRegistry:
    app = app or current_app
    return app.extensions[REGISTRY_EXTENSION_KEY]


def get_session_directory() -> Directory:
    """Directory owned by the current browser session, created on first use."""
    token = session.get(SESSION_TOKEN_KEY)
    if not token:
        token = uuid.uuid4().hex
        session[SESSION_TOKEN_KEY] = token
    registry = get_registry()
    registry.purge_expired()
    return registry.get_or_create(token)


def end_session_directory() -> None:
    token = session.pop(SESSION_TOKEN_KEY, None)
    if token:
        get_registry().discard(token)
