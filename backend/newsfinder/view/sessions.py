"""
In-memory session store: one ViewController per browser session cookie.
"""

import logging
import secrets
from collections import OrderedDict
from threading import Lock
from typing import Callable, Optional

from newsfinder.view.controller import ViewController

logger = logging.getLogger(__name__)


class SessionStore:
    """Maps session ids to controllers; least recently used sessions are evicted past `max_sessions`."""

    def __init__(self, factory: Callable[[], ViewController], max_sessions: int = 1000):
        self._factory = factory
        self._max_sessions = max(1, max_sessions)
        self._controllers: "OrderedDict[str, ViewController]" = OrderedDict()
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._controllers)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._controllers

    def get_or_create(self, session_id: Optional[str]) -> tuple[str, ViewController]:
        """Return (session_id, controller), creating a fresh session for unknown or missing ids."""
        with self._lock:
            if session_id and session_id in self._controllers:
                self._controllers.move_to_end(session_id)
                return session_id, self._controllers[session_id]

            new_id = secrets.token_urlsafe(16)
            self._controllers[new_id] = self._factory()
            while len(self._controllers) > self._max_sessions:
                evicted, _ = self._controllers.popitem(last=False)
                logger.debug("Evicted session %s", evicted)
            return new_id, self._controllers[new_id]
