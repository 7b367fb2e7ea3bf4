"""
Process-local map from browser session id to SessionController.

Memory only; everything is lost on restart. Least-recently-used sessions are
evicted once ``max_sessions`` is exceeded.
"""

import logging
import secrets
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from ..utils.exceptions import SessionError
from .session_controller import SessionController

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return secrets.token_hex(16)


class SessionRegistry:
    def __init__(self, factory: Callable[[], SessionController], max_sessions: int = 256):
        if max_sessions < 1:
            raise SessionError(f"max_sessions must be positive, got {max_sessions}")
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: "OrderedDict[str, SessionController]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, SessionController, bool]:
        """Return (session_id, controller, created).

        Unknown or missing ids get a fresh session under a new id, so a
        client cannot pick its own id.
        """
        if session_id and session_id in self._sessions:
            self._sessions.move_to_end(session_id)
            return session_id, self._sessions[session_id], False

        sid = new_session_id()
        controller = self._factory()
        self._sessions[sid] = controller
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.debug(f"Evicted session {evicted[:8]}…")
        logger.debug(f"Created session {sid[:8]}… ({len(self._sessions)} active)")
        return sid, controller, True

    def drop(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
