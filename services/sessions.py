"""
In-process registry of wizard sessions.
Bounded: creating a session beyond capacity evicts the least recently used one.
Nothing survives a restart.
"""
from __future__ import annotations

import logging
import uuid
from collections import OrderedDict

from services.form_state import FormState

logger = logging.getLogger(__name__)


class SessionNotFound(KeyError):
    pass


class SessionRegistry:
    def __init__(self, max_sessions: int = 1000):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, FormState] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self) -> tuple[str, FormState]:
        session_id = f"wiz-{uuid.uuid4().hex[:12]}"
        state = FormState()
        self._sessions[session_id] = state
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted wizard session %s (capacity %s)", evicted, self.max_sessions)
        return session_id, state

    def get(self, session_id: str) -> FormState:
        try:
            state = self._sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None
        self._sessions.move_to_end(session_id)
        return state

    def discard(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFound(session_id)
