import threading
from contextlib import contextmanager
from datetime import datetime, timedelta

from common.constants import PATHS, SERVER
from common.utils import setup_logging
from debuggers import RecommendationStepEngine, ReviewStepEngine
from recommenders import load_recommendation_context
from reviews import load_review_context

logger = setup_logging(__name__, PATHS["app_log_file"])

ENGINE_KINDS = ("recommendation", "review")


class SessionNotFoundError(LookupError):
    """Raised when a read-only lookup names a session that does not exist."""


# ===================================================================
# Debugger Session State
# One independent engine pair per session; datasets are shared read-only
# ===================================================================
class DebuggerSessionState:
    """In-memory debugger sessions. Cleared on server restart."""

    def __init__(self, recommendation_context=None, review_context=None, ttl_minutes=None, max_sessions=None):
        self.lock = threading.Lock()
        self.recommendation_context = recommendation_context if recommendation_context is not None else load_recommendation_context()
        self.review_context = review_context if review_context is not None else load_review_context()
        self.ttl = timedelta(minutes=ttl_minutes if ttl_minutes is not None else SERVER["session_ttl_minutes"])
        self.max_sessions = max_sessions if max_sessions is not None else SERVER["max_sessions"]
        # session_id -> {"recommendation": engine, "review": engine, "lock": Lock, "ts": datetime}
        self.sessions = {}

    def _get_session(self, session_id: str, create: bool) -> dict:
        with self.lock:
            now = datetime.now()
            self._evict_expired(now)
            session = self.sessions.get(session_id)
            if session is None:
                if not create:
                    raise SessionNotFoundError(f"Session {session_id} not found")
                if len(self.sessions) >= self.max_sessions:
                    self._evict_oldest()
                session = {
                    "recommendation": RecommendationStepEngine(self.recommendation_context),
                    "review": ReviewStepEngine(self.review_context),
                    "lock": threading.Lock(),
                    "ts": None,
                }
                self.sessions[session_id] = session
                logger.debug(f"Created debugger session {session_id}")
            session["ts"] = now
            return session

    def _evict_expired(self, now: datetime) -> None:
        expired = [sid for sid, session in self.sessions.items() if now - session["ts"] > self.ttl]
        for sid in expired:
            del self.sessions[sid]
        if expired:
            logger.info(f"Evicted {len(expired)} idle debugger sessions")

    def _evict_oldest(self) -> None:
        oldest = min(self.sessions, key=lambda sid: self.sessions[sid]["ts"])
        del self.sessions[oldest]
        logger.info(f"Session limit {self.max_sessions} reached, evicted {oldest}")

    @contextmanager
    def engine(self, session_id: str, kind: str, create: bool = True):
        """
        Hold a session's lock while yielding one of its engines.
        Calls on the same session are serialized; different sessions run in parallel.
        With create=False an unknown session raises SessionNotFoundError.
        """
        if kind not in ENGINE_KINDS:
            raise ValueError(f"Unknown engine kind: {kind}")
        session = self._get_session(session_id, create)
        with session["lock"]:
            yield session[kind]

    def drop(self, session_id: str) -> bool:
        """Discard a session and its in-progress traces."""
        with self.lock:
            removed = self.sessions.pop(session_id, None) is not None
        if removed:
            logger.info(f"Dropped debugger session {session_id}")
        return removed

    def count(self) -> int:
        with self.lock:
            return len(self.sessions)
