"""
Session handling for Campus Hub.

A Session is an explicit identity object handed to every operation that
needs to know who is acting. The SessionManager owns the set of live
sessions: it is created on application start, sessions are added on login,
removed on logout, and the whole set is cleared on shutdown.

Login is a mock: no password check is performed. Real authentication is an
external concern.
"""

import enum
import threading
import time
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from campushub.core.exceptions import AuthenticationError, SessionExpiredError
from campushub.core.logging_config import logger
from campushub.core.security import create_session_token, decode_session_token


class UserRole(str, enum.Enum):
    """User roles"""
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"
    ACCOUNTANT = "accountant"
    PRINCIPAL = "principal"
    LIBRARIAN = "librarian"


@dataclass(frozen=True)
class Session:
    """The signed-in user, as seen by services and endpoints"""
    session_id: str
    user_id: str
    name: str
    email: str
    role: UserRole
    issued_at: datetime
    token: str


class SessionManager:
    """In-memory registry of live sessions"""

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def login(self, email: str, role: UserRole = UserRole.STUDENT,
              name: Optional[str] = None) -> Session:
        email = (email or "").strip()
        if "@" not in email:
            logger.log_auth_event("login", False, user_email=email, reason="malformed email")
            raise AuthenticationError("A valid email address is required")

        role = UserRole(role)
        session_id = uuid.uuid4().hex
        user_id = str(int(time.time() * 1000))
        display_name = name or email.split("@")[0]

        token = create_session_token({
            "sub": user_id,
            "sid": session_id,
            "email": email,
            "name": display_name,
            "role": role.value,
        })

        session = Session(
            session_id=session_id,
            user_id=user_id,
            name=display_name,
            email=email,
            role=role,
            issued_at=datetime.utcnow(),
            token=token,
        )

        with self._lock:
            self._sessions[session_id] = session

        logger.log_auth_event("login", True, user_email=email, role=role.value)
        return session

    def resolve(self, token: str) -> Session:
        """Return the live session for a token, or raise"""
        payload = decode_session_token(token)
        session_id = payload.get("sid")

        with self._lock:
            session = self._sessions.get(session_id) if session_id else None

        if session is None:
            raise SessionExpiredError("Session is no longer active")
        return session

    def logout(self, token: str) -> Session:
        session = self.resolve(token)
        with self._lock:
            self._sessions.pop(session.session_id, None)
        logger.log_auth_event("logout", True, user_email=session.email)
        return session

    def clear(self) -> None:
        with self._lock:
            count = len(self._sessions)
            self._sessions.clear()
        logger.info(f"[Sessions] Cleared {count} session(s)")

    def __len__(self) -> int:
        return len(self._sessions)
