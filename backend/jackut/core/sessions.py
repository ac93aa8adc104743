# jackut/core/sessions.py
"""
Session registry: maps opaque session tokens to logins.

Sessions are ephemeral. They are never written to the snapshot, never expire
on their own, and disappear on reset or when their account is removed.
"""
import hashlib
import secrets
import time
from typing import Dict

from jackut.core.errors import SessionInvalid


class SessionRegistry:
    """
    In-memory token -> login map.

    Tokens are derived from a digest of the login and the creation time in
    milliseconds, plus a short random suffix so two logins in the same
    millisecond still get distinct tokens. The login text never appears in
    the token, which keeps it ASCII and free of whitespace for cookies and
    Bearer headers. Tokens are identifiers, not credentials: nothing here
    is signed or encrypted.
    """

    def __init__(self):
        self._sessions: Dict[str, str] = {}

    def open(self, login: str) -> str:
        """
        Mint a new token for ``login`` and register it.

        Args:
            login: Authenticated user login

        Returns:
            The new session token
        """
        ms = int(time.time() * 1000)
        digest = hashlib.sha256(f"{login}:{ms}".encode("utf-8")).hexdigest()[:16]
        token = f"{digest}-{ms}-{secrets.token_hex(4)}"
        self._sessions[token] = login
        return token

    def resolve(self, token: str) -> str:
        """
        Return the login bound to ``token``.

        Raises:
            SessionInvalid: If the token is unknown
        """
        login = self._sessions.get(token)
        if login is None:
            raise SessionInvalid()
        return login

    def revoke_login(self, login: str) -> int:
        """Drop every session belonging to ``login``; returns how many were dropped."""
        tokens = [t for t, owner in self._sessions.items() if owner == login]
        for t in tokens:
            del self._sessions[t]
        return len(tokens)

    def clear(self) -> None:
        self._sessions.clear()

    def __contains__(self, token: str) -> bool:
        return token in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
