"""
Authentication session for outgoing API requests
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
import jwt

from config import settings
from models.organization import User

logger = logging.getLogger(__name__)


@dataclass
class AuthSession:
    """
    Holds the bearer token and signed-in user.

    Tokens are JWTs issued by the backend; the signature is only checked
    server-side, the client reads ``exp`` to avoid sending a dead token.
    Opaque (non-JWT) tokens are sent as-is.
    """
    token: Optional[str] = None
    user: Optional[User] = None
    token_file: Optional[Path] = None

    def set(self, token: str, user: Optional[User] = None, persist: bool = False) -> None:
        self.token = token
        self.user = user
        if persist:
            self.save()

    def clear(self, persist: bool = False) -> None:
        self.token = None
        self.user = None
        if persist and self.token_file and self.token_file.exists():
            self.token_file.unlink()
            logger.info(f"Removed stored token: {self.token_file}")

    def claims(self) -> Dict[str, Any]:
        """Unverified JWT claims, empty for missing or opaque tokens"""
        if not self.token:
            return {}
        try:
            return jwt.decode(self.token, options={"verify_signature": False})
        except jwt.InvalidTokenError:
            return {}

    def user_id(self) -> Optional[str]:
        if self.user is not None:
            return self.user.id
        return self.claims().get("userId")

    def expires_at(self) -> Optional[datetime]:
        """Expiry from the token's exp claim, None when absent or unreadable"""
        exp = self.claims().get("exp")
        if exp is None:
            return None
        return datetime.fromtimestamp(int(exp), tz=timezone.utc)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        expiry = self.expires_at()
        if expiry is None:
            return False
        now = now or datetime.now(timezone.utc)
        return expiry <= now

    def bearer_token(self) -> Optional[str]:
        """Token to send, or None when missing or expired"""
        if not self.token:
            return None
        if self.is_expired():
            logger.warning("AUTH: Session token has expired, sending request without it")
            return None
        return self.token

    def load(self) -> Optional[str]:
        """Read a previously stored token, keeping any token already set"""
        if self.token or not self.token_file or not self.token_file.exists():
            return self.token
        stored = self.token_file.read_text(encoding="utf-8").strip()
        self.token = stored or None
        return self.token

    def save(self) -> None:
        if not self.token_file or not self.token:
            return
        self.token_file.parent.mkdir(parents=True, exist_ok=True)
        self.token_file.write_text(self.token, encoding="utf-8")
        os.chmod(self.token_file, 0o600)
        logger.info(f"Stored session token: {self.token_file}")


# Global session instance
_auth_session: Optional[AuthSession] = None

def get_auth_session() -> AuthSession:
    """Get the global auth session"""
    global _auth_session
    if _auth_session is None:
        _auth_session = AuthSession(token=settings.AUTH_TOKEN, token_file=settings.TOKEN_FILE)
    return _auth_session
