"""
app/core/security.py

Purpose: Session resolution

- Reads the session cookie set by the mini app's Telegram login
- Verifies it as a signed JWT (PyJWT)
- Resolves to a SessionUser or None; never raises for a bad token
- Exposed as a FastAPI dependency so routes can swap the mechanism
"""

from datetime import datetime, timedelta
from typing import Optional, Dict, Any

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from fastapi import Request
from pydantic import ValidationError

from app.core.config import settings
from app.core.logging import get_logger
from app.models.user import SessionUser

logger = get_logger(__name__)


class SessionResolver:
    """
    Resolves the caller's identity from the `session_token` cookie.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        cookie_name: str = "session_token",
        ttl_hours: int = 24
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.cookie_name = cookie_name
        self.ttl_hours = ttl_hours

    def create_token(self, claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """
        Signs a session token for the given claims.

        Args:
            claims: Session claims; must contain the Telegram `id`
            expires_delta: Custom lifetime (defaults to ttl_hours)

        Returns:
            Encoded JWT
        """
        to_encode = claims.copy()
        now = datetime.utcnow()
        to_encode.update({
            "iat": now,
            "exp": now + (expires_delta or timedelta(hours=self.ttl_hours)),
        })
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Optional[SessionUser]:
        """
        Verifies a session token.

        Returns:
            SessionUser, or None when the token is expired, forged or malformed
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.info("Session token expired")
            return None
        except InvalidTokenError as e:
            logger.warning(f"Session token rejected: {e}")
            return None

        try:
            return SessionUser.model_validate(payload)
        except ValidationError:
            logger.warning("Session token carries no usable Telegram id")
            return None

    async def resolve(self, request: Request) -> Optional[SessionUser]:
        """
        Resolves the session identity for an inbound request.

        Returns:
            SessionUser or None if the request carries no valid session
        """
        token = request.cookies.get(self.cookie_name)
        if not token:
            logger.debug("No session token found in cookies")
            return None

        user = self.verify_token(token)
        if user:
            logger.debug("Session user verified", extra={"telegram_id": user.id})
        return user


# Global resolver instance
_session_resolver: Optional[SessionResolver] = None


def get_session_resolver() -> SessionResolver:
    """Get or create the global session resolver."""
    global _session_resolver
    if _session_resolver is None:
        _session_resolver = SessionResolver(
            secret_key=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            cookie_name=settings.SESSION_COOKIE_NAME,
            ttl_hours=settings.SESSION_TTL_HOURS
        )
    return _session_resolver
