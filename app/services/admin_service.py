"""
app/services/admin_service.py

Purpose: Administrator authorization

- Resolves the caller's session identity
- Loads the caller's user record and checks isAdmin
- Lists all users for an authorized administrator
"""

from typing import List, Dict, Any

from fastapi import Request

from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.logging import get_logger, LogContext
from app.core.security import SessionResolver
from app.models.user import UserRecord
from app.services.user_service import UserRepository
from utils.constants import UNAUTHORIZED_MESSAGE

logger = get_logger(__name__)


async def require_admin(
    request: Request,
    resolver: SessionResolver,
    users: UserRepository
) -> UserRecord:
    """
    Ensures the request comes from an administrator.

    Args:
        request: Inbound request carrying the session
        resolver: Session resolver
        users: User repository

    Returns:
        The caller's user record

    Raises:
        AuthenticationError: No session identity (no database query is issued)
        AuthorizationError: Unknown user or isAdmin is false
    """
    session_user = await resolver.resolve(request)
    if session_user is None:
        raise AuthenticationError(UNAUTHORIZED_MESSAGE)

    with LogContext(telegram_id=session_user.id, path=request.url.path):
        user = await users.find_by_telegram_id(session_user.id)

        if user is None or not user.isAdmin:
            logger.warning("Admin access denied")
            raise AuthorizationError(UNAUTHORIZED_MESSAGE)

        return user


async def list_users(
    request: Request,
    resolver: SessionResolver,
    users: UserRepository
) -> List[Dict[str, Any]]:
    """
    Returns every user, newest first, if the caller is an administrator.
    """
    admin = await require_admin(request, resolver, users)

    records = await users.find_all_sorted("createdAt", descending=True)
    logger.info(
        f"Admin listed {len(records)} users",
        extra={"telegram_id": admin.telegramId}
    )
    return records
