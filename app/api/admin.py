"""
app/api/admin.py

Purpose: Administrator endpoints

- GET /api/admin/users: every user, newest first
- GET /api/admin/check: whether the caller is an administrator
- 401 without a session, 403 for non-admins, 500 on anything unexpected
"""

from fastapi import APIRouter, Depends, Request

from app.core.exceptions import AuthenticationError, AuthorizationError, InternalServiceError
from app.core.logging import get_logger
from app.core.security import SessionResolver, get_session_resolver
from app.schemas.response import UsersResponse, AdminCheckResponse
from app.services.admin_service import list_users, require_admin
from app.services.user_service import UserRepository, get_user_repository
from utils.constants import FETCH_USERS_FAILED_MESSAGE, ADMIN_CHECK_FAILED_MESSAGE

logger = get_logger(__name__)
router = APIRouter()


@router.get("/users", response_model=UsersResponse)
async def get_users(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Lists all users for an administrator.

    Response: {"users": [...]} sorted by createdAt, most recent first.
    """
    try:
        records = await list_users(request, resolver, users)
    except (AuthenticationError, AuthorizationError):
        raise
    except Exception as e:
        logger.error(f"Error fetching users: {e}", exc_info=True)
        raise InternalServiceError(FETCH_USERS_FAILED_MESSAGE) from e

    return UsersResponse(users=records)


@router.get("/check", response_model=AdminCheckResponse)
async def check_admin(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Confirms the caller is an administrator.
    """
    try:
        await require_admin(request, resolver, users)
    except (AuthenticationError, AuthorizationError):
        raise
    except Exception as e:
        logger.error(f"Error checking admin status: {e}", exc_info=True)
        raise InternalServiceError(ADMIN_CHECK_FAILED_MESSAGE) from e

    return AdminCheckResponse(isAdmin=True)
