"""
app/schemas/response.py

Purpose: Response bodies shared across routes

- Error envelope used by every exception handler
- Small fixed payloads (admin check, socket info)
"""

from pydantic import BaseModel, Field
from typing import Optional, Any, List, Dict


class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None


class UsersResponse(BaseModel):
    users: List[Dict[str, Any]] = Field(default_factory=list)


class AdminCheckResponse(BaseModel):
    isAdmin: bool = True


class SocketInfoResponse(BaseModel):
    """
    Tells clients where the realtime server actually lives.
    """
    status: str = "ok"
    message: str
    timestamp: str
