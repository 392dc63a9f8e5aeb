"""
app/api/socket.py

Purpose: Realtime discovery

Answers clients probing /api/socket with where the Socket.io server
actually lives, instead of redirecting them.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from app.core.config import settings
from app.schemas.response import SocketInfoResponse
from utils.constants import SOCKET_INFO_MESSAGE, SOCKET_CORS_HEADERS, SOCKET_PREFLIGHT_MAX_AGE
from utils.time_utils import iso_timestamp

router = APIRouter()


@router.get("/socket")
async def socket_info():
    headers = {
        **SOCKET_CORS_HEADERS,
        "Cache-Control": "no-store, max-age=0",
    }
    return JSONResponse(
        status_code=200,
        content=SocketInfoResponse(
            status="ok",
            message=SOCKET_INFO_MESSAGE.format(path=settings.SOCKETIO_PATH),
            timestamp=iso_timestamp(),
        ).model_dump(),
        headers=headers
    )


@router.options("/socket")
async def socket_preflight():
    headers = {
        **SOCKET_CORS_HEADERS,
        "Access-Control-Max-Age": SOCKET_PREFLIGHT_MAX_AGE,
    }
    return Response(status_code=204, headers=headers)
