"""
app/core/cors.py

Purpose: Application-wide CORS with per-route opt-out

Routes that answer CORS themselves (the socket discovery route sets its
own headers and 204 preflight) are passed straight through.
"""

from typing import Iterable

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class ScopedCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware that leaves the given paths untouched.
    """

    def __init__(self, app: ASGIApp, exclude_paths: Iterable[str] = (), **kwargs):
        super().__init__(app, **kwargs)
        self.exclude_paths = frozenset(path.rstrip("/") for path in exclude_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].rstrip("/") in self.exclude_paths:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
