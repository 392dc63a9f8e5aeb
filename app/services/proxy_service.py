"""
app/services/proxy_service.py

Purpose: Trading key registration relay

- Forwards a JSON body to the fixed registration upstream over HTTPS
- Returns the upstream's status code and JSON body byte for byte
- Single attempt, no retry; no timeout unless configured
"""

import json
import httpx
from typing import Optional, Any, Tuple

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def encode_payload(payload: Any) -> bytes:
    """
    Serializes a JSON value compactly, the way browsers' JSON.stringify does.

    Raises:
        ValueError: payload holds NaN/Infinity, which is not valid JSON
    """
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")


class RegistrationKeyProxy:
    """
    Relays key registration requests to the upstream service.

    The payload is opaque: it is neither validated nor rewritten.
    """

    def __init__(
        self,
        upstream_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.upstream_url = upstream_url
        self._timeout = timeout
        self._transport = transport

    async def forward(self, payload: Any) -> Tuple[int, bytes]:
        """
        POSTs the payload upstream.

        Args:
            payload: Parsed inbound JSON body

        Returns:
            (upstream status code, upstream body bytes, checked to be JSON)

        Raises:
            httpx.HTTPError: Network failure talking to the upstream
            ValueError: Payload cannot be serialized, or upstream body is not JSON
        """
        body = encode_payload(payload)

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(
                self.upstream_url,
                content=body,
                headers={"Content-Type": "application/json"}
            )

        json.loads(response.content)
        logger.info(
            "Upstream answered key registration",
            extra={"upstream_status": response.status_code}
        )
        return response.status_code, response.content


# Global proxy instance
_registration_proxy: Optional[RegistrationKeyProxy] = None


def get_registration_proxy() -> RegistrationKeyProxy:
    """Get or create the global registration proxy."""
    global _registration_proxy
    if _registration_proxy is None:
        _registration_proxy = RegistrationKeyProxy(
            upstream_url=settings.REGISTER_KEY_UPSTREAM_URL,
            timeout=settings.REGISTER_KEY_UPSTREAM_TIMEOUT
        )
    return _registration_proxy


def close_registration_proxy():
    """Drop the global proxy so the next request picks up fresh settings."""
    global _registration_proxy
    _registration_proxy = None
