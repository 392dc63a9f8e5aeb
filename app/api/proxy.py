"""
app/api/proxy.py

Purpose: Trading key registration proxy

- Accepts any JSON body from the mini app
- Relays it to the registration upstream and mirrors the answer
- 500 with error + details when the body, the network or the upstream reply is unusable
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from app.core.exceptions import UpstreamProxyError
from app.core.logging import get_logger
from app.services.proxy_service import RegistrationKeyProxy, get_registration_proxy
from utils.constants import PROXY_FAILED_MESSAGE

logger = get_logger(__name__)
router = APIRouter()


@router.post("/register-key")
async def register_key(
    request: Request,
    proxy: RegistrationKeyProxy = Depends(get_registration_proxy),
):
    """
    Forwards the request body verbatim to the registration upstream.

    The upstream's status code and JSON body bytes are returned unchanged.
    """
    try:
        payload = await request.json()
        status_code, body = await proxy.forward(payload)
    except Exception as e:
        logger.error(f"Proxy error: {e}", exc_info=True)
        raise UpstreamProxyError(PROXY_FAILED_MESSAGE, details=str(e) or type(e).__name__) from e

    return Response(content=body, status_code=status_code, media_type="application/json")
