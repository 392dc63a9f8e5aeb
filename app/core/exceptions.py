from typing import Optional, Any

class GatewayError(Exception):
    """
    Base exception for the gateway application.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class AuthenticationError(GatewayError):
    """
    Raised when no session identity can be resolved for the caller.
    """
    def __init__(self, message: str = "Unauthorized", details: Optional[Any] = None):
        super().__init__(message, code="AUTHENTICATION_FAILED", status_code=401, details=details)

class AuthorizationError(GatewayError):
    """
    Raised when the caller is identified but lacks the administrator flag.
    """
    def __init__(self, message: str = "Unauthorized", details: Optional[Any] = None):
        super().__init__(message, code="FORBIDDEN", status_code=403, details=details)

class InternalServiceError(GatewayError):
    """
    Raised when a database lookup or other internal step fails unexpectedly.
    """
    def __init__(self, message: str = "Internal server error", details: Optional[Any] = None):
        super().__init__(message, code="INTERNAL_ERROR", status_code=500, details=details)

class UpstreamProxyError(GatewayError):
    """
    Raised when the key registration upstream cannot be reached or answers with non-JSON.
    """
    def __init__(self, message: str = "Failed to connect to proxy server", details: Optional[Any] = None):
        super().__init__(message, code="PROXY_ERROR", status_code=500, details=details)
