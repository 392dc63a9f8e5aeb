"""
utils/constants.py

Purpose: Centralized static content

- Client-facing error messages
- CORS headers for the socket info route

(Prevents hardcoding across the codebase)
"""

# ============================================================
# ERROR MESSAGES
# ============================================================

UNAUTHORIZED_MESSAGE = "Unauthorized"

FETCH_USERS_FAILED_MESSAGE = "Failed to fetch users"

ADMIN_CHECK_FAILED_MESSAGE = "Failed to check admin status"

PROXY_FAILED_MESSAGE = "Failed to connect to proxy server"

# ============================================================
# REALTIME
# ============================================================

SOCKET_INFO_MESSAGE = "Socket.io is available at {path}"

SOCKET_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

SOCKET_PREFLIGHT_MAX_AGE = "86400"
