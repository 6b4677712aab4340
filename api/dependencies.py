"""FastAPI dependencies shared by route modules.

Includes trusted proxy validation to prevent X-Forwarded-For spoofing
and the per-client rate limiter applied to password endpoints.
"""

from fastapi import Request
from slowapi import Limiter

from core.config import RATE_LIMIT, TRUSTED_PROXIES


def get_client_ip(request: Request) -> str:
    """Extract client IP from request with trusted proxy validation.

    SECURITY: Only trusts X-Forwarded-For header if the direct connection
    comes from a configured trusted proxy. This prevents attackers from
    spoofing their IP address by setting the X-Forwarded-For header.

    Configure trusted proxies via TRUSTED_PROXIES environment variable.
    Example: TRUSTED_PROXIES=10.0.0.1,172.17.0.1

    Args:
        request: FastAPI request object

    Returns:
        Client IP address (from X-Forwarded-For if trusted proxy, else direct)
    """
    direct_ip = request.client.host if request.client else "unknown"

    if TRUSTED_PROXIES and direct_ip in TRUSTED_PROXIES:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # Take the first IP in the chain (original client)
            client_ip = forwarded.split(",")[0].strip()
            if client_ip and ("." in client_ip or ":" in client_ip):
                return client_ip

    return direct_ip


def get_rate_limit() -> str:
    """Current limit string, read on every request."""
    return RATE_LIMIT


# Rate limiter keyed on the resolved client IP.
# Routes opt in with @limiter.limit(get_rate_limit).
limiter = Limiter(key_func=get_client_ip)
