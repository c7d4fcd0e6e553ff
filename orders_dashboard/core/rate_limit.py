"""Rate limiting configuration using slowapi."""

from slowapi import Limiter
from starlette.requests import Request

from orders_dashboard.core.config import settings


def _client_ip(request: Request) -> str:
    """Resolve the caller's IP, preferring the first X-Forwarded-For hop."""
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "127.0.0.1"


limiter = Limiter(key_func=_client_ip, default_limits=[settings.rate_limit_default])
