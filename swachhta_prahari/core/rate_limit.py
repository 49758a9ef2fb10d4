"""In-process fixed-window rate limiting keyed by client address"""

# Standard library imports
import logging
import time
from typing import Callable, Dict, Optional, Tuple

# External package imports
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class FixedWindowRateLimiter:
    """
    Counts hits per key inside fixed windows of ``window_seconds``.

    State lives in process memory, so limits apply per worker.
    """

    def __init__(self, max_requests: int, window_seconds: int, clock: Callable[[], float] = time.monotonic) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, Tuple[float, int]] = {}

    def hit(self, key: str) -> bool:
        """Record one request; returns False when the key is over its limit"""
        now = self._clock()
        started, count = self._windows.get(key, (now, 0))
        if now - started >= self.window_seconds:
            started, count = now, 0
        count += 1
        self._windows[key] = (started, count)
        if len(self._windows) > 10000:
            self._evict(now)
        return count <= self.max_requests

    def retry_after(self, key: str) -> int:
        started, _ = self._windows.get(key, (self._clock(), 0))
        return max(1, int(self.window_seconds - (self._clock() - started)))

    def reset(self) -> None:
        self._windows.clear()

    def _evict(self, now: float) -> None:
        expired = [k for k, (started, _) in self._windows.items() if now - started >= self.window_seconds]
        for key in expired:
            del self._windows[key]


def client_key(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def rate_limited_response(retry_after: int) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={"success": False, "message": "Too many requests from this IP, please try again later."},
        headers={"Retry-After": str(retry_after)},
    )


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Applies a limiter to every request under ``path_prefix`` except excluded paths"""

    def __init__(
        self,
        app,
        limiter: FixedWindowRateLimiter,
        path_prefix: str = "/api",
        exclude_paths: Optional[Tuple[str, ...]] = None,
    ) -> None:
        super().__init__(app)
        self.limiter = limiter
        self.path_prefix = path_prefix
        self.exclude_paths = exclude_paths or ()

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path.startswith(self.path_prefix) and path not in self.exclude_paths:
            key = client_key(request)
            if not self.limiter.hit(key):
                logger.warning(f"Rate limit exceeded for {key} on {path}")
                return rate_limited_response(self.limiter.retry_after(key))
        return await call_next(request)
