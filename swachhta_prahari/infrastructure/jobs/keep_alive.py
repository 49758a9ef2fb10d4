"""
Keep-alive job.

Hosting tiers that idle out quiet services are kept awake by requesting our
own /cron/wake endpoint on a fixed interval.
"""

# Standard library imports
import asyncio
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class KeepAliveJob:
    """Periodically pings <server_url>/cron/wake until stopped"""

    def __init__(
        self,
        server_url: Optional[str] = None,
        interval_seconds: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self.server_url = (server_url if server_url is not None else settings.server_url).rstrip("/")
        self.interval_seconds = interval_seconds or settings.keep_alive_interval_seconds
        self._http_client = http_client
        self._task: Optional[asyncio.Task] = None

    @property
    def enabled(self) -> bool:
        return bool(self.server_url)

    async def ping(self) -> bool:
        """Run one wake request. Failures are logged and reported as False."""
        client = self._http_client if self._http_client is not None else get_shared_http_client()
        try:
            response = await client.get(f"{self.server_url}/cron/wake", timeout=30.0)
            response.raise_for_status()
            body = response.json()
            message = body.get("message", "") if isinstance(body, dict) else body
            logger.info(f"keep-alive ping ok: {message}")
            return True
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"keep-alive ping failed: {e}")
            return False

    async def _run(self) -> None:
        logger.info(f"Keep-alive job started (every {self.interval_seconds}s -> {self.server_url})")
        while True:
            try:
                await asyncio.sleep(self.interval_seconds)
                await self.ping()
            except asyncio.CancelledError:
                logger.info("Keep-alive job cancelled")
                break

    def start(self) -> bool:
        if not self.enabled:
            logger.warning("SERVER_URL not set; keep-alive job disabled")
            return False
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run())
        return True

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
