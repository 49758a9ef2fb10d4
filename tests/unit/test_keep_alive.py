"""
Unit tests for KeepAliveJob
"""
import asyncio
from unittest.mock import MagicMock, patch

import httpx
import pytest

from swachhta_prahari.infrastructure.jobs.keep_alive import KeepAliveJob


@pytest.fixture(autouse=True)
def keep_alive_settings():
    settings = MagicMock()
    settings.server_url = ""
    settings.keep_alive_interval_seconds = 840
    with patch("swachhta_prahari.infrastructure.jobs.keep_alive.get_settings", return_value=settings):
        yield settings


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestKeepAliveJob:
    """Tests for KeepAliveJob"""

    def test_disabled_without_server_url(self):
        job = KeepAliveJob()
        assert job.enabled is False
        assert job.start() is False

    @pytest.mark.asyncio
    async def test_ping_ok(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"message": "Server is awake"})

        async with _client(handler) as client:
            job = KeepAliveJob(server_url="http://prahari.test/", http_client=client)
            assert await job.ping() is True
        assert seen == ["http://prahari.test/cron/wake"]

    @pytest.mark.asyncio
    async def test_ping_accepts_non_object_json(self):
        async with _client(lambda request: httpx.Response(200, json=["awake"])) as client:
            job = KeepAliveJob(server_url="http://prahari.test", http_client=client)
            assert await job.ping() is True

    @pytest.mark.asyncio
    async def test_ping_server_error_is_false(self):
        async with _client(lambda request: httpx.Response(503)) as client:
            job = KeepAliveJob(server_url="http://prahari.test", http_client=client)
            assert await job.ping() is False

    @pytest.mark.asyncio
    async def test_ping_invalid_json_is_false(self):
        async with _client(lambda request: httpx.Response(200, content=b"not json")) as client:
            job = KeepAliveJob(server_url="http://prahari.test", http_client=client)
            assert await job.ping() is False

    @pytest.mark.asyncio
    async def test_job_keeps_running_after_odd_bodies(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json="awake")

        async with _client(handler) as client:
            job = KeepAliveJob(server_url="http://prahari.test", interval_seconds=0.01, http_client=client)
            assert job.start() is True
            await asyncio.sleep(0.1)
            assert job._task is not None and not job._task.done()
            await job.stop()

        assert len(calls) >= 2
        assert job._task is None
