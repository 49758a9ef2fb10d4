"""
Unit tests for payout and manager administration use cases.
"""
from dataclasses import replace
from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from swachhta_prahari.application.dto.payout_dto import PayoutUpdateRequest
from swachhta_prahari.application.dto.user_dto import ManagerUpdateRequest
from swachhta_prahari.application.use_cases.payout import UpdatePayoutUseCase, DeletePayoutUseCase
from swachhta_prahari.application.use_cases.manager import (
    ToggleManagerStatusUseCase,
    UpdateManagerUseCase,
    DeleteManagerUseCase,
)
from swachhta_prahari.domain.exceptions import NotFoundError, ValidationFailedError

from tests.factories import make_user


def _payout_request(status: str) -> PayoutUpdateRequest:
    return PayoutUpdateRequest(date=datetime(2025, 2, 1), worker_count=12, daily_wage=450.0, status=status)


class TestUpdatePayoutUseCase:
    """Tests for UpdatePayoutUseCase"""

    @pytest.mark.asyncio
    async def test_approved_is_upserted(self):
        repo = AsyncMock()
        repo.upsert.side_effect = lambda payout: payout

        result = await UpdatePayoutUseCase(repo).execute("2025-02-01", _payout_request("approved"), "usr-pay")

        stored = repo.upsert.call_args.args[0]
        assert stored.status == "approved"
        assert stored.payout_key == "2025-02-01"
        assert result.total_wage == 5400.0
        repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["pending", "rejected"])
    async def test_non_approved_never_persisted(self, status):
        repo = AsyncMock()
        repo.delete.return_value = True

        result = await UpdatePayoutUseCase(repo).execute("2025-02-01", _payout_request(status), "usr-pay")

        assert result is None
        repo.delete.assert_awaited_once_with("2025-02-01")
        repo.upsert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_missing(self):
        repo = AsyncMock()
        repo.delete.return_value = False
        with pytest.raises(NotFoundError, match="Payout not found"):
            await DeletePayoutUseCase(repo).execute("nope", "usr-admin")


class TestManagerUseCases:
    """Tests for manager administration"""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_status(self):
        stored = {"user": make_user("usr-5", refresh_token="refresh-abc")}
        repo = AsyncMock()
        repo.find_by_id.side_effect = lambda _id: stored["user"]

        def _save(user):
            stored["user"] = user
            return user

        repo.save.side_effect = _save
        use_case = ToggleManagerStatusUseCase(repo)

        first = await use_case.execute("usr-5", "usr-admin")
        assert first.is_active is False
        assert stored["user"].refresh_token is None

        second = await use_case.execute("usr-5", "usr-admin")
        assert second.is_active is True

    @pytest.mark.asyncio
    async def test_admin_accounts_are_not_managers(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = make_user("usr-admin", role="admin")
        with pytest.raises(NotFoundError, match="Manager not found"):
            await DeleteManagerUseCase(repo).execute("usr-admin", "usr-other-admin")

    @pytest.mark.asyncio
    async def test_update_rejects_taken_email(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = make_user("usr-5")
        repo.find_by_email.return_value = make_user("usr-6", email="taken@example.com")
        with pytest.raises(ValidationFailedError, match="Email already in use"):
            await UpdateManagerUseCase(repo).execute(
                "usr-5", ManagerUpdateRequest(email="taken@example.com"), "usr-admin"
            )

    @pytest.mark.asyncio
    async def test_update_rehashes_password(self, mock_settings):
        manager = make_user("usr-5")
        repo = AsyncMock()
        repo.find_by_id.return_value = manager
        repo.save.side_effect = lambda user: user

        result = await UpdateManagerUseCase(repo).execute(
            "usr-5", ManagerUpdateRequest(name="New Name", password="s3cret-pass"), "usr-admin"
        )

        saved = repo.save.call_args.args[0]
        assert result.name == "New Name"
        assert saved.hashed_password != manager.hashed_password
        assert saved.hashed_password.startswith("$2")
        assert replace(saved, hashed_password=manager.hashed_password, name=manager.name) == manager
