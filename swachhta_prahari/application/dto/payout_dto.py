from datetime import datetime
from typing import Optional

from pydantic import Field

from ...domain.constants import PayoutStatus
from ...domain.models.payout import Payout
from .base import ApiModel


class PayoutUpdateRequest(ApiModel):
    date: datetime
    worker_count: int = Field(ge=0)
    daily_wage: float = Field(ge=0)
    status: PayoutStatus


class PayoutResponse(ApiModel):
    id: str
    date: datetime
    worker_count: int
    daily_wage: float
    total_wage: float
    status: str
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, payout: Payout) -> "PayoutResponse":
        return cls(
            id=payout.payout_key,
            date=payout.date,
            worker_count=payout.worker_count,
            daily_wage=payout.daily_wage,
            total_wage=payout.total_wage,
            status=payout.status,
            updated_at=payout.updated_at,
        )
