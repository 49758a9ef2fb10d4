from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..constants.enums import PayoutStatus


@dataclass
class Payout:
    """Domain model for a daily worker payout; only approved payouts are stored"""
    id: Optional[str]
    payout_key: str
    date: datetime
    worker_count: int
    daily_wage: float
    status: str = PayoutStatus.APPROVED.value
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.payout_key:
            raise ValueError("Payout ID is required")
        if self.worker_count < 0:
            raise ValueError("Worker count cannot be negative")
        if self.daily_wage < 0:
            raise ValueError("Daily wage cannot be negative")
        if self.status not in {s.value for s in PayoutStatus}:
            raise ValueError(f"Invalid payout status: {self.status}")

    @property
    def total_wage(self) -> float:
        return self.worker_count * self.daily_wage
