from abc import ABC, abstractmethod
from typing import Optional

from ..models.one_time_code import OneTimeCode


class OtpRepository(ABC):
    """Repository interface for one-time codes"""

    @abstractmethod
    async def save(self, code: OneTimeCode) -> OneTimeCode:
        """Store a code, replacing any earlier code for the same email"""
        pass

    @abstractmethod
    async def find(self, email: str, otp: str) -> Optional[OneTimeCode]:
        pass

    @abstractmethod
    async def delete_for_email(self, email: str) -> None:
        pass
