from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class OneTimeCode:
    """A 6-digit code mailed to a user; expires through a TTL index"""
    id: Optional[str]
    email: str
    otp: str
    purpose: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.otp or len(self.otp) != 6 or not self.otp.isdigit():
            raise ValueError("OTP must be 6 digits")
