"""
Wire model for the siteverify JSON reply.

Example success body::

    {"success": true, "challenge_ts": "2024-01-01T12:00:00Z", "hostname": "example.com"}

Example failure body::

    {"success": false, "error-codes": ["invalid-input-secret", "bad-request"]}
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from errors import ErrorCode, decode_code


class HcaptchaResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: bool
    challenge_ts: Optional[datetime] = None
    hostname: Optional[str] = None
    credit: Optional[bool] = None
    error_codes: Optional[list[str]] = Field(default=None, alias="error-codes")
    # Enterprise risk analysis
    score: Optional[float] = None
    score_reason: Optional[list[str]] = None

    def error_codes_set(self) -> frozenset[ErrorCode]:
        return frozenset(decode_code(raw) for raw in self.error_codes or [])

    def is_expired(self, max_age: timedelta, now: Optional[datetime] = None) -> bool:
        """Return True when the challenge was solved longer than *max_age* ago.

        A reply without ``challenge_ts`` counts as expired since its age
        cannot be established.
        """
        if self.challenge_ts is None:
            return True
        ts = self.challenge_ts
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        now = now or datetime.now(timezone.utc)
        return now - ts > max_age
