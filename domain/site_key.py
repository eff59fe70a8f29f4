"""The optional site key identifying the hCaptcha site configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import validators

from errors import Code, HcaptchaCodesError
from shared.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class SiteKey:
    value: str

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["SiteKey"]:
        """Return a SiteKey for a UUID-shaped *raw*, or None when it is empty.

        Raises:
            HcaptchaCodesError: ``INVALID_SITE_KEY`` when *raw* is not a UUID.
        """
        if not raw:
            return None
        if not validators.uuid(raw):
            log.info("site_key_validation_failed", length=len(raw))
            raise HcaptchaCodesError({Code.INVALID_SITE_KEY})
        return cls(raw)

    def __str__(self) -> str:
        return self.value
