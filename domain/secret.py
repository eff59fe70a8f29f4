"""
The hCaptcha secret key.

The raw value lives in a ``pydantic.SecretStr`` so ``str()``, ``repr()`` and
structured log output only ever show a placeholder. Call ``expose_secret()``
to get the real string, and only where it is sent to the service.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pydantic import SecretStr

from errors import Code, HcaptchaCodesError
from shared.logging import get_logger

log = get_logger(__name__)

SECRET_PREFIX = "0x"
SECRET_LENGTH = 42

_HEX_BODY = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True)
class Secret:
    value: SecretStr

    @classmethod
    def parse(cls, raw: str) -> "Secret":
        """Validate *raw* as an hCaptcha secret.

        Rules:
        - Must not be empty (``MISSING_SECRET``)
        - Must be exactly 42 characters (``INVALID_SECRET_EXT_WRONG_LEN``)
        - Must be ``0x`` followed by hex digits (``INVALID_SECRET_EXT_NOT_HEX``)

        Every violated format rule is reported, not just the first.

        Raises:
            HcaptchaCodesError: with the violated codes.
        """
        if not raw:
            raise HcaptchaCodesError({Code.MISSING_SECRET})

        codes: set[Code] = set()
        if len(raw) != SECRET_LENGTH:
            codes.add(Code.INVALID_SECRET_EXT_WRONG_LEN)
        if not raw.startswith(SECRET_PREFIX) or not _HEX_BODY.fullmatch(
            raw[len(SECRET_PREFIX) :]
        ):
            codes.add(Code.INVALID_SECRET_EXT_NOT_HEX)
        if codes:
            log.info(
                "secret_validation_failed",
                reasons=sorted(c.value for c in codes),
                length=len(raw),
            )
            raise HcaptchaCodesError(codes)
        return cls(SecretStr(raw))

    def expose_secret(self) -> str:
        return self.value.get_secret_value()

    def __str__(self) -> str:
        return str(self.value)
