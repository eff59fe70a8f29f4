"""The client's response token, as produced by the hCaptcha widget."""

from __future__ import annotations

from dataclasses import dataclass

from errors import Code, HcaptchaCodesError


@dataclass(frozen=True)
class ResponseToken:
    value: str

    @classmethod
    def parse(cls, raw: str) -> "ResponseToken":
        # The token format is opaque; only presence is checked.
        if not raw:
            raise HcaptchaCodesError({Code.MISSING_RESPONSE})
        return cls(raw)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)
