"""
The client-side half of a verification request.

Captcha bundles the response token with the optional site key and remote IP.
Callers holding these values on their own form or model type implement the
CaptchaSource protocol and build a Captcha with ``Captcha.from_source()``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional, Protocol

from errors import ErrorCode, HcaptchaCodesError

from .remote_ip import RemoteIp
from .response import ResponseToken
from .site_key import SiteKey


class CaptchaSource(Protocol):
    """Any caller type that can supply the three captcha fields."""

    def captcha_response(self) -> str: ...

    def captcha_site_key(self) -> Optional[str]: ...

    def captcha_remote_ip(self) -> Optional[str]: ...


@dataclass(frozen=True)
class Captcha:
    response: ResponseToken
    site_key: Optional[SiteKey] = None
    remote_ip: Optional[RemoteIp] = None

    @classmethod
    def new(
        cls,
        response: str,
        site_key: Optional[str] = None,
        remote_ip: Optional[str] = None,
    ) -> "Captcha":
        """Validate all three fields, raising one error with every failing code."""
        codes: set[ErrorCode] = set()
        parsed: dict = {}
        for name, parser, raw in (
            ("response", ResponseToken.parse, response),
            ("site_key", SiteKey.parse, site_key),
            ("remote_ip", RemoteIp.parse, remote_ip),
        ):
            try:
                parsed[name] = parser(raw)
            except HcaptchaCodesError as exc:
                codes |= exc.codes
        if codes:
            raise HcaptchaCodesError(codes)
        return cls(**parsed)

    @classmethod
    def from_source(cls, source: CaptchaSource) -> "Captcha":
        return cls.new(
            source.captcha_response(),
            site_key=source.captcha_site_key(),
            remote_ip=source.captcha_remote_ip(),
        )

    def with_site_key(self, raw: Optional[str]) -> "Captcha":
        return dataclasses.replace(self, site_key=SiteKey.parse(raw))

    def with_remote_ip(self, raw: Optional[str]) -> "Captcha":
        return dataclasses.replace(self, remote_ip=RemoteIp.parse(raw))
