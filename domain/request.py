"""
HcaptchaRequest: the validated unit submitted to the siteverify endpoint.

A request pairs a Captcha with the site's Secret. It is immutable: the
``with_*`` methods re-run field validation and return a new request with
only that field replaced.

The secret never appears in ``repr()``, ``to_log_dict()`` or log events.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from shared.logging import get_logger, hash_ip

from .captcha import Captcha
from .secret import Secret

log = get_logger(__name__)


@dataclass(frozen=True)
class HcaptchaRequest:
    captcha: Captcha
    secret: Secret = field(repr=False)

    @classmethod
    def build(cls, secret: str, captcha: Captcha) -> "HcaptchaRequest":
        """Create a request from an already validated Captcha.

        Raises:
            HcaptchaCodesError: when *secret* is missing or malformed.
        """
        request = cls(captcha=captcha, secret=Secret.parse(secret))
        log.debug("hcaptcha_request_built", **request.to_log_dict())
        return request

    @classmethod
    def build_from_response(cls, secret: str, response: str) -> "HcaptchaRequest":
        """Create a request from the bare response token.

        Raises:
            HcaptchaCodesError: for a missing response or a bad secret.
        """
        return cls.build(secret, Captcha.new(response))

    def with_remote_ip(self, remote_ip: Optional[str]) -> "HcaptchaRequest":
        return dataclasses.replace(
            self, captcha=self.captcha.with_remote_ip(remote_ip)
        )

    def with_site_key(self, site_key: Optional[str]) -> "HcaptchaRequest":
        return dataclasses.replace(self, captcha=self.captcha.with_site_key(site_key))

    @property
    def response(self) -> str:
        return self.captcha.response.value

    @property
    def site_key(self) -> Optional[str]:
        return self.captcha.site_key.value if self.captcha.site_key else None

    @property
    def remote_ip(self) -> Optional[str]:
        return self.captcha.remote_ip.value if self.captcha.remote_ip else None

    def to_form(self) -> dict[str, str]:
        """Return the form body for the siteverify POST.

        Field order is ``response``, ``remoteip``, ``sitekey``, ``secret``;
        optional fields are left out when absent.
        """
        form: dict[str, str] = {"response": self.response}
        if self.remote_ip is not None:
            form["remoteip"] = self.remote_ip
        if self.site_key is not None:
            form["sitekey"] = self.site_key
        form["secret"] = self.secret.expose_secret()
        return form

    def to_log_dict(self) -> dict:
        """Fields that are safe to attach to log events."""
        return {
            "response_length": len(self.captcha.response),
            "site_id": self.site_key,
            "ip_hash": hash_ip(self.remote_ip),
        }
