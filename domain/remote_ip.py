"""The optional IP address of the user who solved the challenge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import validators

from errors import Code, HcaptchaCodesError
from shared.logging import get_logger, hash_ip

log = get_logger(__name__)


@dataclass(frozen=True)
class RemoteIp:
    value: str

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["RemoteIp"]:
        """Return a RemoteIp for an IPv4/IPv6 *raw*, or None when it is empty.

        CIDR notation is rejected; the service expects a single host address.

        Raises:
            HcaptchaCodesError: ``INVALID_USER_IP`` when *raw* is not an address.
        """
        if not raw:
            return None
        if not (validators.ipv4(raw, cidr=False) or validators.ipv6(raw, cidr=False)):
            log.info("remote_ip_validation_failed", ip_hash=hash_ip(raw))
            raise HcaptchaCodesError({Code.INVALID_USER_IP})
        return cls(raw)

    def __str__(self) -> str:
        return self.value
