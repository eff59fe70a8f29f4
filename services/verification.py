"""
Verify a caller's form (or any CaptchaSource) in one call.

Local validation covers the captcha fields and the secret together, so a
form with a bad site key and a malformed secret reports both problems in a
single HcaptchaCodesError before anything is sent.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from config import HcaptchaSettings
from domain import Captcha, CaptchaSource, HcaptchaRequest, HcaptchaResponse, Secret
from errors import ErrorCode, HcaptchaCodesError
from infrastructure.captcha.protocol import CaptchaVerifier
from shared.logging import get_logger

log = get_logger(__name__)


def build_request(
    source: CaptchaSource,
    secret: Optional[str] = None,
    *,
    settings: Optional[HcaptchaSettings] = None,
) -> HcaptchaRequest:
    """Validate *source* and *secret*, raising every failing code at once.

    When *secret* is None the configured ``HCAPTCHA_SECRET`` is used.
    """
    if secret is None:
        secret = (settings or HcaptchaSettings()).hcaptcha_secret

    codes: set[ErrorCode] = set()
    captcha: Optional[Captcha] = None
    try:
        captcha = Captcha.from_source(source)
    except HcaptchaCodesError as exc:
        codes |= exc.codes
    try:
        Secret.parse(secret)
    except HcaptchaCodesError as exc:
        codes |= exc.codes

    if codes or captcha is None:
        log.info(
            "captcha_form_validation_failed",
            codes=sorted(str(c) for c in codes),
        )
        raise HcaptchaCodesError(codes)
    return HcaptchaRequest.build(secret, captcha)


async def valid_response(
    source: CaptchaSource,
    secret: Optional[str],
    verifier: CaptchaVerifier,
    *,
    max_age: Optional[timedelta] = None,
    verify_url: Optional[str] = None,
    settings: Optional[HcaptchaSettings] = None,
) -> HcaptchaResponse:
    """Validate *source* locally, then verify it with *verifier*.

    Args:
        source: Caller form supplying the captcha fields.
        secret: Site secret; None falls back to ``settings.hcaptcha_secret``.
        verifier: Usually an HcaptchaClient.
        max_age: Reject challenges solved longer ago than this.
        verify_url: Endpoint override for this call.
        settings: Settings to read the fallback secret from; loaded from the
            environment when omitted.

    Raises:
        HcaptchaCodesError: local validation or remote rejection.
        HcaptchaTransportError, HcaptchaSerializationError: from the verifier.
    """
    request = build_request(source, secret, settings=settings)
    return await verifier.verify(request, max_age=max_age, verify_url=verify_url)
