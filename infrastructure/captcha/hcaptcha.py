"""hCaptcha siteverify client.

verify() sends one HcaptchaRequest and either returns the decoded success
payload or raises an HcaptchaError:

- transport failure or non-2xx status → HcaptchaTransportError
- undecodable body                     → HcaptchaSerializationError
- ``success: false``                   → HcaptchaCodesError with every code
- challenge older than ``max_age``     → HcaptchaCodesError(CHALLENGE_EXPIRED)

There is no retry; the transport's timeout is the only time limit.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from config import DEFAULT_VERIFY_URL, HcaptchaSettings
from domain import HcaptchaRequest, HcaptchaResponse
from errors import (
    Code,
    HcaptchaCodesError,
    HcaptchaSerializationError,
    HcaptchaTransportError,
)
from infrastructure.captcha.protocol import FormTransport
from infrastructure.http_client import HttpClient
from shared.logging import get_logger

log = get_logger(__name__)


class HcaptchaClient:
    def __init__(
        self,
        http_client: FormTransport,
        verify_url: str = DEFAULT_VERIFY_URL,
        max_age: Optional[timedelta] = None,
    ) -> None:
        self._http = http_client
        self._verify_url = verify_url
        self._max_age = max_age

    @classmethod
    def from_settings(cls, settings: HcaptchaSettings) -> "HcaptchaClient":
        max_age = None
        if settings.hcaptcha_max_challenge_age_seconds is not None:
            max_age = timedelta(seconds=settings.hcaptcha_max_challenge_age_seconds)
        return cls(
            HttpClient(timeout=settings.hcaptcha_timeout_seconds),
            verify_url=settings.hcaptcha_verify_url,
            max_age=max_age,
        )

    @property
    def verify_url(self) -> str:
        return self._verify_url

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "HcaptchaClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def verify(
        self,
        request: HcaptchaRequest,
        *,
        max_age: Optional[timedelta] = None,
        verify_url: Optional[str] = None,
    ) -> HcaptchaResponse:
        """Submit *request* and interpret the reply.

        Args:
            request: A validated request.
            max_age: Reject challenges solved longer ago than this. Falls back
                to the client default; None on both disables the check.
            verify_url: Endpoint for this call only, e.g. a mock server.
                Falls back to the client's endpoint.

        Raises:
            HcaptchaCodesError: the service rejected the request, or the
                challenge is too old.
            HcaptchaTransportError: network failure or non-2xx status.
            HcaptchaSerializationError: the reply is not a valid siteverify body.
        """
        url = verify_url or self._verify_url
        try:
            response = await self._http.post_form(url, request.to_form())
        except httpx.HTTPError as e:
            log.error(
                "hcaptcha_request_failed", error=str(e), error_type=type(e).__name__
            )
            raise HcaptchaTransportError(f"siteverify request failed: {e}") from e

        if not response.is_success:
            log.error(
                "hcaptcha_api_error",
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            raise HcaptchaTransportError(
                f"siteverify returned HTTP {response.status_code}",
                http_status=response.status_code,
            )

        try:
            payload = HcaptchaResponse.model_validate_json(response.content)
        except ValidationError as e:
            log.error("hcaptcha_response_invalid", error_count=e.error_count())
            raise HcaptchaSerializationError(
                "siteverify reply could not be decoded"
            ) from e

        if not payload.success:
            codes = payload.error_codes_set()
            log.warning(
                "hcaptcha_verification_failed",
                error_codes=sorted(str(c) for c in codes),
                **request.to_log_dict(),
            )
            raise HcaptchaCodesError(codes)

        max_age = max_age if max_age is not None else self._max_age
        if max_age is not None and payload.is_expired(max_age):
            log.warning(
                "hcaptcha_challenge_expired",
                challenge_ts=payload.challenge_ts.isoformat()
                if payload.challenge_ts
                else None,
                max_age_seconds=max_age.total_seconds(),
            )
            raise HcaptchaCodesError({Code.CHALLENGE_EXPIRED})

        log.info("hcaptcha_verified", hostname=payload.hostname)
        return payload
