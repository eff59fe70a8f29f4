"""Protocols the verifier depends on, not the concrete implementations."""

from datetime import timedelta
from typing import Optional, Protocol

from domain import HcaptchaRequest, HcaptchaResponse


class TransportResponse(Protocol):
    """The parts of an HTTP reply the verifier reads."""

    @property
    def status_code(self) -> int: ...

    @property
    def is_success(self) -> bool: ...

    @property
    def content(self) -> bytes: ...

    @property
    def text(self) -> str: ...


class FormTransport(Protocol):
    async def post_form(self, url: str, form: dict[str, str]) -> TransportResponse: ...

    async def aclose(self) -> None: ...


class CaptchaVerifier(Protocol):
    async def verify(
        self,
        request: HcaptchaRequest,
        *,
        max_age: Optional[timedelta] = None,
        verify_url: Optional[str] = None,
    ) -> HcaptchaResponse: ...
