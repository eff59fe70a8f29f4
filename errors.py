"""
hCaptcha error taxonomy and FastAPI exception handlers.

Code is the closed set of failure reasons; UnknownCode carries any code string
the remote service sends that we do not know yet, so decoding never fails.

HcaptchaError is the base for all typed errors:

- HcaptchaCodesError: one or more Codes (local validation or remote)
- HcaptchaTransportError: network failure, timeout or non-2xx status
- HcaptchaSerializationError: the reply body could not be decoded
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class Code(str, Enum):
    MISSING_SECRET = "missing-input-secret"
    INVALID_SECRET = "invalid-input-secret"
    INVALID_SECRET_EXT_NOT_HEX = "invalid-secret-ext-not-hex"
    INVALID_SECRET_EXT_WRONG_LEN = "invalid-secret-ext-wrong-len"
    MISSING_RESPONSE = "missing-input-response"
    INVALID_RESPONSE = "invalid-input-response"
    BAD_REQUEST = "bad-request"
    INVALID_ALREADY_SEEN_RESPONSE = "invalid-or-already-seen-response"
    INVALID_SITE_KEY = "invalid-site-key"
    INVALID_USER_IP = "invalid-user-ip"
    CHALLENGE_EXPIRED = "challenge-expired"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnknownCode:
    """A code string the verification service returned that Code does not cover."""

    code: str

    @property
    def value(self) -> str:
        return self.code

    def __str__(self) -> str:
        return self.code


ErrorCode = Union[Code, UnknownCode]

# Only codes the remote service actually sends are decoded to Code members.
_WIRE_CODES: dict[str, Code] = {
    code.value: code
    for code in (
        Code.MISSING_SECRET,
        Code.INVALID_SECRET,
        Code.MISSING_RESPONSE,
        Code.INVALID_RESPONSE,
        Code.BAD_REQUEST,
        Code.INVALID_ALREADY_SEEN_RESPONSE,
    )
}


def decode_code(raw: str) -> ErrorCode:
    """Map a remote error-code string to a Code, or UnknownCode if unrecognised."""
    return _WIRE_CODES.get(raw, UnknownCode(raw))


class HcaptchaError(Exception):
    """Base hCaptcha error. All typed errors inherit from this."""

    status_code: int = 500
    error_code: str = "captcha_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class HcaptchaCodesError(HcaptchaError):
    """Every reason a request was rejected, locally or by the service."""

    status_code = 400
    error_code = "captcha_invalid"

    def __init__(self, codes: Iterable[ErrorCode]) -> None:
        self.codes: frozenset[ErrorCode] = frozenset(codes)
        names = sorted(str(c) for c in self.codes)
        super().__init__(
            f"captcha verification failed: {', '.join(names)}", details=names
        )

    @classmethod
    def from_wire(cls, raw_codes: Iterable[str]) -> "HcaptchaCodesError":
        return cls(decode_code(raw) for raw in raw_codes)

    def merge(self, other: "HcaptchaCodesError") -> "HcaptchaCodesError":
        return HcaptchaCodesError(self.codes | other.codes)

    def __contains__(self, code: object) -> bool:
        return code in self.codes


class HcaptchaTransportError(HcaptchaError):
    status_code = 502
    error_code = "captcha_transport_error"

    def __init__(self, message: str, *, http_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.http_status = http_status


class HcaptchaSerializationError(HcaptchaError):
    status_code = 502
    error_code = "captcha_serialization_error"


def register_error_handlers(app: FastAPI) -> None:
    """Register a handler converting HcaptchaError to a JSON response."""

    @app.exception_handler(HcaptchaError)
    async def hcaptcha_error_handler(
        request: Request, exc: HcaptchaError
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
