"""
hCaptcha domain types.

Every type validates at construction; an instance that exists is valid.
"""

from .captcha import Captcha, CaptchaSource
from .remote_ip import RemoteIp
from .request import HcaptchaRequest
from .response import ResponseToken
from .secret import Secret
from .site_key import SiteKey
from .verify_response import HcaptchaResponse

__all__ = [
    "Captcha",
    "CaptchaSource",
    "HcaptchaRequest",
    "HcaptchaResponse",
    "RemoteIp",
    "ResponseToken",
    "Secret",
    "SiteKey",
]
