"""
Verifier configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).
HCAPTCHA_SECRET is the fallback secret for services.verification when the
caller does not pass one. ENV=production switches the logging defaults to
JSON output with hashed IPs; LOG_FORMAT / HASH_IPS still win when set.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERIFY_URL = "https://api.hcaptcha.com/siteverify"


class HcaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    hcaptcha_secret: str = ""
    hcaptcha_verify_url: str = DEFAULT_VERIFY_URL
    hcaptcha_timeout_seconds: float = 5.0

    # Reject challenges solved longer ago than this; None disables the check
    hcaptcha_max_challenge_age_seconds: Optional[int] = None


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    # None means "pick from ENV" (see AppSettings)
    log_format: Optional[str] = None
    hash_ips: Optional[bool] = None


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"

    # Sub-configs (composed via model_validator below)
    hcaptcha: Optional[HcaptchaSettings] = None
    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        if self.hcaptcha is None:
            self.hcaptcha = HcaptchaSettings()
        if self.logging is None:
            self.logging = LoggingSettings()

        # Production: JSON logs and hashed IPs unless explicitly configured
        if self.logging.log_format is None:
            self.logging.log_format = "json" if self.is_production else "console"
        if self.logging.hash_ips is None:
            self.logging.hash_ips = self.is_production
        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
