"""Unit tests for AppSettings and sub-configs."""

from config import (
    DEFAULT_VERIFY_URL,
    AppSettings,
    HcaptchaSettings,
    LoggingSettings,
)


# ---------------------------------------------------------------------------
# HcaptchaSettings
# ---------------------------------------------------------------------------


class TestHcaptchaSettings:
    def test_defaults(self, monkeypatch):
        for var in (
            "HCAPTCHA_SECRET",
            "HCAPTCHA_VERIFY_URL",
            "HCAPTCHA_TIMEOUT_SECONDS",
            "HCAPTCHA_MAX_CHALLENGE_AGE_SECONDS",
        ):
            monkeypatch.delenv(var, raising=False)
        s = HcaptchaSettings()
        assert s.hcaptcha_secret == ""
        assert s.hcaptcha_verify_url == DEFAULT_VERIFY_URL
        assert s.hcaptcha_timeout_seconds == 5.0
        assert s.hcaptcha_max_challenge_age_seconds is None

    def test_loads_from_env(self, monkeypatch):
        monkeypatch.setenv("HCAPTCHA_SECRET", "0x" + "0" * 40)
        monkeypatch.setenv("HCAPTCHA_VERIFY_URL", "http://localhost:8080/siteverify")
        monkeypatch.setenv("HCAPTCHA_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("HCAPTCHA_MAX_CHALLENGE_AGE_SECONDS", "300")
        s = HcaptchaSettings()
        assert s.hcaptcha_secret == "0x" + "0" * 40
        assert s.hcaptcha_verify_url == "http://localhost:8080/siteverify"
        assert s.hcaptcha_timeout_seconds == 2.5
        assert s.hcaptcha_max_challenge_age_seconds == 300


# ---------------------------------------------------------------------------
# LoggingSettings
# ---------------------------------------------------------------------------


class TestLoggingSettings:
    def test_defaults(self, monkeypatch):
        for var in ("LOG_LEVEL", "LOG_FORMAT", "HASH_IPS"):
            monkeypatch.delenv(var, raising=False)
        s = LoggingSettings()
        assert s.log_level == "INFO"
        assert s.log_format is None
        assert s.hash_ips is None

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        assert LoggingSettings().log_format == "json"


# ---------------------------------------------------------------------------
# AppSettings
# ---------------------------------------------------------------------------


class TestAppSettings:
    def test_sub_configs_populated(self):
        s = AppSettings()
        assert isinstance(s.hcaptcha, HcaptchaSettings)
        assert isinstance(s.logging, LoggingSettings)

    def test_sub_config_reads_same_env(self, monkeypatch):
        monkeypatch.setenv("HCAPTCHA_TIMEOUT_SECONDS", "1")
        assert AppSettings().hcaptcha.hcaptcha_timeout_seconds == 1.0

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        assert AppSettings().is_production is True

    def test_not_production_by_default(self, monkeypatch):
        monkeypatch.delenv("ENV", raising=False)
        assert AppSettings().is_production is False

    def test_production_defaults_to_json_and_hashed_ips(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        monkeypatch.delenv("HASH_IPS", raising=False)
        s = AppSettings()
        assert s.logging.log_format == "json"
        assert s.logging.hash_ips is True

    def test_development_defaults_to_console(self, monkeypatch):
        for var in ("ENV", "LOG_FORMAT", "HASH_IPS"):
            monkeypatch.delenv(var, raising=False)
        s = AppSettings()
        assert s.logging.log_format == "console"
        assert s.logging.hash_ips is False

    def test_explicit_log_format_wins_in_production(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        monkeypatch.setenv("LOG_FORMAT", "console")
        monkeypatch.setenv("HASH_IPS", "false")
        s = AppSettings()
        assert s.logging.log_format == "console"
        assert s.logging.hash_ips is False
