"""Tests for environment-driven settings."""

import pytest

from cnbrates.config import DEFAULT_BASE_URL, DEFAULT_DAILY_RATES_ENDPOINT, Settings, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings == Settings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.daily_rates_endpoint == DEFAULT_DAILY_RATES_ENDPOINT

    def test_overrides(self):
        settings = load_settings(
            {
                "CNB_BASE_URL": "http://localhost:8080/",
                "CNB_DAILY_RATES_ENDPOINT": "/daily.txt",
                "CNB_TIMEOUT_SECONDS": "5",
                "CNB_MAX_RETRIES": "0",
                "CNB_RETRY_DELAY_SECONDS": "0.25",
                "LOG_LEVEL": "debug",
            }
        )
        assert settings.base_url == "http://localhost:8080"
        assert settings.daily_rates_endpoint == "/daily.txt"
        assert settings.timeout == 5.0
        assert settings.max_retries == 0
        assert settings.retry_delay == 0.25
        assert settings.log_level == "DEBUG"

    def test_blank_number_uses_default(self):
        assert load_settings({"CNB_MAX_RETRIES": " "}).max_retries == 3

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("CNB_MAX_RETRIES", "7")
        assert load_settings().max_retries == 7

    @pytest.mark.parametrize(
        "env, message",
        [
            ({"CNB_MAX_RETRIES": "three"}, "CNB_MAX_RETRIES"),
            ({"CNB_TIMEOUT_SECONDS": "fast"}, "CNB_TIMEOUT_SECONDS"),
            ({"CNB_TIMEOUT_SECONDS": "0"}, "CNB_TIMEOUT_SECONDS"),
            ({"CNB_MAX_RETRIES": "-1"}, "CNB_MAX_RETRIES"),
            ({"CNB_RETRY_DELAY_SECONDS": "-0.5"}, "CNB_RETRY_DELAY_SECONDS"),
        ],
    )
    def test_invalid_values(self, env, message):
        with pytest.raises(ValueError, match=message):
            load_settings(env)
