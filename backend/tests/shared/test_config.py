"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
from datetime import time
import os

from pydantic import ValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings()
        assert settings.app_name == "Shelter Trials API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.app_version == "0.1.0"
        assert settings.storage_backend == "memory"
        assert settings.timezone == "UTC"
        assert settings.compliance_sweep_time == time(21, 1)
        assert settings.completion_sweep_time == time(23, 1)
        assert settings.missed_report_escalation_days == 2

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings()
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_sweep_schedule_from_env(self):
        with patch.dict(os.environ, {
            "COMPLIANCE_SWEEP_TIME": "20:30",
            "TIMEZONE": "Europe/Moscow",
            "ENABLE_SCHEDULER": "false",
        }):
            settings = Settings()
            assert settings.compliance_sweep_time == time(20, 30)
            assert settings.timezone == "Europe/Moscow"
            assert settings.enable_scheduler is False

    def test_loads_telegram_config_from_env(self):
        with patch.dict(os.environ, {"TELEGRAM_BOT_TOKEN": "test-token"}):
            assert Settings().telegram_bot_token == "test-token"

    def test_rejects_unknown_storage_backend(self):
        with patch.dict(os.environ, {"STORAGE_BACKEND": "mongodb"}):
            with pytest.raises(ValidationError):
                Settings()


class TestGetSettings:
    def test_supabase_uses_service_role_key_only(self):
        """Only the service-role client exists, so no anon key is configurable."""
        assert "supabase_anon_key" not in Settings.model_fields
        assert "supabase_service_role_key" in Settings.model_fields

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert isinstance(settings1, Settings)
        assert settings1 is settings2
