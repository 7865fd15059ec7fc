"""Tests for application configuration management."""

import os
import tempfile
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from planner.config import (
    Settings,
    get_global_settings,
    get_settings,
    reset_global_settings,
)


class TestSettings:
    """Test cases for Settings class."""

    def test_settings_loads_from_env_file(self):
        """Test that settings can load from a .env file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".env", delete=False) as f:
            f.write("APP_ENV=testing\n")
            f.write("SECRET_KEY=test-secret-from-file\n")
            f.write("STORAGE_BASE_PATH=/var/lib/planner\n")
            f.write("LOG_LEVEL=DEBUG\n")
            temp_env_file = f.name

        try:
            with patch.dict(os.environ, {}, clear=True):
                settings = Settings(_env_file=temp_env_file)

                assert settings.app_env == "testing"
                assert settings.secret_key == "test-secret-from-file"
                assert settings.storage_base_path == "/var/lib/planner"
                assert settings.log_level == "DEBUG"
        finally:
            os.unlink(temp_env_file)

    def test_missing_secret_key_raises_exception(self):
        """Test that missing SECRET_KEY raises ValidationError."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SECRET_KEY" in str(exc_info.value)

    def test_placeholder_secret_key_raises_exception(self):
        """Test that placeholder SECRET_KEY raises ValidationError."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "your-secret-key-here-change-in-production"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SECRET_KEY must be set to a secure value" in str(exc_info.value)

    def test_app_env_validation(self):
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "APP_ENV": "invalid-env"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "APP_ENV must be one of" in str(exc_info.value)

    def test_log_level_validation(self):
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "LOG_LEVEL": "INVALID_LEVEL"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "LOG_LEVEL must be one of" in str(exc_info.value)

    def test_log_level_case_insensitive(self):
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "LOG_LEVEL": "debug"},
            clear=True,
        ):
            settings = Settings(_env_file=None)
            assert settings.log_level == "DEBUG"

    def test_storage_type_validation(self):
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "STORAGE_TYPE": "s3"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "STORAGE_TYPE must be one of" in str(exc_info.value)

    def test_default_values(self):
        """Test default values when environment variables are not set."""
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.app_env == "development"
            assert settings.flask_app == "wsgi.py"
            assert settings.flask_env == "development"
            assert settings.storage_type == "local"
            assert settings.storage_base_path == "storage"
            assert settings.state_storage_key == "financial-planner-state"
            assert settings.log_level == "INFO"
            assert settings.default_annual_income == 100000
            assert settings.default_initial_savings == 10000
            assert settings.default_savings_rate == 20
            assert settings.year_options == [5, 10, 15, 20, 25, 30]
            assert settings.return_rate_options == [4, 5, 6, 7, 8, 9, 10]
            assert settings.green_threshold == 2_000_000
            assert settings.yellow_threshold == 1_000_000

    def test_matrix_options_from_environment(self):
        """List settings are read as JSON."""
        with patch.dict(
            os.environ,
            {
                "SECRET_KEY": "valid-secret-key-123",
                "YEAR_OPTIONS": "[1, 2, 40]",
                "RETURN_RATE_OPTIONS": "[3.5, 12]",
            },
            clear=True,
        ):
            settings = Settings(_env_file=None)

            assert settings.year_options == [1, 2, 40]
            assert settings.return_rate_options == [3.5, 12]

    def test_empty_year_options_rejected(self):
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "YEAR_OPTIONS": "[]"},
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "YEAR_OPTIONS must be a non-empty list" in str(exc_info.value)

    def test_thresholds_must_be_ordered(self):
        with patch.dict(
            os.environ,
            {
                "SECRET_KEY": "valid-secret-key-123",
                "GREEN_THRESHOLD": "500000",
                "YELLOW_THRESHOLD": "750000",
            },
            clear=True,
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "GREEN_THRESHOLD must be greater than YELLOW_THRESHOLD" in str(
                exc_info.value
            )

    def test_environment_variable_aliases(self):
        with patch.dict(
            os.environ,
            {
                "SECRET_KEY": "valid-secret-key-123",
                "APP_ENV": "production",
                "STATE_STORAGE_KEY": "prod-state",
                "DEFAULT_SAVINGS_RATE": "15",
                "LOG_LEVEL": "ERROR",
            },
            clear=True,
        ):
            settings = Settings(_env_file=None)

            assert settings.app_env == "production"
            assert settings.state_storage_key == "prod-state"
            assert settings.default_savings_rate == 15
            assert settings.log_level == "ERROR"


class TestSettingsHelpers:
    """Test cases for the settings accessors."""

    def test_get_settings_function(self):
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            settings = get_settings()
            assert isinstance(settings, Settings)
            assert settings.secret_key == "valid-secret-key-123"

    def test_global_settings_are_cached(self):
        reset_global_settings()
        try:
            with patch.dict(
                os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True
            ):
                first = get_global_settings()
                second = get_global_settings()

            assert first is second
        finally:
            reset_global_settings()
