# backend/modules/forms/tests/test_config.py

import logging

import pytest
from pydantic import ValidationError

from core.config import Settings
from core.logging_config import configure_logging
from modules.forms.config.forms_config import FormsConfig, get_forms_config, forms_config


class TestFormsConfig:
    """Test cases for forms configuration"""

    def test_defaults(self):
        config = FormsConfig()

        assert config.SCORING_ENABLED is True
        assert config.LOG_UNKNOWN_FIELD_KINDS is True
        assert config.LOG_SCORE_DETAILS is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("FORMS_SCORING_ENABLED", "false")
        monkeypatch.setenv("forms_log_score_details", "1")

        config = FormsConfig()

        assert config.SCORING_ENABLED is False
        assert config.LOG_SCORE_DETAILS is True

    def test_global_instance(self):
        assert get_forms_config() is forms_config


class TestSettings:
    """Test cases for core settings and logging setup"""

    def test_values_are_normalized(self):
        settings = Settings(environment="Production", log_level="warning")

        assert settings.environment == "production"
        assert settings.log_level == "WARNING"
        assert settings.is_production is True
        assert settings.is_development is False

    @pytest.mark.parametrize("overrides", [
        {"environment": "qa"},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            Settings(**overrides)

    def test_configure_logging(self, tmp_path):
        log_file = tmp_path / "forms.log"
        settings = Settings(environment="test", log_level="DEBUG", log_file=str(log_file))
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        try:
            configure_logging(settings)
            logging.getLogger("modules.forms").debug("configured")
            for handler in root.handlers:
                handler.flush()

            assert root.level == logging.DEBUG
            assert "configured" in log_file.read_text()
        finally:
            for handler in root.handlers:
                if handler not in saved_handlers:
                    handler.close()
            root.handlers = saved_handlers
            root.setLevel(saved_level)
