"""
Tests for settings and logging setup
"""

import logging

from clinicboard_bff.config import Settings
from clinicboard_bff.utils.logger import DEFAULT_LOGGING_CONFIG, load_logging_config, setup_logging


class TestSettings:

    def test_base_urls_from_gateway_url(self):
        config = Settings(gateway_url="http://gateway:8080")

        assert config.base_urls == {
            "USERS_SERVICE": "http://gateway:8080/user-service",
            "BUSINESS_SERVICE": "http://gateway:8080/business-service",
        }

    def test_trailing_slash_is_ignored(self):
        config = Settings(gateway_url="http://gateway:8080/")

        assert config.base_urls["USERS_SERVICE"] == "http://gateway:8080/user-service"

    def test_gateway_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("GATEWAY_URL", "http://api.example.com")

        assert Settings().base_urls["BUSINESS_SERVICE"] == "http://api.example.com/business-service"

    def test_token_defaults(self):
        config = Settings()

        assert config.access_token_key == "access_token"
        assert config.access_token_ttl_seconds == 3600


class TestLogging:

    def test_default_config_is_a_copy(self):
        config = load_logging_config(None)
        config["handlers"]["console"]["level"] = "DEBUG"

        assert DEFAULT_LOGGING_CONFIG["handlers"]["console"]["level"] == "INFO"

    def test_yaml_config_file(self, tmp_path):
        path = tmp_path / "logging.yml"
        path.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "formatters:\n"
            "  default:\n"
            "    format: '%(levelname)s %(message)s'\n"
            "handlers:\n"
            "  console:\n"
            "    class: logging.StreamHandler\n"
            "    formatter: default\n"
            "loggers:\n"
            "  clinicboard_bff:\n"
            "    level: WARNING\n"
            "    handlers: [console]\n"
        )

        config = setup_logging(str(path))

        assert config["loggers"]["clinicboard_bff"]["level"] == "WARNING"
        assert logging.getLogger("clinicboard_bff").level == logging.WARNING

    def test_level_and_format_overrides(self):
        config = setup_logging(log_level="debug", log_format="detailed")

        assert config["handlers"]["console"]["level"] == "DEBUG"
        assert config["handlers"]["console"]["formatter"] == "detailed"
        assert logging.getLogger("clinicboard_bff").level == logging.DEBUG

    def test_unknown_format_keeps_default(self):
        config = setup_logging(log_format="xml")

        assert config["handlers"]["console"]["formatter"] == "default"
