import logging
from unittest.mock import patch

import pytest

from syndication_toolkit.config import ConfigManager
from syndication_toolkit.core.exceptions import ArgumentEmptyError
from syndication_toolkit.core.extensions import DublinCoreElementSetSyndicationExtension
from syndication_toolkit.core.fetch import WebRequestOptions
from syndication_toolkit.core.settings import LoadSettings, SaveSettings
from syndication_toolkit.logging_config import setup_logging


class TestConfigManager:
    """Packaged YAML defaults and user overrides."""

    def test_is_singleton(self, isolated_config):
        assert ConfigManager() is ConfigManager()

    def test_packaged_defaults(self, isolated_config):
        config = ConfigManager()
        assert config.get_load_defaults()["retrieval_limit"] == 0
        assert config.get_save_defaults()["xml_declaration"] is True
        assert config.get_network_defaults()["user_agent"] == "Syndication-Toolkit"
        assert config.get_logging_config()["version"] == 1

    def test_user_override_replaces_section(self, isolated_config):
        (isolated_config / "pipeline.yml").write_text(
            "load:\n  retrieval_limit: 5\n"
            "  supported_extensions: ['http://purl.org/dc/elements/1.1/']\n",
            encoding="utf-8",
        )
        ConfigManager().reload()
        settings = LoadSettings.from_config()
        assert settings.retrieval_limit == 5
        assert settings.supported_extensions == [DublinCoreElementSetSyndicationExtension]

    def test_invalid_user_file_is_ignored(self, isolated_config):
        (isolated_config / "pipeline.yml").write_text("load: [unclosed", encoding="utf-8")
        ConfigManager().reload()
        assert LoadSettings.from_config().retrieval_limit == 0


class TestSettings:
    def test_load_defaults(self):
        settings = LoadSettings()
        assert settings.character_encoding == "utf-8"
        assert settings.auto_detect_extensions is True
        assert settings.preserve_unknown_extensions is False

    def test_within_limit(self):
        assert LoadSettings().within_limit(1000)
        limited = LoadSettings(retrieval_limit=2)
        assert limited.within_limit(1)
        assert not limited.within_limit(2)

    def test_validation(self):
        with pytest.raises(ArgumentEmptyError):
            LoadSettings(character_encoding=" ")
        with pytest.raises(ValueError):
            LoadSettings(retrieval_limit=-1)
        with pytest.raises(ValueError):
            LoadSettings(timeout=0)
        with pytest.raises(ArgumentEmptyError):
            SaveSettings(character_encoding="")

    def test_unknown_configured_namespace_skipped(self, isolated_config):
        (isolated_config / "pipeline.yml").write_text(
            "save:\n  supported_extensions: ['urn:unregistered']\n", encoding="utf-8")
        ConfigManager().reload()
        assert SaveSettings.from_config().supported_extensions == []

    def test_quoted_booleans_from_config(self, isolated_config):
        (isolated_config / "pipeline.yml").write_text(
            "save:\n"
            "  xml_declaration: 'false'\n"
            "  minimize_output_size: 'TRUE'\n"
            "  auto_detect_extensions: 'maybe'\n"
            "load:\n"
            "  preserve_unknown_extensions: 1\n"
            "  auto_detect_extensions: false\n",
            encoding="utf-8",
        )
        ConfigManager().reload()
        save = SaveSettings.from_config()
        assert save.xml_declaration is False
        assert save.minimize_output_size is True
        assert save.auto_detect_extensions is True
        load = LoadSettings.from_config()
        assert load.preserve_unknown_extensions is True
        assert load.auto_detect_extensions is False

    def test_quoted_verify_flag_from_config(self, isolated_config):
        (isolated_config / "pipeline.yml").write_text(
            "network:\n  verify: 'false'\n", encoding="utf-8")
        ConfigManager().reload()
        assert WebRequestOptions.from_config().verify is False

    def test_request_options_from_config(self, isolated_config):
        options = WebRequestOptions.from_config()
        assert options.user_agent == "Syndication-Toolkit"
        assert options.request_headers() == {"User-Agent": "Syndication-Toolkit"}


class TestLoggingSetup:
    """setup_logging applies the packaged dictConfig."""

    @patch("syndication_toolkit.logging_config.logging.config.dictConfig")
    def test_file_handler_follows_log_dir(self, mock_dict_config, isolated_config, monkeypatch):
        log_dir = isolated_config / "logs"
        monkeypatch.setenv("SYNDICATION_LOG_DIR", str(log_dir))
        setup_logging()
        config = mock_dict_config.call_args[0][0]
        assert config["handlers"]["file"]["filename"] == str(log_dir / "syndication.log")
        assert log_dir.is_dir()

    @patch("syndication_toolkit.logging_config.logging.config.dictConfig")
    def test_packaged_config_not_mutated(self, mock_dict_config, isolated_config, monkeypatch):
        monkeypatch.setenv("SYNDICATION_LOG_DIR", str(isolated_config / "elsewhere"))
        setup_logging()
        packaged = ConfigManager().get_logging_config()
        assert packaged["handlers"]["file"]["filename"] == "logs/syndication.log"

    @patch("syndication_toolkit.logging_config.logging.config.dictConfig")
    def test_debug_override(self, mock_dict_config, isolated_config, monkeypatch):
        monkeypatch.setenv("SYNDICATION_LOG_DIR", str(isolated_config))
        monkeypatch.setenv("SYNDICATION_DEBUG_MODULES", "tests.debug_override")
        target = logging.getLogger("tests.debug_override")
        try:
            setup_logging()
            assert target.level == logging.DEBUG
            assert target.handlers
        finally:
            target.handlers.clear()
            target.setLevel(logging.NOTSET)
