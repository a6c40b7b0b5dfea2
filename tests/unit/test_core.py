"""Unit tests for settings, logging setup and the component factory."""

import logging

import pytest

from proxyrules.core.config import Settings, get_settings, reset_settings
from proxyrules.core.factory import ComponentFactory
from proxyrules.core.logging_config import setup_logging
from proxyrules.interfaces.segmenter import Codeblock
from proxyrules.strategies.loaders import MarkdownRuleLoader
from proxyrules.strategies.segmenters import FencedCodeSegmenter


@pytest.fixture(autouse=True)
def clean_settings():
    """Drop cached settings before and after each test."""
    reset_settings()
    yield
    reset_settings()


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.unknown_language == "__UNKNOWN__"
        assert settings.rule_languages == ["proxy", "proxyrules", "rules"]
        assert settings.skip_invalid_rules is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PROXYRULES_LOG_LEVEL", "debug")
        monkeypatch.setenv("PROXYRULES_RULE_LANGUAGES", '["routes"]')
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.rule_languages == ["routes"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_empty_comment_prefix_rejected(self):
        with pytest.raises(ValueError):
            Settings(comment_prefix="")


class TestSetupLogging:
    """Test suite for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        """Put back the root logger handlers and level after each test."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_console_only(self):
        root = setup_logging(Settings())
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_file_handlers(self, tmp_path):
        root = setup_logging(Settings(log_dir=tmp_path / "logs", log_level="DEBUG"))
        assert root.level == logging.DEBUG
        assert (tmp_path / "logs").is_dir()
        assert len(root.handlers) == 3

    def test_configure_logging_structlog(self):
        Settings(log_json=True).configure_logging()
        assert logging.getLogger("proxyrules.core.config").level == logging.INFO


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    @pytest.fixture
    def factory(self):
        return ComponentFactory(Settings(unknown_language="plain", rule_languages=["routes"]))

    def test_segmenter_uses_settings(self, factory):
        segmenter = factory.get_segmenter()
        assert isinstance(segmenter, FencedCodeSegmenter)
        assert segmenter.segment("```\nx\n```") == [Codeblock("plain", "x\n")]

    def test_segmenter_cached(self, factory):
        assert factory.get_segmenter() is factory.get_segmenter()

    def test_loader_uses_settings(self, factory):
        loader = factory.get_loader()
        assert isinstance(loader, MarkdownRuleLoader)
        assert len(loader.load("```routes\na b\n```\n")) == 1

    def test_clear_cache(self, factory):
        first = factory.get_loader()
        factory.clear_cache()
        assert factory.get_loader() is not first

    def test_unknown_segmenter(self, factory):
        with pytest.raises(ValueError, match="Unknown segmenter type"):
            factory.get_segmenter("regex")

    def test_unknown_loader(self, factory):
        with pytest.raises(ValueError, match="Unknown loader type"):
            factory.get_loader("yaml")
