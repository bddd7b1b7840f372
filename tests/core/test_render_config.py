"""
Tests for the explicit render configuration.
"""

import pytest
from pydantic import ValidationError

from stachetree.core.config import DEBUG_ENV_VAR, LOGGER_ENV_VAR, RenderConfig


class TestRenderConfig:
    """Test defaults, immutability and validation."""

    def test_defaults(self):
        """Debug is off and the root is initialized by default."""
        config = RenderConfig()

        assert config.debug is False
        assert config.logger_name == "stachetree"
        assert config.initialize is True

    def test_config_is_frozen(self):
        """Configs cannot be changed after creation."""
        config = RenderConfig()

        with pytest.raises(ValidationError):
            config.debug = True

    def test_unknown_fields_rejected(self):
        """Misspelled settings are errors, not silently ignored."""
        with pytest.raises(ValidationError):
            RenderConfig(debgu=True)

    def test_empty_logger_name_rejected(self):
        """The logger name cannot be empty."""
        with pytest.raises(ValidationError):
            RenderConfig(logger_name="")


class TestRenderConfigFromEnv:
    """Test building a config from environment variables."""

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", " yes ", "on"])
    def test_truthy_debug_values(self, raw):
        """Common truthy spellings enable debug."""
        assert RenderConfig.from_env({DEBUG_ENV_VAR: raw}).debug is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", "off", ""])
    def test_falsy_debug_values(self, raw):
        """Anything else disables debug."""
        assert RenderConfig.from_env({DEBUG_ENV_VAR: raw}).debug is False

    def test_logger_name_from_env(self):
        """The logger name is taken from its own variable."""
        config = RenderConfig.from_env({LOGGER_ENV_VAR: "templates.trace"})

        assert config.logger_name == "templates.trace"

    def test_empty_environment_gives_defaults(self):
        """Without variables the defaults apply."""
        assert RenderConfig.from_env({}) == RenderConfig()

    def test_reads_process_environment_by_default(self, monkeypatch):
        """Without an explicit mapping os.environ is read."""
        monkeypatch.setenv(DEBUG_ENV_VAR, "1")

        assert RenderConfig.from_env().debug is True
