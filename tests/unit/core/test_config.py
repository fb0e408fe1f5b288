"""
Tests for SwappedConfig and config resolution.
"""

import pytest

from swapped_commerce.core.config import (
    BASE_URL,
    DEFAULT_CONFIG,
    Environment,
    SwappedConfig,
    resolve_config,
)
from swapped_commerce.core.exceptions import ConfigurationError
from swapped_commerce.core.logging import LoggingConfig


class TestSwappedConfig:
    """Test SwappedConfig."""

    def test_defaults(self):
        config = SwappedConfig(api_key="sk_live_123")
        assert config.environment is Environment.PRODUCTION
        assert config.timeout_ms == 30000
        assert config.max_retries == 3
        assert config.logging is None

    def test_environment_from_string(self):
        assert SwappedConfig(api_key="k", environment="sandbox").environment is Environment.SANDBOX

    def test_invalid_environment(self):
        with pytest.raises(ConfigurationError, match="environment"):
            SwappedConfig(api_key="k", environment="staging")

    @pytest.mark.parametrize("api_key", ["", "   ", None])
    def test_api_key_required(self, api_key):
        with pytest.raises(ConfigurationError):
            SwappedConfig(api_key=api_key)

    @pytest.mark.parametrize("timeout_ms", [0, -1, 1.5, True])
    def test_invalid_timeout(self, timeout_ms):
        with pytest.raises(ConfigurationError):
            SwappedConfig(api_key="k", timeout_ms=timeout_ms)

    @pytest.mark.parametrize("max_retries", [-1, "3", False])
    def test_invalid_max_retries(self, max_retries):
        with pytest.raises(ConfigurationError):
            SwappedConfig(api_key="k", max_retries=max_retries)

    def test_zero_retries_allowed(self):
        assert SwappedConfig(api_key="k", max_retries=0).max_retries == 0

    def test_frozen(self):
        config = SwappedConfig(api_key="k")
        with pytest.raises(Exception):
            config.max_retries = 5

    def test_base_url_same_for_both_environments(self):
        assert SwappedConfig(api_key="k", environment="sandbox").base_url == BASE_URL
        assert SwappedConfig(api_key="k").base_url == BASE_URL

    def test_timeout_seconds(self):
        assert SwappedConfig(api_key="k", timeout_ms=2500).timeout_seconds == 2.5

    def test_repr_masks_api_key(self):
        text = repr(SwappedConfig(api_key="sk_live_1234567890"))
        assert "sk_live_1234567890" not in text
        assert "sk_l***7890" in text

    def test_logging_not_part_of_equality(self):
        plain = SwappedConfig(api_key="k")
        with_logging = SwappedConfig(api_key="k", logging=LoggingConfig())
        assert plain == with_logging


class TestCreate:
    """Test SwappedConfig.create merge."""

    def test_fills_defaults(self):
        config = SwappedConfig.create(api_key="k", max_retries=0)
        assert config.max_retries == 0
        assert config.timeout_ms == DEFAULT_CONFIG["timeout_ms"]

    def test_none_means_default(self):
        config = SwappedConfig.create(api_key="k", timeout_ms=None)
        assert config.timeout_ms == 30000

    def test_unknown_field(self):
        with pytest.raises(ConfigurationError, match="Unknown config fields"):
            SwappedConfig.create(api_key="k", base_url="https://example.com")

    def test_default_table_untouched(self):
        SwappedConfig.create(api_key="k", max_retries=7)
        assert DEFAULT_CONFIG["max_retries"] == 3

    def test_with_overrides_returns_new(self):
        config = SwappedConfig(api_key="k")
        changed = config.with_overrides(max_retries=1)
        assert changed.max_retries == 1
        assert config.max_retries == 3


class TestResolveConfig:
    """Test resolve_config."""

    def test_from_api_key(self):
        config = resolve_config("sk_live_123", environment="sandbox")
        assert config.api_key == "sk_live_123"
        assert config.environment is Environment.SANDBOX

    def test_from_api_key_override(self):
        assert resolve_config(api_key="sk_live_123").api_key == "sk_live_123"

    def test_config_passthrough(self):
        config = SwappedConfig(api_key="k")
        assert resolve_config(config) is config

    def test_config_with_overrides(self):
        config = resolve_config(SwappedConfig(api_key="k"), timeout_ms=1000, max_retries=None)
        assert config.timeout_ms == 1000
        assert config.max_retries == 3

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError, match="api_key is required"):
            resolve_config()
