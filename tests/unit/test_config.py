"""
Unit tests for mathfn configuration.
"""

import dataclasses

import pytest

from mathfn.config import MathConfig, configure, get_config, reset_config


class TestConfig:
    """Tests for the process-wide configuration."""

    def test_defaults(self):
        config = get_config()
        assert config.coerce_strings is True
        assert config.initial_seed == 1

    def test_configure(self):
        config = configure(coerce_strings=False)
        assert config.coerce_strings is False
        assert get_config() is config
        assert config.initial_seed == 1

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            configure(precision=10)
        assert get_config() == MathConfig()

    def test_reset(self):
        configure(initial_seed=5)
        assert reset_config() == MathConfig()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_config().initial_seed = 3

    def test_string_coercion_toggle(self, call):
        assert call("abs", "-2") == 2.0
        configure(coerce_strings=False)
        with pytest.raises(TypeError, match="abs: cannot convert string '-2' to number"):
            call("abs", "-2")
