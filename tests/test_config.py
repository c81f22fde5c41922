"""
Tests for ValidatorConfig.
"""

import attrs
import pytest

from patternlang.config import DEFAULT_MAX_DEPTH, ValidatorConfig
from patternlang.exceptions import ErrorLevel


class TestValidatorConfig:
    """Test validator settings."""

    def test_defaults(self):
        """Test default settings."""
        config = ValidatorConfig()
        assert config.max_depth == DEFAULT_MAX_DEPTH
        assert config.error_level == ErrorLevel.USER

    def test_max_depth_must_be_positive(self):
        """Test that a zero depth limit is rejected."""
        with pytest.raises(ValueError):
            ValidatorConfig(max_depth=0)

    def test_config_is_frozen(self):
        """Test that settings cannot change after construction."""
        config = ValidatorConfig()
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            config.max_depth = 3
