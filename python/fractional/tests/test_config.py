# Fractional - Configuration Tests
# Copyright (c) 2024 Fractional Contributors. All rights reserved.

"""
Tests for the configuration module including IntegerKind resolution,
Config validation, and Config factory methods.
"""

import pytest
import numpy as np

from fractional.config import Config, IntegerKind, OVERFLOW_MODES
from fractional.exceptions import IntegerKindError
from fractional.fraction import Fraction, Fraction32, Fraction64


class TestIntegerKindEnum:
    """Tests for the IntegerKind enum."""

    def test_kind_values(self):
        """Test that the enum has the expected values."""
        assert IntegerKind.INT.value == "int"
        assert IntegerKind.INT8.value == "int8"
        assert IntegerKind.INT16.value == "int16"
        assert IntegerKind.INT32.value == "int32"
        assert IntegerKind.INT64.value == "int64"

    def test_kind_from_string(self):
        """Test creating a kind from its string value."""
        assert IntegerKind("int") == IntegerKind.INT
        assert IntegerKind("int32") == IntegerKind.INT32

    def test_kind_invalid_value(self):
        """Test that an invalid value raises error."""
        with pytest.raises(ValueError):
            IntegerKind("int128")

    def test_number_types(self):
        """Test the integer type behind each kind."""
        assert IntegerKind.INT.number_type is int
        assert IntegerKind.INT8.number_type is np.int8
        assert IntegerKind.INT64.number_type is np.int64

    def test_class_names(self):
        """Test specialization class names."""
        assert IntegerKind.INT.class_name == "Fraction"
        assert IntegerKind.INT16.class_name == "Fraction16"

    def test_from_type(self):
        """Test resolving kinds from types, names and members."""
        assert IntegerKind.from_type(int) is IntegerKind.INT
        assert IntegerKind.from_type(np.int32) is IntegerKind.INT32
        assert IntegerKind.from_type("int8") is IntegerKind.INT8
        assert IntegerKind.from_type(IntegerKind.INT64) is IntegerKind.INT64

    def test_from_type_unsupported(self):
        """Test that unsupported kinds list the supported ones."""
        with pytest.raises(IntegerKindError, match="Supported kinds: int, int8"):
            IntegerKind.from_type(np.uint32)
        with pytest.raises(IntegerKindError):
            IntegerKind.from_type("long")


class TestConfig:
    """Tests for the main Config class."""

    def test_default_values(self):
        """Test default configuration values."""
        cfg = Config()
        assert cfg.kind == IntegerKind.INT
        assert cfg.overflow == "warn"

    def test_kind_string_conversion(self):
        """Test that a string kind is converted to IntegerKind."""
        cfg = Config(kind="int32")
        assert cfg.kind is IntegerKind.INT32

    def test_kind_type_conversion(self):
        """Test that a numpy type kind is converted to IntegerKind."""
        cfg = Config(kind=np.int64)
        assert cfg.kind is IntegerKind.INT64

    def test_invalid_kind(self):
        """Test that an unsupported kind raises IntegerKindError."""
        with pytest.raises(IntegerKindError):
            Config(kind="int128")

    def test_invalid_overflow(self):
        """Test that an unknown overflow mode is rejected."""
        with pytest.raises(ValueError, match="Invalid overflow mode"):
            Config(overflow="explode")

    @pytest.mark.parametrize("mode", OVERFLOW_MODES)
    def test_valid_overflow_modes(self, mode):
        """Test that every numpy error mode is accepted."""
        assert Config(overflow=mode).overflow == mode

    def test_fraction_type(self):
        """Test fraction class lookup."""
        assert Config().fraction_type() is Fraction
        assert Config(kind="int32").fraction_type() is Fraction32


class TestConfigPresets:
    """Tests for Config factory methods / presets."""

    def test_arbitrary(self):
        """Test arbitrary precision preset."""
        cfg = Config.arbitrary()
        assert cfg.kind == IntegerKind.INT

    def test_int32(self):
        """Test 32-bit preset."""
        cfg = Config.int32()
        assert cfg.kind == IntegerKind.INT32
        assert cfg.fraction_type() is Fraction32

    def test_int64(self):
        """Test 64-bit preset with custom overflow mode."""
        cfg = Config.int64(overflow="ignore")
        assert cfg.kind == IntegerKind.INT64
        assert cfg.overflow == "ignore"
        assert cfg.fraction_type() is Fraction64


class TestConfigErrstate:
    """Tests for Config.errstate() overflow handling."""

    def test_raise(self):
        """Test that overflow raises under 'raise'."""
        cfg = Config.int32(overflow="raise")
        with cfg.errstate():
            with pytest.raises(FloatingPointError):
                cfg.fraction_type()(2**30) * 4

    def test_ignore(self, recwarn):
        """Test that overflow wraps silently under 'ignore'."""
        cfg = Config.int32(overflow="ignore")
        with cfg.errstate():
            result = cfg.fraction_type()(2**30) * 4
        assert result == 0
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]


class TestConfigRepr:
    """Tests for Config string representation."""

    def test_repr_default(self):
        """Test repr for the default kind."""
        repr_str = repr(Config())
        assert "overflow=warn" in repr_str
        assert "kind" not in repr_str  # Not shown for default

    def test_repr_fixed_width(self):
        """Test repr for a fixed-width kind."""
        repr_str = repr(Config.int64())
        assert "kind=int64" in repr_str
