# test_formatter.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tagline.errors import FormatError
from tagline.render import DefaultValueFormatter


class TestDefaultValueFormatter:
    """Test suite for the built-in format spec vocabulary."""

    def setup_method(self):
        self.formatter = DefaultValueFormatter()

    @pytest.mark.parametrize("value, spec, expected", [
        (27, "", "27"),
        ("banana", "", "banana"),
        ("hi", "?", "'hi'"),
        (True, "?", "True"),
        (0x3f, "x", "3f"),
        (0x3f, "X", "3F"),
        (0o123, "o", "123"),
        (0b101010, "b", "101010"),
        (3.14, "e", "3.14e0"),
        (3.14, "E", "3.14E0"),
        (1234, "e", "1.234e3"),
        (0.00001, "e", "1e-5"),
        (float("inf"), "e", "inf"),
        (2**53 + 1, "e", "9.007199254740993e15"),
        (10**400, "e", "1e400"),
        (-1200, "E", "-1.2E3"),
        (0, "e", "0e0"),
        (3.14159, ".2f", "3.14"),
        ("ab", ">4", "  ab"),
    ])
    def test_specs(self, value, spec, expected):
        assert self.formatter.format(value, spec) == expected

    def test_pretty_debug(self):
        value = {"key": list(range(3))}
        assert self.formatter.format(value, "#?") == "{'key': [0, 1, 2]}"

    @pytest.mark.parametrize("value, spec", [
        ("text", "x"),
        (3.5, "b"),
        ("text", "e"),
        (5, "q"),
    ])
    def test_errors(self, value, spec):
        with pytest.raises(FormatError) as excinfo:
            self.formatter.format(value, spec)
        assert excinfo.value.spec == spec
        assert excinfo.value.value == value

    def test_oversized_float_conversion_is_a_format_error(self):
        with pytest.raises(FormatError):
            self.formatter.format(10**400, ".2e")
