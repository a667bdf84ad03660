"""
tests/test_inputs.py – Box-length and level validation.
"""

import logging

import pytest

from particlebox.config import DEFAULT_LENGTH
from particlebox.inputs import LengthInput, clamp_level, parse_length


# ---------------------------------------------------------------------------
# parse_length
# ---------------------------------------------------------------------------

class TestParseLength:
    @pytest.mark.parametrize("raw, expected", [
        ("2.5", 2.5),
        (" 3 ", 3.0),
        ("1e-3", 1e-3),
        ("10", 10.0),
        (0.7, 0.7),
    ])
    def test_valid(self, raw, expected):
        assert parse_length(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "  ", "0", "-1", "-0.0", "nan", "inf", "1.2.3", None])
    def test_rejected(self, raw):
        assert parse_length(raw) is None


# ---------------------------------------------------------------------------
# LengthInput
# ---------------------------------------------------------------------------

class TestLengthInput:
    def test_default(self):
        field = LengthInput()
        assert field.value == DEFAULT_LENGTH

    def test_invalid_initial_value_uses_default(self):
        assert LengthInput(-4.0).value == DEFAULT_LENGTH

    def test_keystroke_valid(self):
        field = LengthInput()
        assert field.on_keystroke("2.75") == 2.75
        assert field.value == 2.75

    @pytest.mark.parametrize("raw", ["abc", "", "-", "0", "-3"])
    def test_keystroke_invalid_keeps_previous(self, raw):
        field = LengthInput(4.0)
        assert field.on_keystroke(raw) == 4.0

    def test_typing_sequence(self):
        """Intermediate text such as '0.' never reaches the sampler as 0."""
        field = LengthInput(2.0)
        for raw in ["", "0", "0.", "0.5"]:
            field.on_keystroke(raw)
        assert field.value == 0.5

    def test_commit_invalid_resets(self):
        field = LengthInput(3.0)
        assert field.on_commit("abc") == 1.0
        assert field.value == 1.0

    @pytest.mark.parametrize("raw", ["", "0", "-2.5", "nan"])
    def test_commit_non_positive_resets(self, raw):
        field = LengthInput(6.0)
        assert field.on_commit(raw) == DEFAULT_LENGTH

    def test_commit_valid(self):
        field = LengthInput()
        assert field.on_commit("4.5") == 4.5

    def test_reset_is_logged(self, caplog):
        field = LengthInput(2.0)
        with caplog.at_level(logging.INFO, logger="particlebox"):
            field.on_commit("abc")
        assert "resetting" in caplog.text

    def test_text(self):
        assert LengthInput(2.5).text == "2.5"
        assert LengthInput().text == "1"


# ---------------------------------------------------------------------------
# clamp_level
# ---------------------------------------------------------------------------

class TestClampLevel:
    @pytest.mark.parametrize("value, expected", [
        (0, 1), (-3, 1), (1, 1), (5, 5), (10, 10), (11, 10), (3.7, 3), ("4", 4),
    ])
    def test_clamp(self, value, expected):
        assert clamp_level(value) == expected
