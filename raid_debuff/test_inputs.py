"""
Unit tests for inputs.py - Stat parsing and the form state coercion policy.
"""
import logging

import pytest
from raid_debuff.inputs import (
    InvalidStatInput,
    CalculatorState,
    parse_stat_input,
    apply_edit,
    reset,
)


class TestParseStatInput:
    """Tests for parse_stat_input()."""

    def test_plain_numbers(self):
        assert parse_stat_input("120") == 120.0
        assert parse_stat_input("-15") == -15.0
        assert parse_stat_input("95.5") == 95.5

    def test_whitespace_and_separators(self):
        assert parse_stat_input("  88 ") == 88.0
        assert parse_stat_input("1,024") == 1024.0

    def test_numeric_values_pass_through(self):
        assert parse_stat_input(7) == 7.0
        assert parse_stat_input(12.5) == 12.5

    def test_blank_rejected(self):
        with pytest.raises(InvalidStatInput, match="required"):
            parse_stat_input("")
        with pytest.raises(InvalidStatInput):
            parse_stat_input("   ")

    def test_text_rejected(self):
        with pytest.raises(InvalidStatInput, match="not a number"):
            parse_stat_input("abc")

    def test_non_finite_rejected(self):
        """NaN and infinity must never reach the model."""
        for raw in ("nan", "inf", "-inf", float("nan"), float("inf")):
            with pytest.raises(InvalidStatInput):
                parse_stat_input(raw)

    def test_bool_rejected(self):
        with pytest.raises(InvalidStatInput):
            parse_stat_input(True)

    def test_error_is_value_error(self):
        """Callers catching ValueError should also catch bad input."""
        with pytest.raises(ValueError):
            parse_stat_input("x", "accuracy")

    def test_error_names_field(self):
        with pytest.raises(InvalidStatInput) as exc_info:
            parse_stat_input("x", "resistance")
        assert exc_info.value.field_name == "resistance"
        assert exc_info.value.raw == "x"
        assert "Resistance" in str(exc_info.value)


class TestCalculatorState:
    """Tests for CalculatorState defaults."""

    def test_defaults(self):
        state = CalculatorState()
        assert state.accuracy == 100
        assert state.resistance == 100
        assert state.difference == 0
        assert state.is_valid

    def test_difference(self):
        state = CalculatorState(accuracy=58, resistance=100)
        assert state.difference == -42


class TestApplyEdit:
    """Tests for apply_edit() - reject and keep previous value."""

    def test_valid_edit_applied(self):
        state = CalculatorState()
        assert apply_edit(state, "accuracy", "150") is True
        assert state.accuracy == 150.0
        assert state.difference == 50.0

    def test_invalid_edit_keeps_previous_value(self):
        state = CalculatorState()
        assert apply_edit(state, "resistance", "lots") is False
        assert state.resistance == 100
        assert "resistance" in state.errors
        assert "Keeping previous value 100" in state.errors["resistance"]
        assert not state.is_valid

    def test_blank_edit_rejected(self):
        state = CalculatorState(accuracy=80)
        assert apply_edit(state, "accuracy", "") is False
        assert state.accuracy == 80

    def test_valid_edit_clears_error(self):
        state = CalculatorState()
        apply_edit(state, "accuracy", "??")
        assert "accuracy" in state.errors
        apply_edit(state, "accuracy", "90")
        assert "accuracy" not in state.errors
        assert state.accuracy == 90.0

    def test_errors_tracked_per_field(self):
        state = CalculatorState()
        apply_edit(state, "accuracy", "bad")
        apply_edit(state, "resistance", "120")
        assert list(state.errors) == ["accuracy"]
        assert state.resistance == 120.0

    def test_overflowing_difference_rejected(self):
        """Each stat finite, but Accuracy - Resistance would be infinite."""
        state = CalculatorState()
        assert apply_edit(state, "accuracy", "1e308") is True
        assert apply_edit(state, "resistance", "-1e308") is False
        assert state.resistance == 100
        assert "out of range" in state.errors["resistance"]
        assert state.difference == 1e308 - 100

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            apply_edit(CalculatorState(), "speed", "100")

    def test_rejection_logged(self, caplog):
        state = CalculatorState()
        with caplog.at_level(logging.WARNING):
            apply_edit(state, "accuracy", "nan")
        assert "Rejected accuracy edit" in caplog.text


class TestReset:
    """Tests for reset()."""

    def test_reset_restores_defaults(self):
        state = CalculatorState(accuracy=10, resistance=300)
        apply_edit(state, "accuracy", "oops")
        reset(state)
        assert state.accuracy == 100
        assert state.resistance == 100
        assert state.errors == {}
