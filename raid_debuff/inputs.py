"""
Input handling for the calculator form.

Holds the current Accuracy / Resistance values and applies user edits.

Coercion policy for free-text edits:
    - numbers and numeric text are accepted ("120", " 95.5 ", "1,024")
    - blank, non-numeric, NaN and infinite values are REJECTED
    - a rejected edit keeps the previous valid value and records an error
      message for that field, so the page can show it
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Union

from .core.constants import DEFAULT_ACCURACY, DEFAULT_RESISTANCE

STAT_FIELDS = ("accuracy", "resistance")

FIELD_DISPLAY_NAMES = {
    "accuracy": "Accuracy",
    "resistance": "Resistance",
}


class InvalidStatInput(ValueError):
    """Raised when a stat field can't be read as a finite number."""

    def __init__(self, field_name: str, raw, reason: str):
        self.field_name = field_name
        self.raw = raw
        self.reason = reason
        display = FIELD_DISPLAY_NAMES.get(field_name, field_name)
        super().__init__(f"{display}: {reason} (got {raw!r})")


def parse_stat_input(raw: Union[str, int, float], field_name: str = "stat") -> float:
    """
    Read a stat value typed by the user.

    Args:
        raw: Text from the input box, or an already-numeric value
        field_name: Used in the error message

    Returns:
        The value as a float

    Raises:
        InvalidStatInput: blank, non-numeric, NaN or infinite input
    """
    if isinstance(raw, bool):
        raise InvalidStatInput(field_name, raw, "not a number")

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", "")
        if not text:
            raise InvalidStatInput(field_name, raw, "value is required")
        try:
            value = float(text)
        except ValueError:
            raise InvalidStatInput(field_name, raw, "not a number")

    if not math.isfinite(value):
        raise InvalidStatInput(field_name, raw, "must be a finite number")
    return value


@dataclass
class CalculatorState:
    """Current form values. Resets to defaults on a new session."""
    accuracy: float = DEFAULT_ACCURACY
    resistance: float = DEFAULT_RESISTANCE

    # field -> message for the last rejected edit
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def difference(self) -> float:
        """Accuracy - Resistance."""
        return self.accuracy - self.resistance

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _check_difference(state: CalculatorState, field_name: str, value: float, raw) -> None:
    """Both stats finite isn't enough: Accuracy - Resistance can still overflow."""
    if field_name == "accuracy":
        difference = value - state.resistance
    else:
        difference = state.accuracy - value
    if not math.isfinite(difference):
        raise InvalidStatInput(field_name, raw, "Accuracy - Resistance is out of range")


def apply_edit(state: CalculatorState, field_name: str, raw) -> bool:
    """
    Apply one edit to the form state.

    Returns True if the edit was accepted. On rejection the previous value is
    kept and state.errors[field_name] explains why.
    """
    if field_name not in STAT_FIELDS:
        raise ValueError(f"Unknown field {field_name!r} (expected one of: {', '.join(STAT_FIELDS)})")

    try:
        value = parse_stat_input(raw, field_name)
        _check_difference(state, field_name, value, raw)
    except InvalidStatInput as e:
        previous = getattr(state, field_name)
        logging.warning(f"Rejected {field_name} edit {raw!r}, keeping {previous}: {e.reason}")
        state.errors[field_name] = f"{e}. Keeping previous value {previous:g}."
        return False

    setattr(state, field_name, value)
    state.errors.pop(field_name, None)
    return True


def reset(state: CalculatorState) -> None:
    """Restore default Accuracy / Resistance and clear errors."""
    state.accuracy = DEFAULT_ACCURACY
    state.resistance = DEFAULT_RESISTANCE
    state.errors.clear()
