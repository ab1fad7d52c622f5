"""
Raid Debuff Calculator - Core Constants
=======================================
Single source of truth for calibration constants, chart domain and display
settings.

Calibration values are the designer-tuned reference sets. They are kept here
as named defaults so every model can be rebuilt with overrides.
"""

from enum import Enum
from typing import Dict


# =============================================================================
# ENUMS
# =============================================================================

class SigmoidVariant(Enum):
    """Which shape of debuff curve to use."""
    # min_cap + (max_cap - min_cap) * logistic(k * (d - d0))
    CALIBRATED = "calibrated"

    # L * logistic(-k * (d / scale - x0)), no floor/ceiling cap
    UNCAPPED = "uncapped"


# =============================================================================
# CALIBRATED-CAP SIGMOID
# =============================================================================

# 3% floor, 97% ceiling
CALIBRATED_MIN_CAP = 0.03
CALIBRATED_MAX_CAP = 0.97

# 50/50 at -42 difference, ~92% at 0 difference
CALIBRATED_MIDPOINT = -42
CALIBRATED_STEEPNESS = 0.0686


# =============================================================================
# UNBOUNDED-AMPLITUDE SIGMOID
# =============================================================================

UNCAPPED_AMPLITUDE = 0.7222
UNCAPPED_OFFSET = 1.033
UNCAPPED_STEEPNESS = -24.55  # Negative: curve rises with difference
UNCAPPED_SCALE = 40.66


VARIANT_DEFAULTS: Dict[SigmoidVariant, Dict[str, float]] = {
    SigmoidVariant.CALIBRATED: {
        "min_cap": CALIBRATED_MIN_CAP,
        "max_cap": CALIBRATED_MAX_CAP,
        "midpoint": CALIBRATED_MIDPOINT,
        "steepness": CALIBRATED_STEEPNESS,
    },
    SigmoidVariant.UNCAPPED: {
        "amplitude": UNCAPPED_AMPLITUDE,
        "offset": UNCAPPED_OFFSET,
        "steepness": UNCAPPED_STEEPNESS,
        "scale": UNCAPPED_SCALE,
    },
}

VARIANT_DISPLAY_NAMES: Dict[SigmoidVariant, str] = {
    SigmoidVariant.CALIBRATED: "Calibrated (3-97% caps)",
    SigmoidVariant.UNCAPPED: "Uncapped amplitude",
}


# =============================================================================
# INPUTS
# =============================================================================

DEFAULT_ACCURACY = 100
DEFAULT_RESISTANCE = 100


# =============================================================================
# CHART
# =============================================================================

CURVE_DOMAIN_MIN = -100
CURVE_DOMAIN_MAX = 100
CURVE_DOMAIN = range(CURVE_DOMAIN_MIN, CURVE_DOMAIN_MAX + 1)

# Reference markers drawn over the curve
ATTACKER_BIAS_DIFFERENCE = 0
TINY_CHANCE_THRESHOLD = 5.0  # Percent


# =============================================================================
# DISPLAY
# =============================================================================

DISPLAY_DECIMALS = 2


def variant_from_string(value: str) -> SigmoidVariant:
    """Parse a variant name (case-insensitive). Raises ValueError if unknown."""
    try:
        return SigmoidVariant(value.strip().lower())
    except ValueError:
        valid = ", ".join(v.value for v in SigmoidVariant)
        raise ValueError(f"Unknown sigmoid variant {value!r} (expected one of: {valid})")
