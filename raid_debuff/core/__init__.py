"""
Raid Debuff Calculator - Core Math Module
=========================================
Single source of truth for the debuff chance formula and its constants.

The Streamlit page and tests import from here rather than re-implementing
the curve.
"""

from .constants import (
    # Variants
    SigmoidVariant,
    VARIANT_DEFAULTS,
    VARIANT_DISPLAY_NAMES,
    variant_from_string,
    # Calibration defaults
    CALIBRATED_MIN_CAP,
    CALIBRATED_MAX_CAP,
    CALIBRATED_MIDPOINT,
    CALIBRATED_STEEPNESS,
    UNCAPPED_AMPLITUDE,
    UNCAPPED_OFFSET,
    UNCAPPED_STEEPNESS,
    UNCAPPED_SCALE,
    # Inputs
    DEFAULT_ACCURACY,
    DEFAULT_RESISTANCE,
    # Chart
    CURVE_DOMAIN,
    CURVE_DOMAIN_MIN,
    CURVE_DOMAIN_MAX,
    ATTACKER_BIAS_DIFFERENCE,
    TINY_CHANCE_THRESHOLD,
    DISPLAY_DECIMALS,
)

from .model import (
    # Curve math
    logistic,
    logit,
    # Models
    DebuffModel,
    CalibratedSigmoid,
    UncappedSigmoid,
    CurvePoint,
    # Helper functions
    create_model,
    sample_curve,
    chance_for_stats,
    format_chance,
    format_difference,
    calibration_summary,
)

__all__ = [
    # Constants
    'SigmoidVariant',
    'VARIANT_DEFAULTS',
    'VARIANT_DISPLAY_NAMES',
    'variant_from_string',
    'CALIBRATED_MIN_CAP',
    'CALIBRATED_MAX_CAP',
    'CALIBRATED_MIDPOINT',
    'CALIBRATED_STEEPNESS',
    'UNCAPPED_AMPLITUDE',
    'UNCAPPED_OFFSET',
    'UNCAPPED_STEEPNESS',
    'UNCAPPED_SCALE',
    'DEFAULT_ACCURACY',
    'DEFAULT_RESISTANCE',
    'CURVE_DOMAIN',
    'CURVE_DOMAIN_MIN',
    'CURVE_DOMAIN_MAX',
    'ATTACKER_BIAS_DIFFERENCE',
    'TINY_CHANCE_THRESHOLD',
    'DISPLAY_DECIMALS',
    # Model
    'logistic',
    'logit',
    'DebuffModel',
    'CalibratedSigmoid',
    'UncappedSigmoid',
    'CurvePoint',
    'create_model',
    'sample_curve',
    'chance_for_stats',
    'format_chance',
    'format_difference',
    'calibration_summary',
]
