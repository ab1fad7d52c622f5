"""
Raid Debuff Calculator - Debuff Chance Model
============================================
Probability that a debuff lands, as a sigmoid of the stat difference:

    d = Accuracy - Resistance

Two curve shapes are supported:

    Calibrated:  chance = (min_cap + (max_cap - min_cap) * logistic(k * (d - d0))) * 100
    Uncapped:    chance = L * logistic(-k * (d / scale - x0)) * 100

All models are immutable. Evaluating the same difference always returns the
same chance.
"""

import math
from dataclasses import dataclass, fields
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .constants import (
    CURVE_DOMAIN,
    DISPLAY_DECIMALS,
    SigmoidVariant,
    VARIANT_DEFAULTS,
    variant_from_string,
)

CurvePoint = Tuple[float, float]


# =============================================================================
# LOGISTIC
# =============================================================================

def logistic(x: float) -> float:
    """
    Numerically stable logistic function 1 / (1 + e^-x).

    exp() is only ever called with a non-positive argument, so huge inputs
    saturate to 0.0 or 1.0 instead of overflowing.
    """
    if x >= 0:
        z = math.exp(-x)
        return 1.0 / (1.0 + z)
    z = math.exp(x)
    return z / (1.0 + z)


def logit(p: float) -> float:
    """Inverse of logistic() for 0 < p < 1."""
    return math.log(p / (1.0 - p))


def _require_finite(**params: float) -> None:
    for name, value in params.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number, got {value!r}")


# =============================================================================
# MODELS
# =============================================================================

class DebuffModel:
    """Shared behaviour for every debuff curve."""

    variant: SigmoidVariant

    def evaluate(self, difference: float) -> float:
        """Chance (%) to apply the debuff at the given stat difference."""
        raise NotImplementedError

    def required_difference(self, chance: float) -> float:
        """Stat difference needed to reach `chance` (%)."""
        raise NotImplementedError

    @property
    def floor(self) -> float:
        """Lower asymptote in percent."""
        raise NotImplementedError

    @property
    def ceiling(self) -> float:
        """Upper asymptote in percent."""
        raise NotImplementedError

    def sample_curve(self, domain: Iterable[float] = CURVE_DOMAIN) -> List[CurvePoint]:
        """Evaluate the curve at every difference in `domain`, in order."""
        return [(d, self.evaluate(d)) for d in domain]

    @property
    def threshold_difference(self) -> Optional[float]:
        """Difference where the chance is exactly 50%, or None if unreachable."""
        try:
            return self.required_difference(50.0)
        except ValueError:
            return None

    def parameters(self) -> Dict[str, float]:
        """Named parameters of this model."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def _check_reachable(self, chance: float) -> None:
        if not (self.floor < chance < self.ceiling):
            raise ValueError(
                f"Chance {chance}% is unreachable "
                f"(must be between {self.floor:.2f}% and {self.ceiling:.2f}%)"
            )


@dataclass(frozen=True)
class CalibratedSigmoid(DebuffModel):
    """
    Sigmoid squeezed between a minimum and maximum cap.

    Calibration points (defaults):
        - 50% at d = -42
        - ~92% at d = 0
        - never below 3% or above 97%
    """
    min_cap: float = VARIANT_DEFAULTS[SigmoidVariant.CALIBRATED]["min_cap"]
    max_cap: float = VARIANT_DEFAULTS[SigmoidVariant.CALIBRATED]["max_cap"]
    midpoint: float = VARIANT_DEFAULTS[SigmoidVariant.CALIBRATED]["midpoint"]
    steepness: float = VARIANT_DEFAULTS[SigmoidVariant.CALIBRATED]["steepness"]

    variant = SigmoidVariant.CALIBRATED

    def __post_init__(self):
        _require_finite(
            min_cap=self.min_cap, max_cap=self.max_cap,
            midpoint=self.midpoint, steepness=self.steepness,
        )
        if not (0 <= self.min_cap < self.max_cap <= 1):
            raise ValueError(
                f"Caps must satisfy 0 <= min_cap < max_cap <= 1, "
                f"got min_cap={self.min_cap}, max_cap={self.max_cap}"
            )
        if self.steepness <= 0:
            raise ValueError(f"steepness must be positive, got {self.steepness}")

    def evaluate(self, difference: float) -> float:
        raw = logistic(self.steepness * (difference - self.midpoint))
        return (self.min_cap + (self.max_cap - self.min_cap) * raw) * 100

    def required_difference(self, chance: float) -> float:
        _require_finite(chance=chance)
        self._check_reachable(chance)
        raw = (chance / 100 - self.min_cap) / (self.max_cap - self.min_cap)
        return self.midpoint + logit(raw) / self.steepness

    @property
    def floor(self) -> float:
        return self.min_cap * 100

    @property
    def ceiling(self) -> float:
        return self.max_cap * 100


@dataclass(frozen=True)
class UncappedSigmoid(DebuffModel):
    """
    Sigmoid bounded only by its own asymptotes, 0 and amplitude * 100.

    Steepness uses a negative sign convention: the curve rises with the
    difference when steepness < 0. Half amplitude sits at d = offset * scale.
    """
    amplitude: float = VARIANT_DEFAULTS[SigmoidVariant.UNCAPPED]["amplitude"]
    offset: float = VARIANT_DEFAULTS[SigmoidVariant.UNCAPPED]["offset"]
    steepness: float = VARIANT_DEFAULTS[SigmoidVariant.UNCAPPED]["steepness"]
    scale: float = VARIANT_DEFAULTS[SigmoidVariant.UNCAPPED]["scale"]

    variant = SigmoidVariant.UNCAPPED

    def __post_init__(self):
        _require_finite(
            amplitude=self.amplitude, offset=self.offset,
            steepness=self.steepness, scale=self.scale,
        )
        if self.amplitude <= 0:
            raise ValueError(f"amplitude must be positive, got {self.amplitude}")
        if self.steepness >= 0:
            raise ValueError(f"steepness must be negative, got {self.steepness}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")

    def evaluate(self, difference: float) -> float:
        raw = logistic(-self.steepness * (difference / self.scale - self.offset))
        return self.amplitude * raw * 100

    def required_difference(self, chance: float) -> float:
        _require_finite(chance=chance)
        self._check_reachable(chance)
        raw = chance / 100 / self.amplitude
        return self.scale * (self.offset - logit(raw) / self.steepness)

    @property
    def floor(self) -> float:
        return 0.0

    @property
    def ceiling(self) -> float:
        return self.amplitude * 100


MODEL_CLASSES = {
    SigmoidVariant.CALIBRATED: CalibratedSigmoid,
    SigmoidVariant.UNCAPPED: UncappedSigmoid,
}


# =============================================================================
# HELPERS
# =============================================================================

def create_model(
    variant: Union[SigmoidVariant, str] = SigmoidVariant.CALIBRATED,
    **overrides: float,
) -> DebuffModel:
    """
    Build a model from the variant's default constants.

    Args:
        variant: SigmoidVariant or its string value ("calibrated", "uncapped")
        **overrides: Named parameters replacing the defaults

    Raises:
        ValueError: Unknown variant, unknown parameter name or invalid value
    """
    if isinstance(variant, str):
        variant = variant_from_string(variant)

    params = dict(VARIANT_DEFAULTS[variant])
    unknown = set(overrides) - set(params)
    if unknown:
        raise ValueError(
            f"Unknown parameter(s) for {variant.value} model: {', '.join(sorted(unknown))}"
        )
    params.update(overrides)
    return MODEL_CLASSES[variant](**params)


def sample_curve(model: DebuffModel, domain: Iterable[float] = CURVE_DOMAIN) -> List[CurvePoint]:
    """Return [(d, chance), ...] for every d in domain. Used for charting."""
    return model.sample_curve(domain)


def chance_for_stats(model: DebuffModel, accuracy: float, resistance: float) -> float:
    """Debuff chance (%) for an attacker's accuracy against a defender's resistance."""
    return model.evaluate(accuracy - resistance)


def format_chance(chance: float) -> str:
    """Format a chance for display, e.g. 92.0094 -> '92.01%'."""
    return f"{chance:.{DISPLAY_DECIMALS}f}%"


def format_difference(difference: float) -> str:
    """Integral differences without decimals (-42), others to display precision."""
    rounded = round(float(difference), DISPLAY_DECIMALS)
    if rounded.is_integer():
        return f"{int(rounded)}"
    return f"{rounded:.{DISPLAY_DECIMALS}f}"


def calibration_summary(model: DebuffModel) -> List[Dict[str, str]]:
    """
    Key points of a curve for display.

    Returns list of dicts with: label, value
    """
    threshold = model.threshold_difference
    return [
        {
            "label": "50/50 chance at",
            "value": f"{format_difference(threshold)} diff" if threshold is not None else "Unreachable",
        },
        {
            "label": "Chance at 0 diff",
            "value": format_chance(model.evaluate(0)),
        },
        {
            "label": "Min chance",
            "value": format_chance(model.floor),
        },
        {
            "label": "Max chance",
            "value": format_chance(model.ceiling),
        },
    ]
