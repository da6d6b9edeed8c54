"""
Sampled verification of MathFunction metadata.

A descriptor only declares its parity, extrema and derivative; the checks
here evaluate it on a grid of inputs and report whether the declarations
hold. They work for any MathFunction and any numeric backend, with
tolerances scaled to the backend's precision.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Type

import numpy as np
from scipy.optimize import check_grad

from ..config.sampling_config import SamplingConfig
from ..numerics.backend import FLOAT64, NumericBackend
from ..numerics.capabilities import Number
from ..numerics.constants import ToleranceConstants
from ..utils.logging_config import get_logger
from .base import MathFunction

logger = get_logger(__name__)


@dataclass
class PropertyReport:
    """Outcome of verifying one function on one numeric type."""

    function: str
    numeric_type: str
    sample_count: int
    parity_ok: bool
    extrema_ok: bool
    derivative_max_error: float
    derivative_ok: bool

    @property
    def passed(self) -> bool:
        return self.parity_ok and self.extrema_ok and self.derivative_ok


def clamp_to_number_domain(function: Type[MathFunction], x: Number, ops: NumericBackend = FLOAT64) -> Number:
    """Clamp x into the part of the function's domain the numeric type can represent."""
    low, high = function.number_domain(ops)
    return min(max(ops.coerce(x), low), high)


def sample_inputs(function: Type[MathFunction], count: int, bound: float,
                  ops: NumericBackend = FLOAT64) -> List[Number]:
    """
    Evenly spaced inputs in [-bound, bound], limited to the number domain.

    Args:
        function: Function descriptor
        count: Number of inputs
        bound: Half-width of the sampled interval
        ops: Backend the inputs are converted to

    Returns:
        List of inputs in the backend's scalar type.
    """
    low = clamp_to_number_domain(function, -bound, ops)
    high = clamp_to_number_domain(function, bound, ops)
    return [ops.coerce(x) for x in np.linspace(float(low), float(high), count)]


def satisfies_even(function: Type[MathFunction], xs: Sequence[Number], tolerances: ToleranceConstants) -> bool:
    """f(-x) == f(x) on every sample."""
    return all(tolerances.is_close(function.eval(-x), function.eval(x)) for x in xs)


def satisfies_odd(function: Type[MathFunction], xs: Sequence[Number], tolerances: ToleranceConstants) -> bool:
    """f(-x) == -f(x) on every sample."""
    return all(tolerances.is_close(function.eval(-x), -function.eval(x)) for x in xs)


def parity_matches(function: Type[MathFunction], xs: Sequence[Number], tolerances: ToleranceConstants) -> bool:
    """Check the declared IS_EVEN / IS_ODD flags against sampled behaviour."""
    return (satisfies_even(function, xs, tolerances) == function.IS_EVEN
            and satisfies_odd(function, xs, tolerances) == function.IS_ODD)


def within_extrema(function: Type[MathFunction], xs: Sequence[Number], tolerances: ToleranceConstants) -> bool:
    """
    Check that sampled values respect the declared global extrema.

    Directions in which the image is unbounded are not checked.
    """
    ops = tolerances.backend
    image_low, image_high = function.image(ops)
    for x in xs:
        y = float(function.eval(x))
        if image_high != ops.positive_infinity and y > float(function.global_maximum(ops)) + tolerances.abs_tol:
            return False
        if image_low != ops.negative_infinity and y < float(function.global_minimum(ops)) - tolerances.abs_tol:
            return False
    return True


def derivative_error(function: Type[MathFunction], xs: Sequence[Number]) -> float:
    """
    Largest gap between derivative_eval and a finite-difference gradient.

    Evaluated in float64 whatever the type of ``xs``: finite differences in
    low precision measure rounding, not the derivative.
    """
    def value(v: np.ndarray) -> float:
        return float(function.eval(float(v[0]), ops=FLOAT64))

    def gradient(v: np.ndarray) -> np.ndarray:
        return np.array([float(function.derivative_eval(float(v[0]), ops=FLOAT64))])

    errors = [check_grad(value, gradient, np.array([float(x)])) for x in xs]
    return float(max(errors)) if errors else 0.0


def verify_function(function: Type[MathFunction], config: Optional[SamplingConfig] = None) -> PropertyReport:
    """
    Verify a function's declared metadata on a sampled grid.

    Args:
        function: Function descriptor to check
        config: Sampling settings; defaults to SamplingConfig()

    Returns:
        PropertyReport with one flag per checked property.
    """
    config = config or SamplingConfig()
    ops = config.backend
    tolerances = ToleranceConstants(ops)
    xs = sample_inputs(function, config.sample_count, config.sample_bound, ops)

    max_error = derivative_error(function, xs)
    report = PropertyReport(
        function=function.NAME,
        numeric_type=ops.name,
        sample_count=len(xs),
        parity_ok=parity_matches(function, xs, tolerances),
        extrema_ok=within_extrema(function, xs, tolerances),
        derivative_max_error=max_error,
        derivative_ok=max_error <= config.derivative_tolerance,
    )

    if report.passed:
        logger.info(f"{function.NAME} verified on {ops.name} ({len(xs)} samples)")
    else:
        logger.warning(f"{function.NAME} failed verification on {ops.name}: {report}")
    return report
