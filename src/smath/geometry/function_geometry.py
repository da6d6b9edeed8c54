"""
Geometry derived from a function's local behaviour.

Lines are returned in implicit form ``(A, B, C)`` meaning
``A·x + B·y + C = 0`` and are never normalized.
"""

from typing import Callable, Iterator, Optional, Tuple, Type

from ..functions.base import MathFunction
from ..numerics.backend import ops_for
from ..numerics.capabilities import ExtendedReals, IntegerConversion, Number

Line = Tuple[Number, Number, Number]
Point = Tuple[Number, Number]


# --- Tangent line --------------------------------------------------------

def tangent_line_from_x(x: Number, value_in_x: Number, slope_in_x: Number,
                        ops: Optional[ExtendedReals] = None) -> Line:
    """
    Tangent line through (x, value_in_x) with the given slope.

    Args:
        x: Point of tangency
        value_in_x: Function value at x
        slope_in_x: Slope of the tangent (the derivative at x)
        ops: Backend providing the unit coefficient

    Returns:
        (A, B, C) = (-slope, 1, slope·x − value)
    """
    ops = ops_for(ops, x, value_in_x, slope_in_x)
    return -slope_in_x, ops.one, slope_in_x * x - value_in_x


def tangent_line_slope(derivative_in_x: Number) -> Number:
    """The tangent slope is the derivative itself."""
    return derivative_in_x


# --- Normal line ---------------------------------------------------------

def normal_line_slope(derivative_in_x: Number, ops: Optional[ExtendedReals] = None) -> Number:
    """Slope perpendicular to the tangent, -1 / derivative. A zero derivative is not guarded."""
    return -ops_for(ops, derivative_in_x).one / derivative_in_x


def normal_line_from_x(x: Number, value_in_x: Number, slope_in_x: Number,
                       ops: Optional[ExtendedReals] = None) -> Line:
    """
    Line through (x, value_in_x) perpendicular to the tangent.

    At exactly x = 0 the y-axis (1, 0, 0) is returned without touching the
    slope; everywhere else the normal slope -1/slope is used, so a zero
    slope at x ≠ 0 propagates the numeric type's division behaviour.
    """
    ops = ops_for(ops, x, value_in_x, slope_in_x)
    if x == ops.zero:
        return ops.one, ops.zero, ops.zero
    return tangent_line_from_x(x, value_in_x, normal_line_slope(slope_in_x, ops=ops), ops=ops)


def tangent_line_at(function: Type[MathFunction], x: Number, ops=None) -> Line:
    """Tangent line of a MathFunction's graph at x."""
    ops = ops_for(ops, x)
    slope = tangent_line_slope(function.derivative_eval(x, ops=ops))
    return tangent_line_from_x(x, function.eval(x, ops=ops), slope, ops=ops)


def normal_line_at(function: Type[MathFunction], x: Number, ops=None) -> Line:
    """Normal line of a MathFunction's graph at x."""
    ops = ops_for(ops, x)
    return normal_line_from_x(x, function.eval(x, ops=ops), function.derivative_eval(x, ops=ops), ops=ops)


# --- Points along a graph --------------------------------------------------

class PointSequence:
    """
    Lazy points (x, function(x)) for x = start, start + step, ... while x < stop.

    Each iteration walks again from ``start``; nothing is buffered. A zero
    step, or one pointing away from ``stop``, never terminates.
    """

    def __init__(self, function: Callable[[Number], Number], start: Number, stop: Number, step: Number):
        self.function = function
        self.start = start
        self.stop = stop
        self.step = step

    def __iter__(self) -> Iterator[Point]:
        x = self.start
        while x < self.stop:
            yield x, self.function(x)
            x += self.step

    def __repr__(self) -> str:
        return f"PointSequence(start={self.start!r}, stop={self.stop!r}, step={self.step!r})"


def points_from_step(function: Callable[[Number], Number], start: Number, stop: Number,
                     xstep: Number) -> PointSequence:
    """
    Sample a function on the half-open interval [start, stop).

    Args:
        function: Any callable of one number, e.g. ``Sine.eval``
        start: First x
        stop: Exclusive upper bound
        xstep: Increment between consecutive x values

    Returns:
        A restartable PointSequence; ``stop`` itself is never produced.
    """
    return PointSequence(function, start, stop, xstep)


def points_from_count(function: Callable[[Number], Number], start: Number, stop: Number, count: int,
                      ops: Optional[IntegerConversion] = None) -> PointSequence:
    """
    Sample a function with an even step of (stop − start) / count.

    Floating-point accumulation may add one point just below ``stop``.
    """
    ops = ops_for(ops, start, stop)
    return points_from_step(function, start, stop, (stop - start) / ops.from_int(count))
