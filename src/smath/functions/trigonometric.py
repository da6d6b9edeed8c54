"""
Trigonometric function descriptors.

See https://en.wikipedia.org/wiki/Sine_and_cosine
"""

from typing import Optional

from ..numerics.backend import FLOAT64, ops_for
from ..numerics.capabilities import ExtendedReals, Number, TrigonometricFunctions
from .base import Interval, MathFunction


class Sine(MathFunction):
    """Sine function, odd and bounded by [-1, 1]."""

    NAME = 'sine'
    ALIASES = ('sin',)
    IS_EVEN = False
    IS_ODD = True
    IS_CONTINUOUS = True
    PLAIN_TEXT_FORMULA = 'sin(x)'

    @classmethod
    def domain(cls, ops: ExtendedReals = FLOAT64) -> Interval:
        return ops.negative_infinity, ops.positive_infinity

    @classmethod
    def image(cls, ops: ExtendedReals = FLOAT64) -> Interval:
        return -ops.one, ops.one

    @classmethod
    def global_maximum(cls, ops: ExtendedReals = FLOAT64) -> Number:
        return ops.one

    @classmethod
    def global_minimum(cls, ops: ExtendedReals = FLOAT64) -> Number:
        return -ops.one

    @classmethod
    def eval(cls, x: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
        return ops_for(ops, x).sin(x)

    @classmethod
    def derivative_eval(cls, x: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
        return ops_for(ops, x).cos(x)


class Cosine(MathFunction):
    """Cosine function, even and bounded by [-1, 1]."""

    NAME = 'cosine'
    ALIASES = ('cos',)
    IS_EVEN = True
    IS_ODD = False
    IS_CONTINUOUS = True
    PLAIN_TEXT_FORMULA = 'cos(x)'

    @classmethod
    def domain(cls, ops: ExtendedReals = FLOAT64) -> Interval:
        return ops.negative_infinity, ops.positive_infinity

    @classmethod
    def image(cls, ops: ExtendedReals = FLOAT64) -> Interval:
        return -ops.one, ops.one

    @classmethod
    def global_maximum(cls, ops: ExtendedReals = FLOAT64) -> Number:
        return ops.one

    @classmethod
    def global_minimum(cls, ops: ExtendedReals = FLOAT64) -> Number:
        return -ops.one

    @classmethod
    def eval(cls, x: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
        return ops_for(ops, x).cos(x)

    @classmethod
    def derivative_eval(cls, x: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
        return -ops_for(ops, x).sin(x)
