"""
Contract for named single-variable functions.

A MathFunction subclass is a stateless descriptor: its metadata lives in
class attributes and its behaviour in classmethods, so the class itself is
what gets passed around (``Sine.eval(x)``, ``tangent_line_at(Sine, x)``).
Nothing is instantiated.

Two kinds of bounds are described. ``domain``/``image`` are the
mathematical intervals in the extended reals; ``number_domain``/
``number_image`` are the same intervals limited to what the concrete numeric
type can represent, which lets sampling and plotting code clamp safely.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from ..numerics.backend import FLOAT64, NumericBackend
from ..numerics.capabilities import Bounds, ExtendedReals, Number, TrigonometricFunctions

Interval = Tuple[Number, Number]


def intersect_representable(bounds: Interval, ops: Bounds) -> Interval:
    """Limit an extended-real interval to the finite range of the numeric type."""
    low, high = bounds
    return max(low, ops.min_value), min(high, ops.max_value)


class MathFunction(ABC):
    """
    Base class for all function descriptors.

    Subclasses must set the classification attributes and implement
    ``domain``, ``image``, ``global_maximum``, ``global_minimum``, ``eval``
    and ``derivative_eval``.

    ``global_maximum``/``global_minimum`` have no sentinel for "unbounded";
    callers consult ``image`` first. ``eval`` and ``derivative_eval`` are
    defined on the whole domain, results outside it are unspecified.
    """

    NAME: str = ''
    ALIASES: Tuple[str, ...] = ()
    IS_EVEN: bool = False
    IS_ODD: bool = False
    IS_CONTINUOUS: bool = False
    PLAIN_TEXT_FORMULA: str = ''

    @classmethod
    @abstractmethod
    def domain(cls, ops: ExtendedReals = FLOAT64) -> Interval:
        """Inputs for which the function is mathematically defined."""

    @classmethod
    def number_domain(cls, ops: Bounds = FLOAT64) -> Interval:
        """Inputs of the domain that the numeric type can represent."""
        return intersect_representable(cls.domain(ops), ops)

    @classmethod
    @abstractmethod
    def image(cls, ops: ExtendedReals = FLOAT64) -> Interval:
        """Outputs the function can produce."""

    @classmethod
    def number_image(cls, ops: Bounds = FLOAT64) -> Interval:
        return intersect_representable(cls.image(ops), ops)

    @classmethod
    @abstractmethod
    def global_maximum(cls, ops: ExtendedReals = FLOAT64) -> Number:
        pass

    @classmethod
    @abstractmethod
    def global_minimum(cls, ops: ExtendedReals = FLOAT64) -> Number:
        pass

    @classmethod
    @abstractmethod
    def eval(cls, x: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
        """Value of the function at x."""

    @classmethod
    @abstractmethod
    def derivative_eval(cls, x: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
        """Value of the first derivative at x."""

    @classmethod
    def describe(cls, ops: NumericBackend = FLOAT64) -> Dict[str, Any]:
        """
        Collects the descriptor's metadata into a plain dictionary.

        Extrema are only reported when the image is bounded in that
        direction.
        """
        image_low, image_high = cls.image(ops)
        return {
            'name': cls.NAME,
            'formula': cls.PLAIN_TEXT_FORMULA,
            'numeric_type': ops.name,
            'is_even': cls.IS_EVEN,
            'is_odd': cls.IS_ODD,
            'is_continuous': cls.IS_CONTINUOUS,
            'domain': cls.domain(ops),
            'number_domain': cls.number_domain(ops),
            'image': (image_low, image_high),
            'number_image': cls.number_image(ops),
            'global_maximum': cls.global_maximum(ops) if image_high != ops.positive_infinity else None,
            'global_minimum': cls.global_minimum(ops) if image_low != ops.negative_infinity else None,
        }
