"""
Numeric capability sets.

Each protocol names the smallest group of primitives an operation may ask
for. Geometry and function code declares the protocol(s) it needs on its
``ops`` parameter instead of depending on a concrete numeric type; any
NumericBackend satisfies all of them.

The algebraic base (+, -, *, /, unary -, comparisons) is not listed here:
it is carried by the numeric values themselves.
"""

from typing import Any, Protocol, runtime_checkable

Number = Any


@runtime_checkable
class ExtendedReals(Protocol):
    """Constants of the extended real line in the concrete type."""

    @property
    def zero(self) -> Number: ...

    @property
    def one(self) -> Number: ...

    @property
    def positive_infinity(self) -> Number: ...

    @property
    def negative_infinity(self) -> Number: ...


@runtime_checkable
class MinMaxValue(Protocol):
    """Largest and most negative finite values of the concrete type."""

    @property
    def max_value(self) -> Number: ...

    @property
    def min_value(self) -> Number: ...


@runtime_checkable
class RootFunctions(Protocol):
    def sqrt(self, x: Number) -> Number: ...

    def hypot(self, x: Number, y: Number) -> Number: ...


@runtime_checkable
class TrigonometricFunctions(Protocol):
    def sin(self, x: Number) -> Number: ...

    def cos(self, x: Number) -> Number: ...

    def atan(self, x: Number) -> Number: ...


@runtime_checkable
class AbsoluteValue(Protocol):
    def abs(self, x: Number) -> Number: ...


@runtime_checkable
class IntegerConversion(Protocol):
    def from_int(self, n: int) -> Number: ...


@runtime_checkable
class RootTrigonometric(RootFunctions, TrigonometricFunctions, Protocol):
    """Roots and trigonometry together (polar conversions, polar distance)."""


@runtime_checkable
class Bounds(ExtendedReals, MinMaxValue, Protocol):
    """Everything needed to describe mathematical and representable bounds."""
