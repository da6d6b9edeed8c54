"""
Euclidean vectors with two components.

Vectors are plain tuples, either cartesian ``(x, y)`` or polar
``(magnitude, angle)`` with the angle in radians and not normalized.
Operations are grouped by the quantity they compute
(``magnitude_from_*``, ``cartesian_from_*``, ``distance_from_*``, ...).

Every function takes an optional ``ops`` backend typed with the capability
it actually uses; when omitted the backend is resolved from the arguments.
Singular inputs (x = 0 for the polar angle, zero magnitude for
normalization, a zero component for quadrant signs) are not intercepted:
the numeric type's own division behaviour propagates.

See https://en.wikipedia.org/wiki/Euclidean_vector
"""

from typing import Optional, Tuple

from ..numerics.backend import ops_for
from ..numerics.capabilities import (
    AbsoluteValue,
    ExtendedReals,
    Number,
    RootFunctions,
    RootTrigonometric,
    TrigonometricFunctions,
)

Vector = Tuple[Number, Number]
PolarVector = Tuple[Number, Number]


def _components(vectors) -> Tuple[Number, ...]:
    return tuple(component for vector in vectors for component in vector)


# --- Magnitude -----------------------------------------------------------

def magnitude_from_cartesian(x: Number, y: Number, ops: Optional[RootFunctions] = None) -> Number:
    """
    Length of a cartesian vector.

    Args:
        x: X-component
        y: Y-component
        ops: Backend providing hypot

    Returns:
        The hypotenuse of x and y, never negative.
    """
    return ops_for(ops, x, y).hypot(x, y)


def magnitude_from_cartesian_vectors(*vectors: Vector, ops: Optional[RootFunctions] = None) -> Number:
    """Length of the sum of any number of cartesian vectors."""
    ops = ops_for(ops, *_components(vectors))
    return magnitude_from_cartesian(*cartesian_from_cartesian_vectors(*vectors, ops=ops), ops=ops)


def magnitude_from_two_polar_vectors(magnitude1: Number, magnitude2: Number, angle: Number,
                                     ops: Optional[RootTrigonometric] = None) -> Number:
    """
    Third side of the triangle whose sides ``magnitude1`` and ``magnitude2``
    enclose ``angle``.

    Law of cosines:
    c = sqrt(m1² + m2² − 2·m1·m2·cos(angle))

    Args:
        magnitude1: Magnitude of the first vector
        magnitude2: Magnitude of the second vector
        angle: Included angle between the two vectors (radians)
        ops: Backend providing sqrt and cos

    Returns:
        Length of the side opposite ``angle``.
    """
    ops = ops_for(ops, magnitude1, magnitude2, angle)
    return ops.sqrt(magnitude1 * magnitude1 + magnitude2 * magnitude2
                    - 2 * magnitude1 * magnitude2 * ops.cos(angle))


def magnitude_from_polar_vectors(vector1: PolarVector, vector2: PolarVector,
                                 ops: Optional[RootTrigonometric] = None) -> Number:
    """Law-of-cosines magnitude of two polar vectors, included angle ``a1 − a2``."""
    (magnitude1, angle1), (magnitude2, angle2) = vector1, vector2
    return magnitude_from_two_polar_vectors(magnitude1, magnitude2, angle1 - angle2, ops=ops)


# --- Components ------------------------------------------------------------

def x_from_polar(magnitude: Number, angle: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
    """X-component of a polar vector."""
    return magnitude * ops_for(ops, magnitude, angle).cos(angle)


def y_from_polar(magnitude: Number, angle: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
    """Y-component of a polar vector."""
    return magnitude * ops_for(ops, magnitude, angle).sin(angle)


def polar_angle_from_cartesian(x: Number, y: Number, ops: Optional[TrigonometricFunctions] = None) -> Number:
    """
    Angle from the +x axis, computed as atan(y / x).

    The result lies in (-π/2, π/2): vectors in the left half-plane map to
    the angle of their reflection through the origin. x = 0 is a caller
    error; the division is left to the numeric type.
    """
    return ops_for(ops, x, y).atan(y / x)


# --- Cartesian -------------------------------------------------------------

def cartesian_from_polar(magnitude: Number, angle: Number,
                         ops: Optional[TrigonometricFunctions] = None) -> Vector:
    ops = ops_for(ops, magnitude, angle)
    return x_from_polar(magnitude, angle, ops=ops), y_from_polar(magnitude, angle, ops=ops)


def cartesian_from_cartesian_vectors(*vectors: Vector, ops: Optional[ExtendedReals] = None) -> Vector:
    """
    Componentwise sum of cartesian vectors.

    Args:
        *vectors: Any number of (x, y) tuples
        ops: Backend providing zero; required when no vectors are given

    Returns:
        Tuple[x, y] of the vector sum.
    """
    ops = ops_for(ops, *_components(vectors))
    return (sum((vector[0] for vector in vectors), ops.zero),
            sum((vector[1] for vector in vectors), ops.zero))


def cartesian_normalized(x: Number, y: Number, ops: Optional[RootFunctions] = None) -> Vector:
    """Unit vector in the direction of (x, y). Undefined for the zero vector."""
    magnitude = magnitude_from_cartesian(x, y, ops=ops)
    return x / magnitude, y / magnitude


def cartesian_kvadrantized(x: Number, y: Number, ops: Optional[AbsoluteValue] = None) -> Vector:
    """
    Quadrant of a vector as a pair of ±1 signs.

    Each component is divided by its absolute value, so a zero component
    is undefined.
    """
    ops = ops_for(ops, x, y)
    return x / ops.abs(x), y / ops.abs(y)


# --- Polar -----------------------------------------------------------------

def polar_from_cartesian(x: Number, y: Number, ops: Optional[RootTrigonometric] = None) -> PolarVector:
    ops = ops_for(ops, x, y)
    return magnitude_from_cartesian(x, y, ops=ops), polar_angle_from_cartesian(x, y, ops=ops)


def polar_normalized(magnitude: Number, angle: Number, ops: Optional[ExtendedReals] = None) -> PolarVector:
    """Unit vector with the same angle; the magnitude is discarded."""
    return ops_for(ops, magnitude, angle).one, angle


# --- Normals ---------------------------------------------------------------
# https://en.wikipedia.org/wiki/Normal_(geometry)

def normal1_from_cartesian(x: Number, y: Number) -> Vector:
    """First normal: (x, y) rotated 90° counterclockwise."""
    return -y, x


def normal2_from_cartesian(x: Number, y: Number) -> Vector:
    """Second normal: (x, y) rotated 90° clockwise."""
    return y, -x


# --- Between two vectors ---------------------------------------------------

def distance_from_cartesian(vector1: Vector, vector2: Vector, ops: Optional[RootFunctions] = None) -> Number:
    """Euclidean distance between two cartesian points."""
    return magnitude_from_cartesian(vector1[0] - vector2[0], vector1[1] - vector2[1],
                                    ops=ops_for(ops, *vector1, *vector2))


def distance_from_polar(vector1: PolarVector, vector2: PolarVector,
                        ops: Optional[RootTrigonometric] = None) -> Number:
    """
    Distance between two polar points by the law of cosines.

    d = sqrt(r1² + r2² − 2·r1·r2·cos(φ2 − φ1))
    """
    (radius1, angle1), (radius2, angle2) = vector1, vector2
    ops = ops_for(ops, radius1, angle1, radius2, angle2)
    return ops.sqrt(radius1 * radius1 + radius2 * radius2
                    - 2 * radius1 * radius2 * ops.cos(angle2 - angle1))


def direction_from_cartesian(from_vector: Vector, to_vector: Vector) -> Vector:
    """Displacement from one point to another, not normalized."""
    return to_vector[0] - from_vector[0], to_vector[1] - from_vector[1]


def dot_product_from_cartesian(vector1: Vector, vector2: Vector) -> Number:
    return vector1[0] * vector2[0] + vector1[1] * vector2[1]


def dot_product_from_polar(length1: Number, length2: Number, angle: Number,
                           ops: Optional[TrigonometricFunctions] = None) -> Number:
    """Dot product of two vectors given their lengths and the angle between them."""
    return length1 * length2 * ops_for(ops, length1, length2, angle).cos(angle)


def cross_product_from_cartesian(vector1: Vector, vector2: Vector) -> Number:
    """
    Cross product of two plane vectors.

    In 2D the result is the signed magnitude along the third axis.
    """
    return (vector1[0] * vector2[1]) - (vector1[1] * vector2[0])
