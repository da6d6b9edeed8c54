"""
Numeric backends.

A NumericBackend is the capability table for one concrete scalar type: it
supplies the constants, root and trigonometric primitives that the
protocols in ``capabilities`` describe. NumPy floating scalars keep their
precision through NumPy's ufuncs; the builtin float goes through ``math``.

Backends are looked up from the values themselves (``resolve_backend``) or
by name (``get_backend``), so formulas are written once and run for
float16, float32, float64, longdouble and builtin floats alike.
"""

import math
import sys
from typing import Callable, Dict, List, Optional

import numpy as np

from ..utils.logging_config import get_logger
from .capabilities import Number

logger = get_logger(__name__)


class UnsupportedNumericTypeError(TypeError):
    """Raised when no backend is registered for a value's type."""
    pass


class NumericBackend:
    """
    Capability table for a single numeric scalar type.

    Arguments handed to the primitives are coerced to ``scalar_type`` first,
    so results always come back in the backend's own precision.
    """

    def __init__(
        self,
        name: str,
        scalar_type: type,
        max_value: Number,
        eps: Number,
        sqrt: Callable,
        hypot: Callable,
        sin: Callable,
        cos: Callable,
        atan: Callable,
        absolute: Callable,
    ):
        self.name = name
        self.scalar_type = scalar_type
        self._max_value = scalar_type(max_value)
        self._eps = scalar_type(eps)
        self._sqrt = sqrt
        self._hypot = hypot
        self._sin = sin
        self._cos = cos
        self._atan = atan
        self._abs = absolute

    def __repr__(self) -> str:
        return f"NumericBackend({self.name!r})"

    def coerce(self, value: Number) -> Number:
        return self.scalar_type(value)

    # Extended reals
    @property
    def zero(self) -> Number:
        return self.scalar_type(0)

    @property
    def one(self) -> Number:
        return self.scalar_type(1)

    @property
    def positive_infinity(self) -> Number:
        return self.scalar_type(float('inf'))

    @property
    def negative_infinity(self) -> Number:
        return self.scalar_type(float('-inf'))

    # Extremal values
    @property
    def max_value(self) -> Number:
        return self._max_value

    @property
    def min_value(self) -> Number:
        return -self._max_value

    @property
    def eps(self) -> Number:
        """Machine epsilon of the scalar type."""
        return self._eps

    # Roots
    def sqrt(self, x: Number) -> Number:
        return self._sqrt(self.coerce(x))

    def hypot(self, x: Number, y: Number) -> Number:
        return self._hypot(self.coerce(x), self.coerce(y))

    # Trigonometry
    def sin(self, x: Number) -> Number:
        return self._sin(self.coerce(x))

    def cos(self, x: Number) -> Number:
        return self._cos(self.coerce(x))

    def atan(self, x: Number) -> Number:
        return self._atan(self.coerce(x))

    def abs(self, x: Number) -> Number:
        return self._abs(self.coerce(x))

    def from_int(self, n: int) -> Number:
        return self.scalar_type(n)


def _numpy_backend(name: str, dtype: type) -> NumericBackend:
    info = np.finfo(dtype)
    return NumericBackend(
        name=name,
        scalar_type=dtype,
        max_value=info.max,
        eps=info.eps,
        sqrt=np.sqrt,
        hypot=np.hypot,
        sin=np.sin,
        cos=np.cos,
        atan=np.arctan,
        absolute=np.abs,
    )


FLOAT16 = _numpy_backend('float16', np.float16)
FLOAT32 = _numpy_backend('float32', np.float32)
FLOAT64 = _numpy_backend('float64', np.float64)
LONGDOUBLE = _numpy_backend('longdouble', np.longdouble)
PYFLOAT = NumericBackend(
    name='float',
    scalar_type=float,
    max_value=sys.float_info.max,
    eps=sys.float_info.epsilon,
    sqrt=math.sqrt,
    hypot=math.hypot,
    sin=math.sin,
    cos=math.cos,
    atan=math.atan,
    absolute=abs,
)

_BACKENDS_BY_NAME: Dict[str, NumericBackend] = {}
_BACKENDS_BY_TYPE: Dict[type, NumericBackend] = {}


def register_backend(backend: NumericBackend, *extra_types: type) -> None:
    """
    Makes a backend available by name and by scalar type.

    Args:
        backend: The backend to register.
        *extra_types: Further value types that should resolve to it.
    """
    _BACKENDS_BY_NAME[backend.name] = backend
    for scalar_type in (backend.scalar_type,) + extra_types:
        _BACKENDS_BY_TYPE[scalar_type] = backend
    logger.debug(f"Registered numeric backend {backend.name}")


register_backend(PYFLOAT, int)
register_backend(FLOAT16)
register_backend(FLOAT32)
register_backend(FLOAT64)
if np.dtype(np.longdouble) != np.dtype(np.float64):
    register_backend(LONGDOUBLE)
else:
    # Platforms where longdouble is float64 keep the float64 type mapping.
    _BACKENDS_BY_NAME[LONGDOUBLE.name] = LONGDOUBLE


def available_backends() -> List[str]:
    return sorted(_BACKENDS_BY_NAME)


def get_backend(name: str) -> NumericBackend:
    """
    Looks up a backend by name (e.g. 'float32').

    Raises:
        ValueError: If no backend has that name.
    """
    try:
        return _BACKENDS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Unknown numeric type '{name}'. Available: {available_backends()}")


def _backend_for_type(value_type: type) -> Optional[NumericBackend]:
    # Walk the MRO so np.float64 matches before its builtin float base.
    for cls in value_type.__mro__:
        backend = _BACKENDS_BY_TYPE.get(cls)
        if backend is not None:
            return backend
    return None


def _promoted_backend(backends: List[NumericBackend]) -> NumericBackend:
    # NumPy's promotion rules pick the widest type, e.g. float16 + float64 -> float64.
    try:
        promoted = np.result_type(*[backend.scalar_type for backend in backends]).type
    except TypeError:
        promoted = None
    backend = _backend_for_type(promoted) if promoted is not None else None
    if backend is None:
        names = [item.name for item in backends]
        raise UnsupportedNumericTypeError(f"Cannot combine numeric types {names}")
    return backend


def resolve_backend(*values: Number) -> NumericBackend:
    """
    Picks the backend matching the given values.

    NumPy scalars are promoted the way NumPy promotes them, so mixing
    float16 and float64 arguments resolves to float64. Builtin ints and
    floats only decide the backend when no NumPy scalar is present.

    Raises:
        UnsupportedNumericTypeError: For a value of an unregistered type, for
            types that cannot be promoted together, or when called without
            values.
    """
    if not values:
        raise UnsupportedNumericTypeError("Cannot resolve a numeric backend without values")
    specific = []
    for value in values:
        backend = _backend_for_type(type(value))
        if backend is None:
            raise UnsupportedNumericTypeError(
                f"No numeric backend for {type(value).__name__}. Available: {available_backends()}"
            )
        if backend is not PYFLOAT and backend not in specific:
            specific.append(backend)
    if not specific:
        return PYFLOAT
    if len(specific) == 1:
        return specific[0]
    return _promoted_backend(specific)


def ops_for(ops, *values: Number):
    """Returns ``ops`` when given, otherwise the backend resolved from ``values``."""
    if ops is None:
        return resolve_backend(*values)
    return ops
