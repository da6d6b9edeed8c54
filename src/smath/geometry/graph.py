"""
Tabular and polyline views of sampled function graphs.
"""

from typing import Iterable, Type

import numpy as np
import pandas as pd
from shapely.geometry import LineString

from ..functions.base import MathFunction
from ..numerics.backend import ops_for
from .function_geometry import Point, points_from_count


def points_frame(points: Iterable[Point]) -> pd.DataFrame:
    """
    Collect sampled points into a DataFrame with columns x and y.

    The point sequence is consumed once; dtypes follow the sampled values.
    """
    rows = list(points)
    return pd.DataFrame(rows, columns=['x', 'y'])


def function_frame(function: Type[MathFunction], start, stop, count: int, ops=None) -> pd.DataFrame:
    """
    Sample a MathFunction and its derivative over [start, stop).

    Args:
        function: Function descriptor, e.g. Sine
        start: First x
        stop: Exclusive upper bound
        count: Number of intervals the range is split into
        ops: Numeric backend; resolved from start/stop when omitted

    Returns:
        pd.DataFrame with columns x, y and slope.
    """
    ops = ops_for(ops, start, stop)
    frame = points_frame(points_from_count(lambda x: function.eval(x, ops=ops),
                                           ops.coerce(start), ops.coerce(stop), count, ops=ops))
    frame['slope'] = [function.derivative_eval(x, ops=ops) for x in frame['x']]
    return frame


def graph_polyline(points: Iterable[Point]) -> LineString:
    """
    Join sampled points into a shapely LineString.

    Raises:
        ValueError: If fewer than two points are given.
    """
    coords = np.array([(float(x), float(y)) for x, y in points], dtype=float)
    if len(coords) < 2:
        raise ValueError(f"A polyline needs at least 2 points, got {len(coords)}")
    return LineString(coords)


def graph_length(points: Iterable[Point]) -> float:
    """Arc length of the sampled graph, approximated by its polyline."""
    return graph_polyline(points).length
