from __future__ import annotations
from typing import Sequence, Union
import numpy as np

PointsLike = Union[np.ndarray, Sequence[Sequence[float]]]


def as_xy(points: PointsLike) -> np.ndarray:
    """
    Float view of a polyline. Empty input becomes (0,2).
    """
    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        return pts.reshape(0, 2)
    return pts


def take_points(points: PointsLike, indices: np.ndarray):
    # ndarray in -> ndarray rows out, anything else -> list of the caller's own point objects
    if isinstance(points, np.ndarray):
        return points[np.asarray(indices, dtype=np.intp)]
    return [points[int(i)] for i in indices]
