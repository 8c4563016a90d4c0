from __future__ import annotations
import numpy as np

from polysimplify.distance import sq_segment_distances
from polysimplify.points import PointsLike, as_xy, take_points


def douglas_peucker_indices(points: PointsLike, sq_tolerance: float) -> np.ndarray:
    """
    Ramer-Douglas-Peucker with an explicit stack of (first, last) ranges.
    points: (N,2)
    sq_tolerance: squared max deviation from the chord
    Returns ascending int indices of the kept points (endpoints included).
    """
    pts = as_xy(points)
    n = pts.shape[0]
    if n <= 1:
        return np.arange(n, dtype=np.intp)

    keep = np.zeros(n, dtype=bool)
    keep[0] = True
    keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        d = sq_segment_distances(pts[first + 1:last], pts[first], pts[last])
        # NaN never exceeds the tolerance
        d = np.where(np.isnan(d), 0.0, d)
        # argmax returns the first maximum, so ties go to the lowest index
        k = int(np.argmax(d))
        if d[k] > sq_tolerance:
            index = first + 1 + k
            keep[index] = True
            stack.append((first, index))
            stack.append((index, last))

    return np.flatnonzero(keep)


def simplify_douglas_peucker(points: PointsLike, sq_tolerance: float):
    return take_points(points, douglas_peucker_indices(points, sq_tolerance))
