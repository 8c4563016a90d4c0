from __future__ import annotations
import numpy as np

from polysimplify.distance import sq_distance
from polysimplify.points import PointsLike, as_xy, take_points


def radial_distance_indices(points: PointsLike, sq_tolerance: float) -> np.ndarray:
    """
    Left-to-right radial thinning.
    A point survives when its squared distance to the last kept point is
    strictly greater than sq_tolerance. The last point is always kept.
    Returns ascending int indices into points.
    """
    pts = as_xy(points)
    n = pts.shape[0]
    if n <= 1:
        return np.arange(n, dtype=np.intp)

    coords = pts.tolist()
    keep = [0]
    prev = coords[0]
    for i in range(1, n):
        if sq_distance(coords[i], prev) > sq_tolerance:
            keep.append(i)
            prev = coords[i]

    if keep[-1] != n - 1:
        keep.append(n - 1)
    return np.asarray(keep, dtype=np.intp)


def simplify_radial_distance(points: PointsLike, sq_tolerance: float):
    return take_points(points, radial_distance_indices(points, sq_tolerance))
