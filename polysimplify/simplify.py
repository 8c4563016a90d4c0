from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
import numpy as np

from polysimplify.douglas_peucker import douglas_peucker_indices
from polysimplify.points import PointsLike, as_xy, take_points
from polysimplify.radial import radial_distance_indices

logger = logging.getLogger(__name__)


def squared_tolerance(tolerance: Optional[float]) -> float:
    if tolerance is None:
        return 1.0
    tol = float(tolerance)
    if not tol >= 0.0:
        raise ValueError("tolerance must be a non-negative number")
    return tol * tol


@dataclass(frozen=True)
class SimplifyOptions:
    tolerance: Optional[float] = None  # max allowed deviation; None means 1
    highest_quality: bool = False      # skip the radial pre-filter

    @property
    def sq_tolerance(self) -> float:
        return squared_tolerance(self.tolerance)


def _check_points(points: PointsLike) -> np.ndarray:
    pts = as_xy(points)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("points must be (N,2)")
    return pts


def simplify_indices(
    points: PointsLike,
    tolerance: Optional[float] = None,
    highest_quality: bool = False,
) -> np.ndarray:
    """
    Indices into points of the vertices simplify() keeps.

    Without highest_quality the polyline is first thinned by radial distance,
    then Douglas-Peucker runs on what is left. Indices always refer to the
    original input.
    """
    sq_tol = squared_tolerance(tolerance)
    pts = _check_points(points)
    n = pts.shape[0]

    if highest_quality:
        base = np.arange(n, dtype=np.intp)
    else:
        base = radial_distance_indices(pts, sq_tol)

    idx = base[douglas_peucker_indices(pts[base], sq_tol)]

    logger.debug(
        "simplify: %d -> %d (radial) -> %d points, sq_tolerance=%g, highest_quality=%s",
        n, base.shape[0], idx.shape[0], sq_tol, highest_quality,
    )
    return idx


def simplify(
    points: PointsLike,
    tolerance: Optional[float] = None,
    highest_quality: bool = False,
):
    """
    Simplify a 2D polyline.
    points: (N,2) ndarray or a sequence of (x, y) points
    tolerance: max deviation, in the units of the coordinates
    highest_quality: run Douglas-Peucker only
    Returns the kept points in original order; an ndarray for ndarray input,
    otherwise a list of the original point objects.
    """
    idx = simplify_indices(points, tolerance, highest_quality)
    return take_points(points, idx)


def simplify_with(points: PointsLike, options: SimplifyOptions):
    return simplify(points, options.tolerance, options.highest_quality)
