from __future__ import annotations
import numpy as np


def sq_distance(p1, p2) -> float:
    """Squared euclidean distance between two 2D points."""
    dx = float(p1[0]) - float(p2[0])
    dy = float(p1[1]) - float(p2[1])
    return dx * dx + dy * dy


def sq_segment_distance(p, p1, p2) -> float:
    """
    Squared distance from p to the segment [p1, p2].
    The projection parameter t is clamped to the segment; a degenerate
    segment (p1 == p2) measures straight to p1.
    """
    x, y = float(p1[0]), float(p1[1])
    dx = float(p2[0]) - x
    dy = float(p2[1]) - y

    if dx != 0.0 or dy != 0.0:
        t = ((float(p[0]) - x) * dx + (float(p[1]) - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = float(p2[0]), float(p2[1])
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = float(p[0]) - x
    dy = float(p[1]) - y
    return dx * dx + dy * dy


def sq_segment_distances(points: np.ndarray, p1, p2) -> np.ndarray:
    """
    sq_segment_distance for every row of points (M,2) against one segment.
    Same arithmetic order as the scalar version, so values agree exactly.
    Returns (M,)
    """
    pts = np.asarray(points, dtype=float)
    px, py = pts[:, 0], pts[:, 1]

    x, y = float(p1[0]), float(p1[1])
    dx = float(p2[0]) - x
    dy = float(p2[1]) - y

    if dx != 0.0 or dy != 0.0:
        t = ((px - x) * dx + (py - y) * dy) / (dx * dx + dy * dy)
        # t <= 0 (and NaN) stays on p1
        nx = np.where(t > 1, float(p2[0]), np.where(t > 0, x + dx * t, x))
        ny = np.where(t > 1, float(p2[1]), np.where(t > 0, y + dy * t, y))
    else:
        nx = np.full_like(px, x)
        ny = np.full_like(py, y)

    ex = px - nx
    ey = py - ny
    return ex * ex + ey * ey
