import numpy as np
from polysimplify.distance import sq_distance, sq_segment_distance, sq_segment_distances


def test_sq_distance_is_squared_euclidean():
    assert sq_distance((0, 0), (3, 4)) == 25.0
    assert sq_distance((1.5, -2.0), (1.5, -2.0)) == 0.0


def test_segment_distance_projects_inside_segment():
    # perpendicular foot lands at (1, 0)
    assert sq_segment_distance((1, 1), (0, 0), (2, 0)) == 1.0


def test_segment_distance_clamps_to_endpoints():
    # before the start -> distance to (0,0)
    assert sq_segment_distance((-1, 1), (0, 0), (2, 0)) == 2.0
    # past the end -> distance to (2,0)
    assert sq_segment_distance((3, 1), (0, 0), (2, 0)) == 2.0


def test_degenerate_segment_measures_to_start():
    assert sq_segment_distance((1, 1), (5, 5), (5, 5)) == 32.0
    assert sq_segment_distance((5, 5), (5, 5), (5, 5)) == 0.0


def test_vectorized_matches_scalar_exactly():
    rng = np.random.default_rng(0)
    pts = rng.normal(scale=10.0, size=(200, 2))
    a = np.array([-3.3, 1.7])
    b = np.array([8.1, -0.1])

    d = sq_segment_distances(pts, a, b)
    ref = np.array([sq_segment_distance(p, a, b) for p in pts])
    assert d.shape == (200,)
    assert np.array_equal(d, ref)


def test_vectorized_degenerate_segment_has_no_division():
    pts = np.array([[5.0, 5.0], [6.0, 5.0], [5.0, 3.0]])
    with np.errstate(all="raise"):
        d = sq_segment_distances(pts, (5.0, 5.0), (5.0, 5.0))
    assert np.array_equal(d, [0.0, 1.0, 4.0])
