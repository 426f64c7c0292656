from __future__ import annotations

import numpy as np
import pytest

from cg2d.geom import Pt
from cg2d.pointset import PointSet, generate_points, optional_seed, parse_points_from_text


def test_generate_points_samples_open_square() -> None:
    pts = generate_points(200, seed=7)
    xy = pts.as_array()
    assert xy.shape == (200, 2)
    assert np.all(xy > -0.9)
    assert np.all(xy < 0.9)


def test_generate_points_is_reproducible_with_seed() -> None:
    assert generate_points(20, seed=3).points == generate_points(20, seed=3).points
    assert generate_points(20, seed=3).points != generate_points(20, seed=4).points


def test_generate_points_accepts_generator() -> None:
    rng = np.random.default_rng(11)
    pts = generate_points(5, seed=rng, low=0.0, high=1.0)
    assert len(pts) == 5
    assert all(0.0 <= p.x < 1.0 and 0.0 <= p.y < 1.0 for p in pts)


def test_centroid_computed_once_as_mean() -> None:
    pts = generate_points(20, seed=1)
    mean = pts.as_array().mean(axis=0)
    np.testing.assert_allclose([pts.centroid.x, pts.centroid.y], mean, rtol=0.0, atol=1e-12)


@pytest.mark.parametrize("kwargs", [{"n": 0}, {"n": 5, "low": 0.5, "high": 0.5}])
def test_generate_points_rejects_bad_arguments(kwargs) -> None:
    with pytest.raises(ValueError):
        generate_points(**kwargs)


def test_point_set_is_immutable_and_indexable() -> None:
    pts = PointSet.from_coords([(0, 0), (2, 0), (1, 3)])
    assert pts[1] == Pt(2.0, 0.0)
    assert len(pts) == 3
    assert pts.contains(Pt(1.0, 3.0 + 1e-12))
    assert not pts.contains(Pt(1.0, 2.0))
    with pytest.raises(AttributeError):
        pts.centroid = Pt(0.0, 0.0)  # type: ignore[misc]


def test_empty_point_set_is_rejected() -> None:
    with pytest.raises(ValueError, match="empty set"):
        PointSet(())


def test_parse_points_from_text() -> None:
    text = "# header\n\n0.1 0.2\n-0.3, 0.4\n"
    assert parse_points_from_text(text) == [(0.1, 0.2), (-0.3, 0.4)]


@pytest.mark.parametrize(
    "text, match",
    [
        ("0.1 0.2 0.3\n", "Рядок 1"),
        ("0.1 0.2\nfoo bar\n", "Рядок 2"),
        ("# only comments\n", "хоча б одна"),
    ],
)
def test_parse_points_from_text_errors(text: str, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        parse_points_from_text(text)


def test_optional_seed() -> None:
    assert optional_seed("  ") is None
    assert optional_seed(" 42 ") == 42
