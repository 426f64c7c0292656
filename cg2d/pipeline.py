from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from .geom import Pt, EPS, same_point, unique_points
from .hull import IncrementalHull2D
from .pointset import PointSet


def build_hull(
    points: Iterable[Tuple[float, float]],
    max_steps: Optional[int] = None,
) -> Tuple[PointSet, IncrementalHull2D]:
    """
    Повний прогін:
      - прибирає дублікати точок (порядок першої появи зберігається);
      - крокує IncrementalHull2D до замикання.

    Повертає:
      point_set — множину точок із центроїдом;
      hull      — конструктор у стані DONE (chain, polygon(), validate()).
    """
    point_set = PointSet(tuple(unique_points(points)))
    hull = IncrementalHull2D(point_set, max_steps=max_steps)
    hull.run()
    return point_set, hull


def reference_hull(point_set: PointSet, backend: str = "scipy") -> List[Pt]:
    """Вершини справжньої опуклої оболонки (проти годинникової стрілки)."""
    if backend.lower() != "scipy":
        raise ValueError(f"Невідомий backend: {backend}")
    try:
        from scipy.spatial import ConvexHull
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', але SciPy не встановлено. "
            "Встанови scipy або пропусти порівняння з еталоном."
        ) from e

    # Qhull вимагає >= 3 неколінеарних точок
    qh = ConvexHull(point_set.as_array())
    return [point_set[int(i)] for i in qh.vertices]


def compare_with_reference(hull: IncrementalHull2D, eps: float = EPS) -> dict:
    """
    Порівняння замкненого обходу з опуклою оболонкою Qhull.
    Обхід навмисно не є класичним алгоритмом, тож розбіжності тут лише діагностика.
    """
    poly = hull.polygon()
    ref = reference_hull(hull.P)
    missing = [p for p in ref if not any(same_point(p, q, eps) for q in poly)]
    extra = [p for p in poly if not any(same_point(p, q, eps) for q in ref)]
    return {
        "polygon_vertices": len(poly),
        "hull_vertices": len(ref),
        "missing_hull_vertices": missing,
        "non_hull_vertices": extra,
        "matches": not missing and not extra,
    }
