# cg2d/predicates.py
from __future__ import annotations
from math import atan2, pi
from .geom import Pt, sub, cross, dot

def orient2d(a: Pt, b: Pt, c: Pt) -> float:
    """Подвоєна орієнтована площа трикутника abc (>0 — проти годинникової стрілки)."""
    return cross(sub(b, a), sub(c, a))

def oriented_angle(v1: Pt, v2: Pt) -> float:
    """
    Кут від v1 до v2 у градусах.

    Від'ємний результат atan2 перетворюється як 180 - angle (а не angle + 360),
    тож значення лежать у [0, 180] ∪ (180, 360): сирі -170° дають 350°.
    Від цього порядку залежить, яка точка виграє вибір у IncrementalHull2D.
    """
    d = dot(v1, v2)
    c = cross(v1, v2)
    ang = atan2(c, d) * 180.0 / pi
    if ang < 0:
        ang = 180.0 - ang
    return ang
