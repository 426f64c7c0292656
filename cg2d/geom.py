from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Iterable, Tuple

EPS = 1e-9  # допуск рівності точок по кожній координаті

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

def add(a: Pt, b: Pt) -> Pt:
    return Pt(a.x + b.x, a.y + b.y)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def scale(a: Pt, k: float) -> Pt:
    return Pt(a.x*k, a.y*k)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def cross(a: Pt, b: Pt) -> float:
    """z-компонента векторного добутку (a.x, a.y, 0) x (b.x, b.y, 0)."""
    return a.x*b.y - a.y*b.x

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def same_point(a: Pt, b: Pt, eps: float = EPS) -> bool:
    """Рівність з допуском: обидві координати відрізняються менше ніж на eps."""
    return abs(a.x - b.x) < eps and abs(a.y - b.y) < eps

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)

def unique_points(points: Iterable[Tuple[float, float]], scale: float = 1e9) -> list[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    Порядок першої появи зберігається, від нього залежить стартова вершина обходу.
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for x, y in points:
        key = (int(round(x*scale)), int(round(y*scale)))
        if key not in seen:
            seen[key] = Pt(float(x), float(y))
    return list(seen.values())
