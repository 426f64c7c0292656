# cg2d/pointset.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .geom import Pt, EPS, centroid, same_point

DEFAULT_SAMPLES = 20
DEFAULT_DOMAIN = (-0.9, 0.9)  # відкритий інтервал по кожній осі

SeedLike = Union[int, np.random.Generator, None]


@dataclass(frozen=True)
class PointSet:
    """
    Незмінна вибірка 2D точок разом із центроїдом.
    centroid рахується один раз при створенні й більше не змінюється.
    """
    points: Tuple[Pt, ...]
    centroid: Pt = field(init=False)

    def __post_init__(self):
        pts = tuple(self.points)
        object.__setattr__(self, "points", pts)
        object.__setattr__(self, "centroid", centroid(pts))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Pt]:
        return iter(self.points)

    def __getitem__(self, i: int) -> Pt:
        return self.points[i]

    def contains(self, p: Pt, eps: float = EPS) -> bool:
        return any(same_point(p, q, eps) for q in self.points)

    def as_array(self) -> np.ndarray:
        """(N, 2) масив координат — для matplotlib / SciPy."""
        return np.array([(p.x, p.y) for p in self.points], dtype=float)

    @classmethod
    def from_coords(cls, coords: Iterable[Tuple[float, float]]) -> "PointSet":
        return cls(tuple(Pt(float(x), float(y)) for x, y in coords))


def generate_points(
    n: int = DEFAULT_SAMPLES,
    seed: SeedLike = None,
    low: float = DEFAULT_DOMAIN[0],
    high: float = DEFAULT_DOMAIN[1],
) -> PointSet:
    """
    n незалежних рівномірних точок у квадраті (low, high)^2.
    seed=None — свіжа ентропія ОС, int — відтворюваний запуск,
    Generator — використовується як є.
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    if not low < high:
        raise ValueError(f"empty domain: ({low}, {high})")
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    xy = rng.uniform(low, high, size=(n, 2))
    # uniform дає [low, high); ліву межу відкидаємо, щоб інтервал був відкритим
    while np.any(xy == low):
        mask = xy == low
        xy[mask] = rng.uniform(low, high, size=int(mask.sum()))
    return PointSet(tuple(Pt(float(x), float(y)) for x, y in xy))


def parse_points_from_text(text: str) -> List[Tuple[float, float]]:
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y. Порожні рядки і # коментарі пропускаються.
    """
    points: List[Tuple[float, float]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'") from None
        points.append((x, y))
    if not points:
        raise ValueError("Потрібна хоча б одна точка.")
    return points


def optional_seed(text: str) -> Optional[int]:
    """'' -> None, інакше ціле число (для поля seed у прикладах)."""
    text = text.strip()
    return int(text) if text else None
