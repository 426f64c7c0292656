from __future__ import annotations
import logging
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from .geom import Pt, EPS, sub, norm, same_point
from .pointset import PointSet
from .predicates import oriented_angle

_logger = logging.getLogger(__name__)


class StepResult(Enum):
    PROGRESSED = "progressed"
    DONE = "done"


class HullError(RuntimeError):
    """Базова помилка побудови ланцюга."""


class NoCandidateError(HullError):
    """Немає жодної точки, відмінної від кінця ланцюга (порожня/одноточкова множина)."""


class IterationLimitExceeded(HullError):
    """Ланцюг не замкнувся за max_steps викликів step()."""


class IncrementalHull2D:
    """
    Покроковий обхід «оболонки» навколо центроїда.

    На кожному кроці до ланцюга додається точка з найменшим oriented_angle
    між (кінець - центроїд) і (точка - кінець). Це НЕ gift wrapping: опорний
    напрям іде від центроїда, а не вздовж попереднього ребра, тому ланцюг може
    робити петлі. Петля виявляється, коли кінець ланцюга повторює непершу
    вершину: тоді префікс до неї включно відкидається. Повернення до першої
    вершини означає замикання, далі step() нічого не змінює.

    Стан: self.chain (копія), step_count — кількість продуктивних кроків
    (нумерація знімків), calls — кількість нетермінальних викликів.
    """

    def __init__(
        self,
        point_set: PointSet,
        *,
        eps: float = EPS,
        max_steps: Optional[int] = None,
        chain: Optional[Sequence[Pt]] = None,
    ):
        self.P: PointSet = point_set
        self.eps = eps
        n = len(point_set)
        self.max_steps: int = max_steps if max_steps is not None else 4*n*n + 4
        self.step_count = 0
        self.calls = 0
        self._done = False
        self._chain: List[Pt] = []
        if chain:
            self._chain = self._checked_chain(chain)

    # ---------------- Публічний API ----------------
    @property
    def centroid(self) -> Pt:
        return self.P.centroid

    @property
    def chain(self) -> List[Pt]:
        """Копія поточного ланцюга (читачі не мутують стан)."""
        return self._chain[:]

    @property
    def is_done(self) -> bool:
        return self._done

    def step(self) -> StepResult:
        """
        Один крок обходу:
          1) перевірка замикання/петлі (якщо в ланцюгу >= 2 вершин),
          2) порожній ланцюг: кладемо P[0],
          3) інакше вибір точки з мінімальним кутом,
          4) друга вершина з кутом < 90 замінює стартову,
          5) інакше додаємо в кінець.
        """
        if self._done:
            return StepResult.DONE

        idx = self._closure_index()
        if idx == 0:
            self._done = True
            _logger.debug("chain closed at %s after %d steps", self._chain[0], self.step_count)
            return StepResult.DONE

        self.calls += 1
        if self.calls > self.max_steps:
            raise IterationLimitExceeded(
                f"chain did not close within {self.max_steps} steps "
                f"(length {len(self._chain)})"
            )

        if idx is not None:
            # петля: тримаємо лише chain[idx+1:], дублікат у кінці стає новою опорою
            _logger.debug("pruning loop: dropping %d leading vertices", idx + 1)
            del self._chain[:idx + 1]

        if not self._chain:
            self._chain.append(self.P[0])
        else:
            lst = len(self._chain) - 1
            best, best_ang = self._select_next(self._chain[lst])
            if best_ang < 90 and lst == 0:
                _logger.debug("replacing start %s with %s (angle %.3f)", self._chain[0], best, best_ang)
                self._chain[lst] = best
            else:
                self._chain.append(best)

        self.step_count += 1
        return StepResult.PROGRESSED

    def run(self) -> List[Pt]:
        """Крокувати до замикання. Повертає фінальний ланцюг."""
        while self.step() is StepResult.PROGRESSED:
            pass
        return self.chain

    def steps(self) -> Iterator[Tuple[int, List[Pt]]]:
        """(step_count, копія ланцюга) після кожного продуктивного кроку."""
        while self.step() is StepResult.PROGRESSED:
            yield self.step_count, self.chain

    def polygon(self) -> List[Pt]:
        """Замкнений многокутник без повтореної кінцевої вершини."""
        if not self._done:
            raise RuntimeError("chain is not closed yet")
        return self._chain[:-1]

    # ---------------- Внутрішні методи ----------------
    def _closure_index(self) -> Optional[int]:
        """Перший індекс < last, де вершина дорівнює кінцю ланцюга, або None."""
        if len(self._chain) < 2:
            return None
        tail = self._chain[-1]
        for idx in range(len(self._chain) - 1):
            if same_point(self._chain[idx], tail, self.eps):
                return idx
        return None

    def _select_next(self, lst: Pt) -> Tuple[Pt, float]:
        """Точка з мінімальним oriented_angle; при рівності виграє перша в P."""
        v1 = sub(lst, self.centroid)
        best: Optional[Pt] = None
        best_ang = float("inf")
        for p in self.P:
            v2 = sub(p, lst)
            if norm(v2) == 0.0:
                continue
            ang = oriented_angle(v1, v2)
            if ang < best_ang:
                best_ang = ang
                best = p
        if best is None:
            raise NoCandidateError(f"no point distinct from {lst}")
        return best, best_ang

    def _checked_chain(self, chain: Sequence[Pt]) -> List[Pt]:
        out: List[Pt] = []
        for i, p in enumerate(chain):
            if not self.P.contains(p, self.eps):
                raise ValueError(f"chain[{i}] = {p} is not in the point set")
            if out and same_point(out[-1], p, self.eps):
                raise ValueError(f"chain[{i}] duplicates its predecessor")
            out.append(p)
        return out

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка інваріантів ланцюга:
          - кожна вершина належить множині точок;
          - сусідні вершини різні;
          - різних вершин не більше N, довжина не більше N + 1.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        foreign = [i for i, p in enumerate(self._chain) if not self.P.contains(p, self.eps)]
        adjacent = [
            i for i in range(1, len(self._chain))
            if same_point(self._chain[i - 1], self._chain[i], self.eps)
        ]
        distinct: List[Pt] = []
        for p in self._chain:
            if not any(same_point(p, q, self.eps) for q in distinct):
                distinct.append(p)
        return {
            "length": len(self._chain),
            "distinct": len(distinct),
            "closed": self._done,
            "foreign_vertices": foreign,
            "adjacent_duplicates": adjacent,
            "over_bound": len(distinct) > len(self.P) or len(self._chain) > len(self.P) + 1,
        }

    def to_off(self) -> str:
        """
        Експорт замкненого многокутника у формат OFF (z = 0, одна грань).
        """
        poly = self.polygon()
        lines = ["OFF", f"{len(poly)} 1 0"]
        for p in poly:
            lines.append(f"{p.x} {p.y} 0")
        lines.append(" ".join([str(len(poly))] + [str(i) for i in range(len(poly))]))
        return "\n".join(lines)
