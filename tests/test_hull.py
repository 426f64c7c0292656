from __future__ import annotations

import pytest

from cg2d.geom import Pt, same_point
from cg2d.hull import (
    IncrementalHull2D,
    IterationLimitExceeded,
    NoCandidateError,
    StepResult,
)
from cg2d.pointset import PointSet, generate_points

# ромб навколо центроїда (0, 0)
A, B, C, D = Pt(1.0, 0.0), Pt(0.0, 1.0), Pt(-1.0, 0.0), Pt(0.0, -1.0)
DIAMOND = PointSet((A, B, C, D))


def _check_invariants(hull: IncrementalHull2D) -> None:
    chain = hull.chain
    n = len(hull.P)
    assert all(hull.P.contains(p) for p in chain)
    assert all(not same_point(chain[i - 1], chain[i]) for i in range(1, len(chain)))
    assert len(chain) <= n + 1
    assert len({(p.x, p.y) for p in chain}) <= n


def test_first_step_seeds_with_first_point() -> None:
    hull = IncrementalHull2D(DIAMOND)
    assert hull.chain == []
    assert hull.step() is StepResult.PROGRESSED
    assert hull.chain == [A]
    assert hull.step_count == 1


def test_selection_uses_remapped_angle() -> None:
    # v1 = (1, 0): кути 135 (B), 180 (C), 315 (D, сирі -135).
    # Зі звичайним знаковим кутом виграла б D.
    hull = IncrementalHull2D(DIAMOND, chain=[A])
    hull.step()
    assert hull.chain == [A, B]


def test_degenerate_start_is_replaced_when_angle_below_90() -> None:
    start, winner = Pt(0.5, 0.0), Pt(1.0, 0.5)
    pts = PointSet((start, winner, Pt(-1.0, 0.5), Pt(-0.5, -1.0)))
    assert pts.centroid == Pt(0.0, 0.0)
    hull = IncrementalHull2D(pts)

    hull.step()
    assert hull.chain == [start]
    hull.step()  # кут до winner = 45
    assert hull.chain == [winner]
    assert hull.step_count == 2

    hull.step()  # з winner мінімальний кут 153.4 -> додаємо
    assert hull.chain == [winner, Pt(-1.0, 0.5)]


def test_loop_is_pruned_then_extended_in_same_call() -> None:
    hull = IncrementalHull2D(DIAMOND, chain=[A, B, C, B])
    assert hull.step() is StepResult.PROGRESSED
    chain = hull.chain
    # відкинуто chain[0..=1], лишилось [C, B], потім додано наступну вершину з B
    assert chain[:2] == [C, B]
    assert chain == [C, B, C]
    assert hull.step_count == 1


def test_closure_returns_done_and_is_idempotent() -> None:
    hull = IncrementalHull2D(DIAMOND, chain=[A, B, C, A])
    before = hull.chain
    for _ in range(3):
        assert hull.step() is StepResult.DONE
        assert hull.chain == before
    assert hull.is_done
    assert hull.step_count == 0
    assert hull.calls == 0


def test_full_walk_on_triangle_with_interior_point() -> None:
    a, b, c, inner = Pt(-0.5, -0.5), Pt(0.5, -0.5), Pt(0.0, 0.6), Pt(0.0, 0.0)
    hull = IncrementalHull2D(PointSet((a, b, c, inner)))
    assert hull.run() == [a, b, c, a]
    assert hull.step_count == 4
    assert hull.polygon() == [a, b, c]


@pytest.mark.parametrize("seed", range(25))
def test_random_walk_keeps_invariants_and_terminates(seed: int) -> None:
    hull = IncrementalHull2D(generate_points(20, seed=seed))
    while hull.step() is StepResult.PROGRESSED:
        _check_invariants(hull)
    _check_invariants(hull)

    final = hull.chain
    assert same_point(final[0], final[-1])
    assert hull.step() is StepResult.DONE
    assert hull.chain == final

    report = hull.validate()
    assert report["closed"] is True
    assert report["foreign_vertices"] == []
    assert report["adjacent_duplicates"] == []
    assert report["over_bound"] is False


def test_steps_yields_each_productive_state() -> None:
    hull = IncrementalHull2D(generate_points(12, seed=5))
    seen = list(hull.steps())
    assert [k for k, _ in seen] == list(range(1, hull.step_count + 1))
    assert seen[-1][1] == hull.chain
    assert hull.is_done


@pytest.mark.parametrize("points", [(Pt(0.1, 0.2),), (Pt(0.1, 0.2), Pt(0.1, 0.2))])
def test_no_candidate_for_degenerate_point_set(points) -> None:
    hull = IncrementalHull2D(PointSet(points))
    hull.step()
    with pytest.raises(NoCandidateError):
        hull.step()


def test_iteration_limit() -> None:
    hull = IncrementalHull2D(DIAMOND, max_steps=2)
    hull.step()
    hull.step()
    with pytest.raises(IterationLimitExceeded, match="within 2 steps"):
        hull.step()


def test_default_iteration_limit_scales_with_n_squared() -> None:
    assert IncrementalHull2D(DIAMOND).max_steps == 4 * 16 + 4


def test_initial_chain_is_validated() -> None:
    with pytest.raises(ValueError, match="not in the point set"):
        IncrementalHull2D(DIAMOND, chain=[A, Pt(5.0, 5.0)])
    with pytest.raises(ValueError, match="duplicates its predecessor"):
        IncrementalHull2D(DIAMOND, chain=[A, A])


def test_chain_property_is_a_copy() -> None:
    hull = IncrementalHull2D(DIAMOND, chain=[A])
    hull.chain.append(B)
    assert hull.chain == [A]


def test_polygon_requires_closure() -> None:
    hull = IncrementalHull2D(DIAMOND)
    with pytest.raises(RuntimeError, match="not closed"):
        hull.polygon()


def test_to_off_writes_closed_polygon() -> None:
    hull = IncrementalHull2D(DIAMOND, chain=[A, B, C, A])
    hull.step()
    assert hull.to_off().splitlines() == [
        "OFF",
        "3 1 0",
        "1.0 0.0 0",
        "0.0 1.0 0",
        "-1.0 0.0 0",
        "3 0 1 2",
    ]
