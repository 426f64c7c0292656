# examples/main.py
from __future__ import annotations

import logging
import sys

from cg2d.hull import IncrementalHull2D
from cg2d.pointset import generate_points
from cg2d.runner import FixedStepClock, SnapshotRunner


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    # --- 1) Вхідні дані ---
    # seed з командного рядка, інакше щоразу нова множина
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    pts = generate_points(20, seed=seed)
    print(f"Точок:     {len(pts)}")
    print(f"Центроїд:  ({pts.centroid.x:.4f}, {pts.centroid.y:.4f})")

    # --- 2) Обхід + знімки в out/ ---
    hull = IncrementalHull2D(pts)
    runner = SnapshotRunner(hull, out_dir="out", clock=FixedStepClock())
    saved = runner.run()

    # --- 3) Підсумок ---
    print(f"Кроків:    {hull.step_count}")
    print(f"Знімків:   {len(saved)}")
    print("VALIDATION:", hull.validate())


if __name__ == "__main__":
    main()
