from cg2d.pipeline import build_hull, compare_with_reference

if __name__ == "__main__":
    raw = [
        (-0.8, -0.8), (0.8, -0.8), (0.8, 0.8), (-0.8, 0.8),
        (0.1, 0.2), (-0.3, 0.4), (0.5, -0.1), (-0.2, -0.5),
    ]
    pts, hull = build_hull(raw)

    print("STEPS:", hull.step_count)
    print("VALIDATION:", hull.validate())
    print("REFERENCE:", compare_with_reference(hull))

    with open("hull2d.off", "w", encoding="utf-8") as f:
        f.write(hull.to_off())
    print("Wrote hull2d.off — можна глянути в MeshLab/ParaView.")
