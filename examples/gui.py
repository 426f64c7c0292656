# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

from cg2d.hull import IncrementalHull2D, StepResult, HullError
from cg2d.pointset import PointSet, generate_points, parse_points_from_text, optional_seed
from cg2d.render import RenderSettings, draw_frame
from cg2d.runner import DEFAULT_INTERVAL, DEFAULT_OUT_DIR, SnapshotRunner

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


class HullApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("ConvexHull")
        self.geometry("760x900")

        self.settings = RenderSettings()
        self.hull = None
        self.runner = None
        self._job = None

        # сюди покладемо Figure/Canvas
        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")

        ttk.Radiobutton(
            mode_frame,
            text="Випадкові точки у квадраті (-0.9, 0.9)",
            variable=self.input_mode,
            value="random",
            command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)

        ttk.Radiobutton(
            mode_frame,
            text="Ручне введення точок",
            variable=self.input_mode,
            value="manual",
            command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        # --- Параметри для random-режиму ---
        input_frame = ttk.LabelFrame(main, text="Параметри (для випадкових точок)")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість точок:").grid(row=0, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "20")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        ttk.Label(input_frame, text="Seed (порожньо = випадковий):").grid(row=0, column=2, sticky="w", padx=5, pady=5)
        self.seed_entry = ttk.Entry(input_frame, width=10)
        self.seed_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)

        # --- Поле для ручного вводу ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="x", pady=5)

        self.points_text = tk.Text(manual_frame, height=4, wrap="none")
        self.points_text.pack(fill="x", padx=5, pady=5)
        self.points_text.insert("1.0", "# Приклад:\n# -0.5 -0.5\n# 0.5 -0.5\n# 0 0.6\n")

        self.save_var = tk.BooleanVar(value=True)
        ttk.Checkbutton(main, text=f"Зберігати кадри у {DEFAULT_OUT_DIR}/", variable=self.save_var).pack(anchor="w")

        ttk.Button(main, text="Запустити обхід", command=self.start).pack(fill="x", pady=10)

        self.status_var = tk.StringVar(value="—")
        ttk.Label(main, textvariable=self.status_var).pack(fill="x", pady=2)

        # --- Фрейм для графіка ---
        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(6, 6), facecolor=self.settings.background)
        self.ax = self.fig.add_axes((0.0, 0.0, 1.0, 1.0))
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        state = "normal" if self.input_mode.get() == "random" else "disabled"
        self.n_entry.configure(state=state)
        self.seed_entry.configure(state=state)

    def _read_points(self):
        if self.input_mode.get() == "random":
            n = int(self.n_entry.get())
            if n < 1:
                raise ValueError("Кількість точок має бути додатним цілим числом.")
            return generate_points(n, seed=optional_seed(self.seed_entry.get()))
        return PointSet.from_coords(parse_points_from_text(self.points_text.get("1.0", "end")))

    def start(self):
        if self._job is not None:
            self.after_cancel(self._job)
            self._job = None
        try:
            pts = self._read_points()
        except ValueError as e:
            messagebox.showerror("Помилка вводу", str(e))
            return

        self.hull = IncrementalHull2D(pts)
        self.runner = None
        if self.save_var.get():
            self.runner = SnapshotRunner(self.hull, out_dir=DEFAULT_OUT_DIR, settings=self.settings)
            self.runner.prepare_output_dir()
        self._tick()

    def _tick(self):
        # крок раз на DEFAULT_INTERVAL секунд, як таймер у вікні
        try:
            if self.runner is not None:
                result = self.runner.tick()
            else:
                result = self.hull.step()
        except HullError as e:
            self._job = None
            messagebox.showerror("Помилка виконання", str(e))
            return

        draw_frame(self.ax, self.hull.P, self.hull.chain, self.settings)
        self.canvas.draw()
        self.status_var.set(f"Кроків: {self.hull.step_count}, вершин у ланцюгу: {len(self.hull.chain)}")

        if result is StepResult.DONE:
            self._job = None
            self.status_var.set(self.status_var.get() + ", замкнено")
            return
        self._job = self.after(int(DEFAULT_INTERVAL * 1000), self._tick)


if __name__ == "__main__":
    app = HullApp()
    app.mainloop()
