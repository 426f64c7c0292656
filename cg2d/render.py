from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple, Union

from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .geom import Pt
from .pointset import PointSet

RGB = Tuple[float, float, float]


@dataclass(frozen=True)
class RenderSettings:
    """Параметри кадру. Розміри точок і ліній — у координатах сцени."""
    canvas_size: Tuple[int, int] = (900, 900)
    dpi: int = 100
    background: RGB = (0.07, 0.13, 0.17)
    point_color: RGB = (1.0, 1.0, 1.0)
    chain_color: RGB = (0.0, 1.0, 0.0)
    active_color: RGB = (1.0, 0.0, 1.0)
    point_radius: float = 0.02
    line_width: float = 0.01
    view: Tuple[float, float] = (-1.0, 1.0)

    def px_to_pt(self, size: float) -> float:
        """Довжина у координатах сцени -> типографські пункти matplotlib."""
        lo, hi = self.view
        px = size / (hi - lo) * min(self.canvas_size)
        return px * 72.0 / self.dpi


def _marker(settings: RenderSettings) -> float:
    # scatter приймає площу в pt^2
    return (2.0 * settings.px_to_pt(settings.point_radius)) ** 2


def draw_frame(ax: Axes, point_set: PointSet, chain: Sequence[Pt], settings: RenderSettings) -> None:
    """
    Намалювати один стан обходу:
      - усі точки множини (білі кільця);
      - ребра й вершини ланцюга (зелені), крім кінця;
      - кінець ланцюга, центроїд і відрізок центроїд -> кінець (пурпурові).
    """
    ax.clear()
    ax.set_facecolor(settings.background)
    ax.set_xlim(*settings.view)
    ax.set_ylim(*settings.view)
    ax.set_aspect("equal")
    ax.set_axis_off()

    s = _marker(settings)
    lw = settings.px_to_pt(settings.line_width)
    ring = max(lw * 0.5, 0.5)

    xy = point_set.as_array()
    ax.scatter(xy[:, 0], xy[:, 1], s=s, facecolors="none",
               edgecolors=[settings.point_color], linewidths=ring, zorder=1)

    if not chain:
        return

    if len(chain) > 1:
        ax.plot([p.x for p in chain], [p.y for p in chain],
                color=settings.chain_color, linewidth=lw, solid_capstyle="butt", zorder=2)
        ax.scatter([p.x for p in chain[:-1]], [p.y for p in chain[:-1]], s=s,
                   facecolors="none", edgecolors=[settings.chain_color], linewidths=ring, zorder=3)

    tip = chain[-1]
    c = point_set.centroid
    ax.plot([c.x, tip.x], [c.y, tip.y], color=settings.active_color, linewidth=lw, zorder=2)
    ax.scatter([tip.x, c.x], [tip.y, c.y], s=s, facecolors="none",
               edgecolors=[settings.active_color], linewidths=ring, zorder=4)


def render_frame(
    point_set: PointSet,
    chain: Sequence[Pt],
    path: Union[str, Path],
    settings: RenderSettings = RenderSettings(),
) -> Path:
    """Відрендерити кадр в Agg і зберегти як PNG. Повертає шлях файлу."""
    w, h = settings.canvas_size
    fig = Figure(figsize=(w / settings.dpi, h / settings.dpi), dpi=settings.dpi)
    FigureCanvasAgg(fig)
    fig.patch.set_facecolor(settings.background)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    draw_frame(ax, point_set, chain, settings)

    out = Path(path)
    fig.savefig(out, dpi=settings.dpi, facecolor=settings.background, format="png")
    return out
