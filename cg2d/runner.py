from __future__ import annotations
import logging
import shutil
import time
from pathlib import Path
from typing import List, Optional, Union

from .hull import IncrementalHull2D, StepResult
from .render import RenderSettings, render_frame

_logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 0.1  # секунд між кроками обходу
DEFAULT_OUT_DIR = "out"


class RealTimeClock:
    """Час у секундах від створення (perf_counter)."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def t(self) -> float:
        return time.perf_counter() - self._start

    def tick(self) -> None:
        return


class FixedStepClock:
    """
    Детермінований годинник: t = frame_index * dt.
    Для headless-прогонів і тестів: кожен tick() просуває час на dt.
    """

    def __init__(self, dt: float = DEFAULT_INTERVAL) -> None:
        if dt <= 0:
            raise ValueError("dt must be positive")
        self.dt = float(dt)
        self.frame_index = 0

    def t(self) -> float:
        return self.frame_index * self.dt

    def tick(self) -> None:
        self.frame_index += 1


class SnapshotRunner:
    """
    Крокує IncrementalHull2D з фіксованим інтервалом і зберігає
    out_dir/{k}.png щоразу, коли змінився лічильник продуктивних кроків.
    """

    def __init__(
        self,
        hull: IncrementalHull2D,
        out_dir: Union[str, Path] = DEFAULT_OUT_DIR,
        interval: float = DEFAULT_INTERVAL,
        settings: RenderSettings = RenderSettings(),
        clock=None,
    ):
        self.hull = hull
        self.out_dir = Path(out_dir)
        self.interval = interval
        self.settings = settings
        self.clock = clock if clock is not None else RealTimeClock()
        self.saved: List[Path] = []
        self._prev_time = -interval  # перший tick одразу робить крок
        self._k_saved = 0

    def prepare_output_dir(self) -> None:
        """Видалити й створити заново каталог знімків."""
        if self.out_dir.exists():
            shutil.rmtree(self.out_dir)
        self.out_dir.mkdir(parents=True)
        _logger.info("output directory reset: %s", self.out_dir)

    def tick(self) -> StepResult:
        """
        Один кадр: якщо минув interval, робимо step(); якщо лічильник змінився, зберігаємо знімок.
        Повертає DONE після замикання, інакше PROGRESSED.
        """
        now = self.clock.t()
        result = StepResult.DONE if self.hull.is_done else StepResult.PROGRESSED
        if now - self.interval >= self._prev_time:
            result = self.hull.step()
            self._prev_time = now

        k = self.hull.step_count
        if k != self._k_saved:
            path = render_frame(self.hull.P, self.hull.chain, self.out_dir / f"{k}.png", self.settings)
            self.saved.append(path)
            _logger.info("%s", path)
            self._k_saved = k
        self.clock.tick()
        return result

    def run(self, max_ticks: Optional[int] = None) -> List[Path]:
        """Готує каталог і тікає до DONE (або max_ticks). Повертає збережені файли."""
        self.prepare_output_dir()
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            if self.tick() is StepResult.DONE:
                break
            ticks += 1
            if isinstance(self.clock, RealTimeClock):
                time.sleep(min(self.interval, 0.01))
        return self.saved
