from __future__ import annotations
import logging
from typing import Dict, Optional, Tuple

from .complex import ProximityComplex
from .config import ROTATION_SENSITIVITY, THRESHOLD_STEP

logger = logging.getLogger(__name__)

INCREASE = "increase"
DECREASE = "decrease"

# назви клавіш tkinter (event.keysym)
KEY_COMMANDS: Dict[str, str] = {
    "Right": INCREASE,
    "Up": INCREASE,
    "Left": DECREASE,
    "Down": DECREASE,
}


class ThresholdController:
    """
    Крокова зміна порогу: current ± step, обрізане до [lower, upper].

    upper за замовчуванням — найбільша попарна відстань + step, щоб стан
    «все з'єднано» був досяжним (порівняння строге).
    """

    def __init__(
        self,
        cx: ProximityComplex,
        step: float = THRESHOLD_STEP,
        lower: float = 0.0,
        upper: Optional[float] = None,
    ):
        if not step > 0:
            raise ValueError(f"Step must be positive, got {step!r}")
        self.cx = cx
        self.step = step
        self.lower = lower
        self.upper = upper if upper is not None else cx.max_distance() + step
        if self.upper < self.lower:
            raise ValueError(f"Empty threshold range [{self.lower}, {self.upper}]")

    def clamp(self, value: float) -> float:
        return min(max(value, self.lower), self.upper)

    def _apply(self, value: float) -> float:
        value = self.clamp(value)
        if value != self.cx.current_threshold():
            self.cx.set_threshold(value)
            logger.info("threshold -> %.3f (%d edges, %d triangles)",
                        value, self.cx.edge_count(), self.cx.triangle_count())
        return value

    def increase(self) -> float:
        return self._apply(self.cx.current_threshold() + self.step)

    def decrease(self) -> float:
        return self._apply(self.cx.current_threshold() - self.step)

    def dispatch(self, command: str) -> float:
        if command == INCREASE:
            return self.increase()
        if command == DECREASE:
            return self.decrease()
        raise ValueError(f"Unknown command: {command}")

    def handle_key(self, key: str, editing: bool = False) -> Optional[float]:
        """
        Клавіша -> команда; None, якщо клавіша не прив'язана.
        editing=True — фокус у полі вводу, стрілки належать йому.
        """
        if editing:
            return None
        command = KEY_COMMANDS.get(key)
        if command is None:
            return None
        return self.dispatch(command)


class RotationState:
    """
    Кути повороту під drag лівою кнопкою миші.

    press запам'ятовує (a, b, x, y); move, поки кнопка натиснута,
    ставить кути saved + (dx, dy) * sensitivity; release забуває якір.
    """

    def __init__(self, sensitivity: float = ROTATION_SENSITIVITY):
        self.sensitivity = sensitivity
        self.angles: Tuple[float, float] = (0.0, 0.0)
        self._anchor: Optional[Tuple[float, float, float, float]] = None

    @property
    def dragging(self) -> bool:
        return self._anchor is not None

    def press(self, x: float, y: float) -> None:
        a, b = self.angles
        self._anchor = (a, b, x, y)

    def release(self) -> None:
        self._anchor = None

    def move(self, x: float, y: float) -> Tuple[float, float]:
        if self._anchor is not None:
            a0, b0, x0, y0 = self._anchor
            self.angles = (a0 + (x - x0) * self.sensitivity,
                           b0 + (y - y0) * self.sensitivity)
        return self.angles
