"""Plot bounds that keep the curves legible for any (L, normalized) state."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from particlebox.config import AXIS_MARGIN, DEFAULT_LENGTH, X_TICK_DIVISIONS


@dataclass(frozen=True)
class AxisBounds:
    x: Tuple[float, float]
    x_tick: float
    wave: Tuple[float, float]
    density: Tuple[float, float]


def axis_bounds(length: float, normalized: bool) -> AxisBounds:
    """Axis ranges for the chart.

    The peak of |psi| is sqrt(2/L) when normalized and 1 otherwise; both
    y-axes extend AXIS_MARGIN past that peak.
    """
    if length <= 0:
        length = DEFAULT_LENGTH
    peak_sq = 2.0 / length if normalized else 1.0
    wave_max = AXIS_MARGIN * float(np.sqrt(peak_sq))
    return AxisBounds(
        x=(0.0, float(length)),
        x_tick=float(length) / X_TICK_DIVISIONS,
        wave=(-wave_max, wave_max),
        density=(0.0, AXIS_MARGIN * peak_sq),
    )
