"""
sampler.py - Particle-in-a-box wave function sampled on a uniform grid.
=======================================================================

    psi_n(x) = A * sin(n * pi * x / L),   0 <= x <= L
    |psi_n(x)|^2 = psi_n(x)^2

    A = sqrt(2 / L) when normalized (so that |psi|^2 integrates to 1 over
    the box), otherwise A = 1.  Outside the box psi is identically zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

from particlebox.config import NUM_POINTS

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]


# ---------------------------------------------------------------------------
# Pointwise functions
# ---------------------------------------------------------------------------

def amplitude(length: float, normalized: bool) -> float:
    """Normalization factor A: sqrt(2/L) when normalized, else 1."""
    return float(np.sqrt(2.0 / length)) if normalized else 1.0


def evaluate_wave(x: ArrayLike, n: int, length: float, normalized: bool = False) -> ArrayLike:
    """Return psi_n(x) for a box of width *length*.

    Parameters
    ----------
    x : float or np.ndarray
        Position(s).  Values outside ``[0, length]`` give 0.
    n : int
        Quantum number (number of half-wavelengths in the box).
    length : float
        Box width.  A non-positive width gives 0 everywhere.
    normalized : bool
        Scale by ``sqrt(2 / length)``.

    Returns
    -------
    float or np.ndarray
        A Python float for scalar *x*, otherwise an array shaped like *x*.
    """
    x_arr = np.asarray(x, dtype=float)
    if length <= 0:
        psi = np.zeros_like(x_arr)
    else:
        inside = (x_arr >= 0.0) & (x_arr <= length)
        psi = np.where(
            inside,
            amplitude(length, normalized) * np.sin(n * np.pi * x_arr / length),
            0.0,
        )
    if psi.ndim == 0:
        return float(psi)
    return psi


def evaluate_density(wave_value: ArrayLike) -> ArrayLike:
    """|psi|^2 for a real wave value (scalar or array)."""
    if np.ndim(wave_value) == 0:
        return float(wave_value) * float(wave_value)
    psi = np.asarray(wave_value, dtype=float)
    return psi * psi


def build_grid(length: float, count: int = NUM_POINTS) -> np.ndarray:
    """``count + 1`` evenly spaced positions from 0 to *length*, both ends included."""
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    return np.linspace(0.0, length, int(count) + 1)


# ---------------------------------------------------------------------------
# Whole-box sample
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BoxSample:
    """Grid, wave series and density series for one (n, L, normalized) state."""

    n: int
    length: float
    normalized: bool
    x: np.ndarray
    psi: np.ndarray
    density: np.ndarray

    @property
    def amplitude(self) -> float:
        return amplitude(self.length, self.normalized)

    @property
    def nodes(self) -> np.ndarray:
        """Interior zero crossings k*L/n, k = 1..n-1."""
        return np.arange(1, self.n) * self.length / self.n


def sample_box(n: int, length: float, normalized: bool = False,
               count: int = NUM_POINTS) -> BoxSample:
    """Evaluate psi and |psi|^2 on the box grid in a single pass."""
    if n < 1:
        raise ValueError(f"quantum number must be >= 1, got {n}")
    x = build_grid(length, count)
    psi = evaluate_wave(x, n, length, normalized)
    density = evaluate_density(psi)
    for arr in (x, psi, density):
        arr.setflags(write=False)
    logger.debug("sampled n=%d L=%.4g normalized=%s on %d points", n, length, normalized, x.size)
    return BoxSample(n=int(n), length=float(length), normalized=bool(normalized),
                     x=x, psi=psi, density=density)
