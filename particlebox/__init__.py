"""Particle-in-a-box wave pattern visualizer."""

from particlebox.axes import AxisBounds, axis_bounds
from particlebox.inputs import LengthInput, clamp_level, parse_length
from particlebox.sampler import BoxSample, build_grid, evaluate_density, evaluate_wave, sample_box

__all__ = [
    "AxisBounds",
    "BoxSample",
    "LengthInput",
    "axis_bounds",
    "build_grid",
    "clamp_level",
    "evaluate_density",
    "evaluate_wave",
    "parse_length",
    "sample_box",
]

__version__ = "0.1.0"
