"""Spectral analysis helpers (forward FFT planning and magnitude spectra).

Modules here operate on NumPy arrays and stay free of GUI and I/O
dependencies so they can be reused by sessions, scripts, and tests alike.
"""

from .fft import FMAX_SCALE, analyze, spectrum_cutoff_hz
from .fft_plan import FftPlan, FftPlanner, shared_planner

__all__ = [
    "FMAX_SCALE",
    "analyze",
    "spectrum_cutoff_hz",
    "FftPlan",
    "FftPlanner",
    "shared_planner",
]
