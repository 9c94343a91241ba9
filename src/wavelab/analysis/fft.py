"""FFT helpers."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from ..errors import InvalidParameterError
from .fft_plan import FftPlanner, shared_planner

# Bins at or above sample_rate / FMAX_SCALE are dropped from the spectrum.
FMAX_SCALE = 2.56


def spectrum_cutoff_hz(sample_rate: float) -> float:
    """Return the highest (exclusive) frequency kept in a spectrum."""
    return float(sample_rate) / FMAX_SCALE


def analyze(
    waveform: ArrayLike,
    sample_rate: float,
    n: int,
    *,
    planner: Optional[FftPlanner] = None,
) -> np.ndarray:
    """
    Compute the band-limited magnitude spectrum of a real waveform.

    Parameters
    ----------
    waveform:
        1-D array-like of real amplitudes, at least ``n`` long. Only the
        first ``n`` samples are transformed.
    sample_rate:
        Sampling rate in Hz. Must be > 0.
    n:
        Transform length. Must be > 0.
    planner:
        Planner supplying the FFT plan. Defaults to :func:`shared_planner`.

    Returns
    -------
    np.ndarray
        ``(m, 2)`` float64 array of ``(frequency_hz, magnitude)`` rows in
        increasing frequency, starting at DC. Magnitudes are ``|X[i]| / n``.
        Rows stop before the first bin whose frequency reaches
        ``sample_rate / FMAX_SCALE``; ``m`` may be 0.
    """
    if not (sample_rate > 0) or not math.isfinite(sample_rate):
        raise InvalidParameterError("sample_rate", sample_rate, "a finite value > 0")
    if n <= 0:
        raise InvalidParameterError("n", n, "> 0")

    samples = np.asarray(waveform, dtype=np.float64)
    if samples.ndim != 1:
        raise ValueError(f"waveform must be 1-D, got shape {samples.shape}")
    if samples.size < n:
        raise ValueError(f"waveform has {samples.size} samples, need at least {n}")

    if planner is None:
        planner = shared_planner()
    plan = planner.plan_fft_forward(n)
    buffer = samples[:n].astype(np.complex128)
    spectrum = plan.process(buffer)

    resolution = float(sample_rate) / n
    freqs = plan.bin_index * resolution
    magnitude = np.abs(spectrum) / n

    # Frequencies increase with bin index, so the kept bins form a prefix.
    count = int(np.searchsorted(freqs, spectrum_cutoff_hz(sample_rate), side="left"))
    return np.column_stack((freqs[:count], magnitude[:count]))
