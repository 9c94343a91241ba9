"""Shared dataclasses for synthesized plot data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple

import numpy as np


class WaveformSample(NamedTuple):
    time: float
    amplitude: float


class SpectrumBin(NamedTuple):
    frequency: float
    magnitude: float


@dataclass(frozen=True, slots=True)
class SpectrumMarker:
    """Vertical marker drawn on the spectrum at a component's frequency."""

    label: str
    frequency: float


def _frozen_rows(data: np.ndarray) -> np.ndarray:
    arr = np.array(data, dtype=np.float64, copy=True).reshape(-1, 2)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, slots=True)
class PlotData:
    """
    Time-domain trace and magnitude spectrum derived from one parameter set.

    ``waveform`` holds ``(time_s, amplitude)`` rows and ``spectrum`` holds
    ``(frequency_hz, magnitude)`` rows. Both arrays are read-only so a cached
    instance cannot drift from what a recomputation would produce.
    """

    waveform: np.ndarray
    spectrum: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "waveform", _frozen_rows(self.waveform))
        object.__setattr__(self, "spectrum", _frozen_rows(self.spectrum))

    @classmethod
    def empty(cls) -> "PlotData":
        return cls(np.empty((0, 2)), np.empty((0, 2)))

    @property
    def times(self) -> np.ndarray:
        return self.waveform[:, 0]

    @property
    def amplitudes(self) -> np.ndarray:
        return self.waveform[:, 1]

    @property
    def frequencies(self) -> np.ndarray:
        return self.spectrum[:, 0]

    @property
    def magnitudes(self) -> np.ndarray:
        return self.spectrum[:, 1]

    def waveform_samples(self) -> List[WaveformSample]:
        return [WaveformSample(float(t), float(a)) for t, a in self.waveform]

    def spectrum_bins(self) -> List[SpectrumBin]:
        return [SpectrumBin(float(f), float(m)) for f, m in self.spectrum]

    def peak_bin(self) -> SpectrumBin | None:
        """Return the bin with the largest magnitude, or None for an empty spectrum."""
        if self.spectrum.shape[0] == 0:
            return None
        idx = int(np.argmax(self.magnitudes))
        return SpectrumBin(float(self.spectrum[idx, 0]), float(self.spectrum[idx, 1]))

    def same_as(self, other: "PlotData") -> bool:
        """Exact element-wise equality of both arrays."""
        return np.array_equal(self.waveform, other.waveform) and np.array_equal(
            self.spectrum, other.spectrum
        )
