"""Periodic waveform generators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import ArrayLike

TWO_PI = 2.0 * np.pi

SampleValue = Union[float, np.ndarray]


def wrap_phase(value: float) -> float:
    """Wrap a fractional phase into [0, 1).

    ``x % 1.0`` rounds up to exactly 1.0 for tiny negative inputs, which is
    folded back to 0.0.
    """
    wrapped = float(value) % 1.0
    if wrapped >= 1.0:
        return 0.0
    return wrapped


class WaveformKind(str, enum.Enum):
    """Closed set of supported generator shapes."""

    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"

    @property
    def label(self) -> str:
        """Human readable name (used as the default component label)."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: "WaveformKind | str") -> "WaveformKind":
        """Accept an enum member or a case-insensitive name such as ``"Sine"``."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"unknown waveform kind {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True, slots=True)
class Component:
    """
    A single periodic generator.

    Parameters
    ----------
    kind:
        Waveform shape.
    frequency:
        Frequency in Hz. Expected to be > 0; callers validate upstream.
    amplitude:
        Peak amplitude (>= 0).
    phase:
        Fractional offset into one period, ``0`` meaning no shift.
        Values outside ``[0, 1)`` wrap.
    """

    kind: WaveformKind
    frequency: float = 100.0
    amplitude: float = 1.0
    phase: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", WaveformKind.parse(self.kind))

    def cycles(self, t: ArrayLike) -> SampleValue:
        """Return ``frequency * t + phase``, the position measured in periods."""
        return self.frequency * np.asarray(t, dtype=np.float64) + self.phase

    def sample(self, t: ArrayLike) -> SampleValue:
        """
        Evaluate the generator at time ``t`` (seconds).

        ``t`` may be a scalar or an array; the result has the same shape.
        """
        x = self.cycles(t)
        if self.kind is WaveformKind.SINE:
            out = self.amplitude * np.sin(TWO_PI * x)
        elif self.kind is WaveformKind.SQUARE:
            # +A over the first half of each period, -A over the second.
            frac = x - np.floor(x)
            out = np.where(frac < 0.5, self.amplitude, -self.amplitude)
        elif self.kind is WaveformKind.SAWTOOTH:
            frac = x - np.floor(x)
            out = self.amplitude * (2.0 * frac - 1.0)
        else:  # pragma: no cover - closed enum
            raise ValueError(f"unsupported waveform kind: {self.kind!r}")
        if np.ndim(out) == 0:
            return float(out)
        return out

    def period(self) -> float:
        """Duration of one period in seconds."""
        return 1.0 / self.frequency
