"""Additive synthesis of a component set into a sampled waveform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from ..errors import InvalidParameterError
from .components import Component


@dataclass(frozen=True, slots=True)
class ComponentEntry:
    """A component as held by a session: identity, display label, and state."""

    id: int
    component: Component
    label: str
    enabled: bool = True


def enabled_components(entries: Iterable[ComponentEntry]) -> List[Component]:
    """Return the components of enabled entries, preserving list order."""
    return [entry.component for entry in entries if entry.enabled]


def synthesize(
    components: Sequence[Component],
    sample_rate: float,
    n: int,
) -> np.ndarray:
    """
    Sum ``components`` at ``n`` instants spaced ``1 / sample_rate`` apart.

    Parameters
    ----------
    components:
        Components to sum, in summation order. Filter out disabled entries
        beforehand (see :func:`enabled_components`).
    sample_rate:
        Sampling rate in Hz. Must be > 0.
    n:
        Number of samples. Must be > 0.

    Returns
    -------
    np.ndarray
        ``(n, 2)`` float64 array of ``(time_s, amplitude)`` rows. An empty
        component list yields an all-zero amplitude column.
    """
    if sample_rate <= 0:
        raise InvalidParameterError("sample_rate", sample_rate, "> 0")
    if n <= 0:
        raise InvalidParameterError("n", n, "> 0")

    t = np.arange(n, dtype=np.float64) / float(sample_rate)
    total = np.zeros(n, dtype=np.float64)
    for component in components:
        total += component.sample(t)
    return np.column_stack((t, total))
