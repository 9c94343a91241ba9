"""Synthesis session: component set, global settings, and cached plot data."""

from __future__ import annotations

import dataclasses
import logging
import math
import numbers
from typing import Dict, List, Literal, Optional

from ..analysis.fft import FMAX_SCALE, analyze
from ..analysis.fft_plan import FftPlanner, shared_planner
from ..config import WaveLabConfig
from ..errors import InvalidParameterError, UnknownComponentError
from ..synth import Component, ComponentEntry, WaveformKind, enabled_components, synthesize
from ..synth.components import wrap_phase
from ..tools.debug import time_block
from .cache import Cache
from .models import PlotData, SpectrumMarker

logger = logging.getLogger(__name__)

ParameterName = Literal["frequency", "amplitude", "phase"]
PARAMETERS = ("frequency", "amplitude", "phase")


def _check_frequency(value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError("frequency", value, "a finite value > 0")
    return value


def _check_amplitude(value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise InvalidParameterError("amplitude", value, "a finite value >= 0")
    return value


def _check_phase(value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError("phase", value, "finite")
    return wrap_phase(value)


_CHECKS = {
    "frequency": _check_frequency,
    "amplitude": _check_amplitude,
    "phase": _check_phase,
}


class SynthSession:
    """
    Owns one component set and the plot data derived from it.

    All edits go through the mutation methods below, each of which validates
    its input, invalidates the cached :class:`PlotData`, and only then applies
    the change. Rejected values leave both state and cache untouched.

    A session is meant to be driven from a single thread (the render loop).
    Only the FFT planner may be shared between sessions.
    """

    def __init__(
        self,
        config: WaveLabConfig | None = None,
        *,
        planner: FftPlanner | None = None,
    ) -> None:
        self._config = (config or WaveLabConfig()).sanitized()
        if planner is None:
            if self._config.fft_workers is None:
                planner = shared_planner()
            else:
                planner = FftPlanner(workers=self._config.fft_workers)
        self._planner = planner
        self._sample_rate = self._config.sample_rate_hz
        self._n_samples = self._config.n_samples
        self._entries: List[ComponentEntry] = []
        self._next_id = 0
        self._cache: Cache[PlotData] = Cache()

    # ------------------------------------------------------------ properties
    @property
    def config(self) -> WaveLabConfig:
        return self._config

    @property
    def planner(self) -> FftPlanner:
        return self._planner

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def n_samples(self) -> int:
        return self._n_samples

    @property
    def is_valid(self) -> bool:
        """True while cached plot data matches the current parameters."""
        return self._cache.is_valid

    @property
    def computations(self) -> int:
        """Number of times plot data has been recomputed."""
        return self._cache.computations

    def __len__(self) -> int:
        return len(self._entries)

    # --------------------------------------------------------------- queries
    def components(self) -> List[ComponentEntry]:
        """Snapshot of all entries in display order."""
        return list(self._entries)

    def component(self, component_id: int) -> ComponentEntry:
        return self._entries[self._index_of(component_id)]

    def spectrum_markers(self) -> List[SpectrumMarker]:
        """One marker per component at its nominal frequency."""
        return [SpectrumMarker(e.label, e.component.frequency) for e in self._entries]

    def above_cutoff(self, *, enabled_only: bool = False) -> List[int]:
        """
        Ids of components whose frequency lies above the displayed spectrum.

        Disabled entries are included unless ``enabled_only`` is set.
        """
        return [
            e.id
            for e in self._entries
            if (e.enabled or not enabled_only)
            and e.component.frequency * FMAX_SCALE > self._sample_rate
        ]

    # ------------------------------------------------------------- mutations
    def invalidate(self) -> None:
        if self._cache.is_valid:
            logger.debug("Plot data invalidated")
        self._cache.invalidate()

    def add_component(
        self,
        kind: WaveformKind | str,
        frequency: float | None = None,
        amplitude: float | None = None,
        phase: float | None = None,
        *,
        label: str | None = None,
    ) -> int:
        """Append a new enabled component and return its id."""
        wave_kind = WaveformKind.parse(kind)
        cfg = self._config
        component = Component(
            kind=wave_kind,
            frequency=_check_frequency(cfg.default_frequency_hz if frequency is None else frequency),
            amplitude=_check_amplitude(cfg.default_amplitude if amplitude is None else amplitude),
            phase=_check_phase(cfg.default_phase if phase is None else phase),
        )
        component_id = self._next_id
        self._next_id += 1
        self.invalidate()
        self._entries.append(
            ComponentEntry(
                id=component_id,
                component=component,
                label=wave_kind.label if label is None else str(label),
            )
        )
        logger.debug("Added %s component id=%d", wave_kind.value, component_id)
        return component_id

    def remove_component(self, component_id: int) -> None:
        index = self._index_of(component_id)
        self.invalidate()
        del self._entries[index]
        logger.debug("Removed component id=%d", component_id)

    def set_enabled(self, component_id: int, enabled: bool) -> None:
        """Include or exclude a component from synthesis without removing it."""
        index = self._index_of(component_id)
        entry = self._entries[index]
        if entry.enabled == bool(enabled):
            return
        self.invalidate()
        self._entries[index] = dataclasses.replace(entry, enabled=bool(enabled))

    def purge_disabled(self) -> int:
        """Remove every disabled entry; return how many were removed."""
        removed = 0
        while True:
            index = next((i for i, e in enumerate(self._entries) if not e.enabled), None)
            if index is None:
                return removed
            self.invalidate()
            del self._entries[index]
            removed += 1

    def set_parameter(self, component_id: int, name: ParameterName, value: float) -> None:
        """Set ``frequency``, ``amplitude``, or ``phase`` on one component."""
        check = _CHECKS.get(name)
        if check is None:
            raise InvalidParameterError("parameter name", name, f"one of {PARAMETERS}")
        index = self._index_of(component_id)
        checked = check(value)
        entry = self._entries[index]
        self.invalidate()
        self._entries[index] = dataclasses.replace(
            entry, component=dataclasses.replace(entry.component, **{name: checked})
        )

    def set_label(self, component_id: int, label: str) -> None:
        """Rename a component. Labels only affect markers, not plot data."""
        index = self._index_of(component_id)
        self._entries[index] = dataclasses.replace(self._entries[index], label=str(label))

    def set_sample_rate(self, value: float) -> None:
        rate = float(value)
        if not math.isfinite(rate) or rate <= 0.0:
            raise InvalidParameterError("sample_rate", value, "a finite value > 0")
        self.invalidate()
        self._sample_rate = rate

    def set_sample_count(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
            raise InvalidParameterError("sample_count", value, "a positive integer")
        self.invalidate()
        self._n_samples = int(value)

    # ---------------------------------------------------------------- output
    def get_plot_data(self) -> PlotData:
        """Return cached plot data, recomputing it if a parameter changed."""
        return self._cache.get_or_compute(self._compute)

    def _compute(self) -> PlotData:
        rate = self._sample_rate
        n = self._n_samples
        components = enabled_components(self._entries)
        with time_block(f"plot data (n={n}, components={len(components)})"):
            waveform = synthesize(components, rate, n)
            spectrum = analyze(waveform[:, 1], rate, n, planner=self._planner)
        logger.debug(
            "Recomputed plot data: %d samples, %d bins, %d components",
            n,
            spectrum.shape[0],
            len(components),
        )
        for component_id in self.above_cutoff(enabled_only=True):
            logger.warning(
                "Component id=%d is above the spectrum cutoff (%.3f Hz)",
                component_id,
                rate / FMAX_SCALE,
            )
        return PlotData(waveform=waveform, spectrum=spectrum)

    # --------------------------------------------------------------- helpers
    def _index_of(self, component_id: int) -> int:
        for i, entry in enumerate(self._entries):
            if entry.id == component_id:
                return i
        raise UnknownComponentError(component_id)


__all__ = ["SynthSession", "PARAMETERS"]
