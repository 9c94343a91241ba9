"""Runtime configuration helpers for synthesis sessions."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from ..synth.components import wrap_phase

# Keys accepted inside the ``synth:`` block (or at the top level).
SYNTH_BLOCK = "synth"


def _finite_or(value: Any, fallback: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    if math.isnan(number) or math.isinf(number):
        return fallback
    return number


def _int_or(value: Any, fallback: Optional[int]) -> Optional[int]:
    if isinstance(value, bool):
        return fallback
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return fallback


@dataclass(slots=True)
class WaveLabConfig:
    """
    Initial settings for a :class:`~wavelab.core.session.SynthSession`.

    The defaults match a 3 kHz sample rate over 1000 samples, with new
    components starting at 100 Hz, unit amplitude, and zero phase.
    """

    sample_rate_hz: float = 3000.0
    n_samples: int = 1000

    default_frequency_hz: float = 100.0
    default_amplitude: float = 1.0
    default_phase: float = 0.0

    # Passed to scipy.fft; None uses a single worker
    fft_workers: Optional[int] = None

    def sanitized(self) -> WaveLabConfig:
        """Return a copy with unusable values replaced and the rest clamped."""
        defaults = WaveLabConfig()
        rate = _finite_or(self.sample_rate_hz, defaults.sample_rate_hz)
        if rate <= 0.0:
            rate = defaults.sample_rate_hz
        freq = _finite_or(self.default_frequency_hz, defaults.default_frequency_hz)
        if freq <= 0.0:
            freq = defaults.default_frequency_hz
        workers = _int_or(self.fft_workers, None)
        if workers is not None:
            workers = max(1, workers)
        return WaveLabConfig(
            sample_rate_hz=rate,
            n_samples=max(1, _int_or(self.n_samples, defaults.n_samples)),
            default_frequency_hz=freq,
            default_amplitude=max(0.0, _finite_or(self.default_amplitude, defaults.default_amplitude)),
            default_phase=wrap_phase(_finite_or(self.default_phase, defaults.default_phase)),
            fft_workers=workers,
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> WaveLabConfig:
        """
        Construct a sanitized config from a mapping such as a parsed YAML file.

        Supported shape::

            synth:
              sample_rate_hz: 3000
              n_samples: 1000
              default_frequency_hz: 100

        Keys outside the ``synth`` block are read too, with the block taking
        precedence. Unknown keys are ignored.
        """
        payload: Mapping[str, Any] = mapping or {}
        values: dict[str, Any] = {}
        block = payload.get(SYNTH_BLOCK)
        for source in (payload, block if isinstance(block, Mapping) else {}):
            for name in cls.__dataclass_fields__:
                if name in source:
                    values[name] = source[name]
        return cls(**values).sanitized()

    def to_mapping(self) -> dict:
        """Serialize back into a mapping suitable for YAML."""
        return {SYNTH_BLOCK: asdict(self)}


def config_from_mapping(data: Mapping[str, Any] | None) -> WaveLabConfig:
    """Build :class:`WaveLabConfig` from ``data`` (ignoring unknown keys)."""
    return WaveLabConfig.from_mapping(data)


def load_config(path: str | Path | None) -> WaveLabConfig:
    """
    Load configuration from ``path``.

    ``None`` or a missing file gives the default :class:`WaveLabConfig`.
    """
    if path is None:
        return WaveLabConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return WaveLabConfig()
    raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    if raw is None:
        return WaveLabConfig()
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return WaveLabConfig.from_mapping(raw)


__all__ = ["WaveLabConfig", "config_from_mapping", "load_config"]
