"""WaveLab: additive waveform synthesis and spectrum analysis engine.

The engine composes a signal from named periodic components, samples it at a
chosen rate, and derives a band-limited magnitude spectrum. Results are cached
per session until any contributing parameter changes.
"""

from .core import PlotData, SynthSession
from .synth import Component, WaveformKind

__all__ = ["Component", "PlotData", "SynthSession", "WaveformKind"]
