"""Core engine: plot data models, the derived-result cache, and sessions.

A :class:`SynthSession` sits between a presentation layer and the synthesis
and analysis helpers. It accepts parameter edits, keeps the cached
:class:`PlotData` coherent with them, and recomputes on demand.
"""

from .cache import Cache
from .models import PlotData, SpectrumBin, SpectrumMarker, WaveformSample
from .session import PARAMETERS, SynthSession

__all__ = [
    "Cache",
    "PlotData",
    "SpectrumBin",
    "SpectrumMarker",
    "WaveformSample",
    "PARAMETERS",
    "SynthSession",
]
