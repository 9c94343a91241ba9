"""Waveform generators and the additive synthesizer.

Everything here is plain NumPy so it can be driven from tests, scripts, or
any presentation layer without pulling in GUI dependencies.
"""

from .components import Component, WaveformKind
from .composite import ComponentEntry, enabled_components, synthesize

__all__ = [
    "Component",
    "WaveformKind",
    "ComponentEntry",
    "enabled_components",
    "synthesize",
]
