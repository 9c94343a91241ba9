"""Configuration objects and helpers for WaveLab.

Settings are described in a small YAML file (sample rate, sample count, and
the defaults applied to newly added components). The typed dataclass in
:mod:`runtime` is what sessions and tools consume.
"""

from .runtime import WaveLabConfig, config_from_mapping, load_config

__all__ = ["WaveLabConfig", "config_from_mapping", "load_config"]
