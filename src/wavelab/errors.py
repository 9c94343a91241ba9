"""Exception types raised by the WaveLab engine."""

from __future__ import annotations


class WaveLabError(Exception):
    """Base class for engine errors."""


class InvalidParameterError(WaveLabError, ValueError):
    """A sample rate, sample count, or component parameter is out of range."""

    def __init__(self, name: str, value: object, requirement: str) -> None:
        self.name = name
        self.value = value
        self.requirement = requirement
        super().__init__(f"{name} must be {requirement}, got {value!r}")


class UnknownComponentError(WaveLabError, KeyError):
    """No component with the given id exists in the session."""

    def __init__(self, component_id: int) -> None:
        self.component_id = component_id
        super().__init__(component_id)

    def __str__(self) -> str:
        return f"no component with id {self.component_id}"


__all__ = ["WaveLabError", "InvalidParameterError", "UnknownComponentError"]
