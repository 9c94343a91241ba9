from __future__ import annotations

import itertools

import numpy as np
import pytest

from wavelab.errors import InvalidParameterError
from wavelab.synth import Component, ComponentEntry, WaveformKind, enabled_components, synthesize


def _mixed_components() -> list[Component]:
    return [
        Component(WaveformKind.SINE, frequency=110.0, amplitude=1.5, phase=0.1),
        Component(WaveformKind.SQUARE, frequency=37.0, amplitude=0.7, phase=0.3),
        Component(WaveformKind.SAWTOOTH, frequency=251.0, amplitude=2.2, phase=0.9),
    ]


def test_synthesize_returns_exactly_n_samples_with_exact_times() -> None:
    for n, rate in [(1, 10.0), (7, 44100.0), (1000, 3000.0)]:
        wave = synthesize(_mixed_components(), rate, n)
        assert wave.shape == (n, 2)
        expected_t = np.array([i / rate for i in range(n)])
        np.testing.assert_array_equal(wave[:, 0], expected_t)


def test_empty_component_set_is_silent() -> None:
    wave = synthesize([], 1000.0, 100)
    assert wave.shape == (100, 2)
    np.testing.assert_array_equal(wave[:, 1], np.zeros(100))


def test_disabled_entries_match_absent_components() -> None:
    comps = _mixed_components()
    entries = [
        ComponentEntry(0, comps[0], "a"),
        ComponentEntry(1, comps[1], "b", enabled=False),
        ComponentEntry(2, comps[2], "c"),
    ]
    with_disabled = synthesize(enabled_components(entries), 2000.0, 256)
    without = synthesize([comps[0], comps[2]], 2000.0, 256)
    np.testing.assert_array_equal(with_disabled, without)


def test_summation_order_does_not_matter() -> None:
    comps = _mixed_components()
    reference = synthesize(comps, 1500.0, 500)[:, 1]
    for perm in itertools.permutations(comps):
        out = synthesize(list(perm), 1500.0, 500)[:, 1]
        np.testing.assert_allclose(out, reference, rtol=0.0, atol=1e-9)


def test_square_scenario_flips_at_half_period() -> None:
    comp = Component(WaveformKind.SQUARE, frequency=50.0, amplitude=2.0, phase=0.0)
    wave = synthesize([comp], 1000.0, 20)
    expected = np.array([2.0] * 10 + [-2.0] * 10)
    np.testing.assert_array_equal(wave[:, 1], expected)


def test_sine_scenario_starts_at_zero() -> None:
    comp = Component(WaveformKind.SINE, frequency=100.0, amplitude=1.0, phase=0.0)
    wave = synthesize([comp], 3000.0, 1000)
    assert wave[0, 1] == 0.0


@pytest.mark.parametrize("rate, n", [(0.0, 10), (-5.0, 10), (1000.0, 0), (1000.0, -1)])
def test_synthesize_rejects_invalid_settings(rate: float, n: int) -> None:
    with pytest.raises(InvalidParameterError):
        synthesize([], rate, n)
