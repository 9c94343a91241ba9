from __future__ import annotations

import numpy as np
import pytest

from wavelab.core import PlotData, SpectrumBin, WaveformSample


def test_plot_data_is_read_only() -> None:
    source = np.array([[0.0, 1.0], [0.1, 2.0]])
    data = PlotData(waveform=source, spectrum=np.array([[0.0, 0.5]]))
    source[0, 1] = 99.0
    assert data.amplitudes[0] == 1.0
    with pytest.raises(ValueError):
        data.waveform[0, 1] = 5.0


def test_plot_data_conversions() -> None:
    data = PlotData(
        waveform=np.array([[0.0, 1.0], [0.5, -1.0]]),
        spectrum=np.array([[0.0, 0.1], [2.0, 0.7], [4.0, 0.2]]),
    )
    assert data.waveform_samples() == [WaveformSample(0.0, 1.0), WaveformSample(0.5, -1.0)]
    assert data.spectrum_bins()[1] == SpectrumBin(2.0, 0.7)
    assert data.peak_bin() == SpectrumBin(2.0, 0.7)
    np.testing.assert_array_equal(data.times, [0.0, 0.5])
    np.testing.assert_array_equal(data.frequencies, [0.0, 2.0, 4.0])


def test_empty_plot_data() -> None:
    data = PlotData.empty()
    assert data.waveform.shape == (0, 2)
    assert data.peak_bin() is None
    assert data.same_as(PlotData.empty())
