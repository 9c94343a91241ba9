from __future__ import annotations

import argparse
import csv
from pathlib import Path

import pytest

from wavelab.synth import WaveformKind
from wavelab.tools.render import main, parse_component_spec


def test_parse_component_spec() -> None:
    assert parse_component_spec("sine") == (WaveformKind.SINE, None, None, None)
    assert parse_component_spec("Square:250:0.5") == (WaveformKind.SQUARE, 250.0, 0.5, None)
    assert parse_component_spec("sawtooth::2:0.25") == (WaveformKind.SAWTOOTH, None, 2.0, 0.25)
    for bad in ("", "noise:10", "sine:abc", "sine:1:2:3:4"):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_component_spec(bad)


def test_main_writes_csv_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    wave_csv = tmp_path / "out" / "waveform.csv"
    spec_csv = tmp_path / "out" / "spectrum.csv"
    code = main(
        [
            "--component",
            "sine:100",
            "--sample-rate",
            "1000",
            "--samples",
            "100",
            "--waveform-csv",
            str(wave_csv),
            "--spectrum-csv",
            str(spec_csv),
        ]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "spectrum bins: 40" in out
    assert "peak:" in out

    with wave_csv.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == ["time_s", "amplitude"]
    assert len(rows) == 101

    with spec_csv.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == ["frequency_hz", "magnitude"]
    assert len(rows) == 41


def test_main_reports_invalid_settings(tmp_path: Path) -> None:
    assert main(["--sample-rate", "0"]) == 2
    assert main(["--component", "sine:-5"]) == 2
