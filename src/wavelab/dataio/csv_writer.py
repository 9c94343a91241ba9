"""CSV writing helpers for synthesized plot data."""

import csv
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from ..core.models import PlotData

WAVEFORM_HEADERS = ("time_s", "amplitude")
SPECTRUM_HEADERS = ("frequency_hz", "magnitude")


def write_rows(path: Path, headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
    """
    Write a header row and all data rows to a CSV file.

    Directories are created as needed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(headers)
        writer.writerows(rows)


def write_plot_data(
    data: PlotData,
    *,
    waveform_path: Optional[Path] = None,
    spectrum_path: Optional[Path] = None,
) -> None:
    """Write the waveform and/or spectrum of ``data`` to the given CSV paths."""
    if waveform_path is not None:
        write_rows(Path(waveform_path), WAVEFORM_HEADERS, data.waveform.tolist())
    if spectrum_path is not None:
        write_rows(Path(spectrum_path), SPECTRUM_HEADERS, data.spectrum.tolist())
