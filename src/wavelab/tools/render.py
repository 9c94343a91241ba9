#!/usr/bin/env python3
"""
Headless driver for a :class:`~wavelab.core.session.SynthSession`.

Builds a session from a YAML config plus ``--component`` arguments, computes
its plot data once, prints a short summary, and optionally writes the
waveform and spectrum to CSV::

    wavelab-render --component sine:100 --component square:250:0.5 \
        --sample-rate 3000 --samples 1000 --spectrum-csv out/spectrum.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..config import load_config
from ..core.session import SynthSession
from ..dataio.csv_writer import write_plot_data
from ..errors import WaveLabError
from ..synth import WaveformKind

logger = logging.getLogger(__name__)


def parse_component_spec(text: str) -> tuple[WaveformKind, Optional[float], Optional[float], Optional[float]]:
    """
    Parse ``KIND[:FREQ[:AMP[:PHASE]]]``.

    Omitted fields are returned as None so session defaults apply.
    """
    parts = text.split(":")
    if not parts[0] or len(parts) > 4:
        raise argparse.ArgumentTypeError(f"invalid component spec {text!r}")
    try:
        kind = WaveformKind.parse(parts[0])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc

    values: list[Optional[float]] = []
    for field_name, raw in zip(("frequency", "amplitude", "phase"), parts[1:]):
        if raw == "":
            values.append(None)
            continue
        try:
            values.append(float(raw))
        except ValueError:
            raise argparse.ArgumentTypeError(
                f"invalid {field_name} {raw!r} in component spec {text!r}"
            ) from None
    values.extend([None] * (3 - len(values)))
    return kind, values[0], values[1], values[2]


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Synthesize a composite waveform and its spectrum")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument(
        "--component",
        action="append",
        type=parse_component_spec,
        default=[],
        metavar="KIND[:FREQ[:AMP[:PHASE]]]",
        help="Add a component (sine, square, sawtooth). May be repeated.",
    )
    parser.add_argument("--sample-rate", type=float, default=None, help="Sample rate in Hz")
    parser.add_argument("--samples", type=int, default=None, help="Number of samples")
    parser.add_argument("--waveform-csv", type=Path, default=None)
    parser.add_argument("--spectrum-csv", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def build_session(args: argparse.Namespace) -> SynthSession:
    session = SynthSession(load_config(args.config))
    if args.sample_rate is not None:
        session.set_sample_rate(args.sample_rate)
    if args.samples is not None:
        session.set_sample_count(args.samples)
    for kind, frequency, amplitude, phase in args.component:
        session.add_component(kind, frequency, amplitude, phase)
    return session


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(name)s %(levelname)s: %(message)s")

    try:
        session = build_session(args)
        data = session.get_plot_data()
    except WaveLabError as exc:
        logger.error("%s", exc)
        return 2

    peak = data.peak_bin()
    print(f"samples: {data.waveform.shape[0]} @ {session.sample_rate:g} Hz")
    print(f"components: {len(session)}")
    print(f"spectrum bins: {data.spectrum.shape[0]}")
    if peak is not None:
        print(f"peak: {peak.magnitude:.6g} at {peak.frequency:.6g} Hz")

    write_plot_data(data, waveform_path=args.waveform_csv, spectrum_path=args.spectrum_csv)
    for path in (args.waveform_csv, args.spectrum_csv):
        if path is not None:
            logger.info("Wrote %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
