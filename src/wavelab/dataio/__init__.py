"""Export helpers for plot data produced by a session."""

from .csv_writer import write_plot_data, write_rows

__all__ = ["write_plot_data", "write_rows"]
