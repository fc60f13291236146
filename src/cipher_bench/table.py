"""Fixed-width text table of benchmark reports."""

from __future__ import annotations

from collections.abc import Sequence

from cipher_bench.config import DisplayMode
from cipher_bench.report import Report, ReportEntry

NAME_WIDTH = 14
CELL_WIDTH = 12
HEADER_LABEL = "cipher name"


def fit_cell(text: str, width: int) -> str:
    """Left-align ``text`` in exactly ``width`` characters, truncating without
    an ellipsis when it is too long."""
    if len(text) == width:
        return text
    if len(text) < width:
        return text + " " * (width - len(text))
    return text[:width]


def _cell(entry: ReportEntry, display_mode: DisplayMode) -> str:
    if display_mode is DisplayMode.TIME:
        return fit_cell(entry.formatted_time, CELL_WIDTH)
    return fit_cell(entry.formatted_speed, CELL_WIDTH)


def render_header(sizes: Sequence[int]) -> str:
    cells = [fit_cell(HEADER_LABEL, NAME_WIDTH)]
    cells.extend(fit_cell(str(size), CELL_WIDTH) for size in sizes)
    return " ".join(cells)


def render_row(report: Report, display_mode: DisplayMode) -> str:
    cells = [fit_cell(report.label, NAME_WIDTH)]
    cells.extend(_cell(entry, display_mode) for entry in report.entries)
    return " ".join(cells)


def render_table(
    sizes: Sequence[int], reports: Sequence[Report], display_mode: DisplayMode
) -> str:
    """Header line followed by one line per report, in report order."""
    lines = [render_header(sizes)]
    lines.extend(render_row(report, display_mode) for report in reports)
    return "\n".join(lines)
