"""Text rendering for row previews and column summaries."""

import numpy as np
from prettytable import PrettyTable, TableStyle

from .constants import DEFAULT_CELL_FORMAT, DEFAULT_DISPLAY_LINES
from .tabular import TabularData, as_tabular
from .validators import check_count

WIDTH = 78
THICK_SEP = "=" * WIDTH

__all__ = [
    "THICK_SEP",
    "WIDTH",
    "attach_format",
    "format_column_summary",
    "format_title",
    "format_value",
    "head",
    "tail",
]


def _make_table(headers, rows, align_map):
    """Create a PrettyTable with SINGLE_BORDER style and per-column alignment."""
    t = PrettyTable()
    t.set_style(TableStyle.SINGLE_BORDER)
    t.field_names = headers
    for row in rows:
        t.add_row(row)
    for h in headers:
        t.align[h] = align_map.get(h, "r")
    return str(t)


def format_title(title, subtitle=None):
    """Return title block lines with thick separators."""
    lines = [THICK_SEP, f" {title}"]
    if subtitle is not None:
        lines.append(f" {subtitle}")
    lines.append(THICK_SEP)
    return lines


def format_value(val, fmt=DEFAULT_CELL_FORMAT, na_str="NA"):
    """Format a numeric value, returning na_str for None/NaN."""
    if val is None or (isinstance(val, float) and np.isnan(val)):
        return na_str
    return f"{val:{fmt}}"


def _column_headers(view):
    if isinstance(view, TabularData) and view.columns is not None:
        return list(view.columns)
    return [str(col) for col in range(view.cols)]


def _format_rows(view, row_indices, title, fmt):
    headers = ["Row", *_column_headers(view)]
    rows = [[str(r)] + [format_value(view.cell(r, c), fmt) for c in range(view.cols)] for r in row_indices]
    lines = format_title(title, f"{view.rows} rows x {view.cols} columns")
    if rows:
        lines.append(_make_table(headers, rows, {"Row": "l"}))
    else:
        lines.append(" (no rows)")
    return "\n".join(lines)


def head(view, lines=DEFAULT_DISPLAY_LINES, fmt=DEFAULT_CELL_FORMAT):
    """Render the first ``lines`` rows of a view as a text table.

    Parameters
    ----------
    view : TabularView or array_like
        Data to preview.
    lines : int, default 5
        Number of rows to show. Clamped to the number of rows available.
    fmt : str, default ".3f"
        Format spec applied to every cell.

    Returns
    -------
    str
        The rendered table.
    """
    view = as_tabular(view)
    n = min(check_count(lines, "lines"), view.rows)
    return _format_rows(view, range(n), f"Top {n} rows", fmt)


def tail(view, lines=DEFAULT_DISPLAY_LINES, fmt=DEFAULT_CELL_FORMAT):
    """Render the last ``lines`` rows of a view as a text table, in row order."""
    view = as_tabular(view)
    n = min(check_count(lines, "lines"), view.rows)
    return _format_rows(view, range(view.rows - n, view.rows), f"Bottom {n} rows", fmt)


def format_column_summary(summary):
    """Format a :class:`~dilutedml.stats.ColumnSummary` as a text table."""
    headers = ["Column", "N", "Mean", "Median", "Dispersion", "Std. Dev."]
    row = [
        str(summary.column),
        str(summary.count),
        format_value(summary.mean, ".4f"),
        format_value(summary.median, ".4f"),
        format_value(summary.dispersion, ".4f"),
        format_value(summary.std, ".4f"),
    ]
    lines = format_title("Column Summary", "Dispersion is the population variance (squared units)")
    lines.append(_make_table(headers, [row], {"Column": "l"}))
    return "\n".join(lines)


def attach_format(result_class, format_func):
    """Monkey-patch ``__repr__`` and ``__str__`` on a result class."""

    def _repr(self):
        return format_func(self)

    def _str(self):
        return format_func(self)

    result_class.__repr__ = _repr
    result_class.__str__ = _str
