import math

from .measure import Stats, round_half_up
from .runner import ResultRow

COLUMNS = (
    "dataset",
    "impl",
    "bitsPerValue",
    "and2by2(ns/op)",
    "or2by2(ns/op)",
    "wideOr(ns/op)",
    "contains3(ns/op)",
)
HEADER = "\t".join(COLUMNS)

BITS_PER_VALUE_WIDTH = 10


def format_bits_per_value(value: float) -> str:
    text = "NaN" if math.isnan(value) else f"{value:.2f}"
    return text.ljust(BITS_PER_VALUE_WIDTH)


def format_cell(stats: Stats) -> str:
    # median first, diagnostics in parentheses
    return (
        f"{stats.median} (p90={stats.p90},"
        f"mean={round_half_up(stats.mean)},"
        f"sd={round_half_up(stats.stdev)},"
        f"batch={stats.batch})"
    )


def format_row(row: ResultRow) -> str:
    cells = [row.dataset, row.impl, format_bits_per_value(row.bits_per_value)]
    cells.extend(format_cell(s) for s in row.timings())
    return "\t".join(cells)
