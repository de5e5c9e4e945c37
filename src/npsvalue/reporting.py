"""Reporting helpers: grouped result rows, text summary and CSV export."""
from __future__ import annotations

import csv
import numbers
from typing import Callable, List, Mapping, TextIO, Tuple

from .definitions import COMPONENT_LABELS, RESULT_GROUPS
from .formatting import format_currency

ResultRow = Tuple[str, str, float]

CSV_HEADER = ("Group", "Component", "Value ($)")


def result_rows(results: Mapping[str, float]) -> List[ResultRow]:
    """Flatten results into ``(group, label, value)`` rows ending with the total."""

    rows: List[ResultRow] = []
    for group, names in RESULT_GROUPS:
        for name in names:
            rows.append((group, COMPONENT_LABELS[name], results[name]))
    rows.append(("Total", COMPONENT_LABELS["totalValue"], results["totalValue"]))
    return rows


def render_summary(
    results: Mapping[str, float],
    fmt: Callable[[float], str] = format_currency,
) -> str:
    """Return the results as the text block shown by the CLI."""

    lines = ["RESULTS - Value of 1 Point NPS Increase"]
    for group, names in RESULT_GROUPS:
        lines.append("")
        lines.append(group)
        for name in names:
            lines.append(f"  {COMPONENT_LABELS[name]}: {fmt(results[name])}")
    lines.append("")
    lines.append(f"{COMPONENT_LABELS['totalValue']}: {fmt(results['totalValue'])}")
    return "\n".join(lines)


def _csv_cell(value: object) -> str:
    # Dollar amounts are written as whole dollars.
    if isinstance(value, numbers.Real):
        return format(value, ".0f")
    return str(value)


def write_results_csv(stream: TextIO, results: Mapping[str, float]) -> None:
    """Write the header and one row per component to an open text stream."""

    writer = csv.writer(stream)
    writer.writerow(CSV_HEADER)
    writer.writerows([_csv_cell(cell) for cell in row] for row in result_rows(results))


def export_results_csv(path: str, results: Mapping[str, float]) -> None:
    with open(path, "w", newline="") as f:
        write_results_csv(f, results)


__all__ = [
    "CSV_HEADER",
    "export_results_csv",
    "render_summary",
    "result_rows",
    "write_results_csv",
]
