"""Command-line interface for the NPS value calculator."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Mapping, Optional

import matplotlib.pyplot as plt

from .definitions import (
    CASE_STUDY_TITLE,
    COMPONENT_LABELS,
    INPUT_LABELS,
    RESULT_GROUPS,
    SECTIONS,
    get_definition,
)
from .formatting import format_currency, format_currency_full, format_number
from .model import COMPONENT_FIELDS, DEFAULT_INPUTS, INPUT_FIELDS, ValueModel
from .parsing import from_display, parse_assignments, parse_estimation_text, to_display
from .reporting import export_results_csv, render_summary

logger = logging.getLogger(__name__)

REVENUE_COLOR = "#1E88E5"
COST_COLOR = "#43A047"


def option_name(field: str) -> str:
    """``totalCustomers`` -> ``--total-customers``."""

    chars = []
    for ch in field:
        if ch.isupper():
            chars.append("-")
        chars.append(ch.lower())
    return "--" + "".join(chars)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="npsvalue",
        description="Estimate the value of a one-point NPS increase for an airline",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--cli", action="store_true", help="Run in CLI mode")
    mode.add_argument("--gui", action="store_true", help="Run GUI")
    for _, fields in SECTIONS:
        for field in fields:
            default = to_display(field, DEFAULT_INPUTS[field])
            parser.add_argument(
                option_name(field),
                dest=field,
                default=None,
                metavar="VALUE",
                help=f"{INPUT_LABELS[field]} (default {default:g})",
            )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override a field by name in canonical units (e.g., totalCustomers=60000000)",
    )
    parser.add_argument(
        "--explain",
        action="append",
        default=[],
        choices=INPUT_FIELDS,
        metavar="FIELD",
        help="Print the definition and estimation guidance for a field",
    )
    parser.add_argument("--full", action="store_true", help="Print unabbreviated dollar amounts")
    parser.add_argument("--csv", default="", help="Export the result table to this CSV path")
    parser.add_argument("--chart", action="store_true", help="Show a bar chart of the components")
    parser.add_argument("--chart-file", default="", help="Save the bar chart to this image path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_model(args: argparse.Namespace) -> ValueModel:
    """Apply command-line overrides on top of the case-study defaults."""

    model = ValueModel()
    for field in INPUT_FIELDS:
        raw = getattr(args, field, None)
        if raw is not None:
            model.set_input(field, from_display(field, raw))
    for name, raw in parse_assignments(getattr(args, "set", None)):
        if name not in DEFAULT_INPUTS:
            raise ValueError(f"Unknown field '{name}' (expected one of: {', '.join(INPUT_FIELDS)})")
        model.set_input(name, raw)
    return model


def render_inputs(inputs: Mapping[str, float]) -> str:
    lines = ["INPUTS"]
    for title, fields in SECTIONS:
        lines.append("")
        lines.append(title)
        for field in fields:
            value = format_number(to_display(field, inputs[field]), grouping=True)
            lines.append(f"  {INPUT_LABELS[field]}: {value}")
    return "\n".join(lines)


def render_definition(field: str) -> str:
    definition = get_definition(field)
    lines = [definition["label"], f"  {definition['description']}"]
    for line in parse_estimation_text(definition["estimation"]):
        lines.append(f"  - {line}")
    return "\n".join(lines)


def plot_components(results: Mapping[str, float], title: str = "Value of 1 Point NPS Increase"):
    """Draw a horizontal bar per component; revenue and cost effects colored apart."""

    labels = [COMPONENT_LABELS[name] for name in COMPONENT_FIELDS]
    values = [results[name] for name in COMPONENT_FIELDS]
    revenue = set(RESULT_GROUPS[0][1])
    colors = [REVENUE_COLOR if name in revenue else COST_COLOR for name in COMPONENT_FIELDS]
    fig, ax = plt.subplots(figsize=(10, 6))
    bars = ax.barh(labels, values, color=colors)
    ax.invert_yaxis()
    for bar, value in zip(bars, values):
        ax.annotate(
            format_currency(value),
            xy=(bar.get_width(), bar.get_y() + bar.get_height() / 2),
            xytext=(4, 0),
            textcoords="offset points",
            va="center",
        )
    ax.set_title(f"{title} (Total {format_currency(results['totalValue'])})")
    ax.set_xlabel("Estimated Value ($)")
    ax.xaxis.set_major_formatter(lambda x, _pos: format_currency(x))
    ax.grid(True, axis="x")
    fig.tight_layout()
    return fig


def run_cli(args: argparse.Namespace, model: Optional[ValueModel] = None) -> ValueModel:
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)
    if getattr(args, "verbose", False):
        logging.getLogger().setLevel(logging.DEBUG)

    if model is None:
        try:
            model = build_model(args)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(2)

    for field in getattr(args, "explain", None) or []:
        print(render_definition(field))
        print()

    fmt = format_currency_full if args.full else format_currency
    results = model.results
    print(CASE_STUDY_TITLE if model.inputs == dict(DEFAULT_INPUTS) else "Custom scenario")
    print()
    print(render_inputs(model.inputs))
    print()
    print(render_summary(results, fmt))

    if args.csv:
        export_results_csv(args.csv, results)
        logger.info("CSV exported to %s", args.csv)

    if args.chart or args.chart_file:
        fig = plot_components(results)
        if args.chart_file:
            fig.savefig(args.chart_file)
            logger.info("Chart saved to %s", args.chart_file)
        if args.chart:
            plt.show()
        plt.close(fig)
    return model


__all__ = [
    "build_model",
    "build_parser",
    "option_name",
    "plot_components",
    "render_definition",
    "render_inputs",
    "run_cli",
]
