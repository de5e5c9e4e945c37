"""NPS value calculator package entry points."""
from __future__ import annotations

from .cli import build_parser, run_cli
from .formatting import format_currency
from .model import DEFAULT_INPUTS, ValueModel, compute
from .parsing import parse_estimation_text

__all__ = [
    "DEFAULT_INPUTS",
    "ValueModel",
    "build_parser",
    "compute",
    "format_currency",
    "main",
    "main_cli",
    "parse_estimation_text",
    "run_cli",
    "run_gui",
]

_MODE_FLAGS = {"cli", "gui", "verbose"}


def run_gui() -> None:
    # tkinter is imported lazily so the CLI works on interpreters built without Tk.
    from .gui.app import run

    run()


def _calculator_options_given(parser, args) -> bool:
    defaults = vars(parser.parse_args([]))
    return any(
        value != defaults[name] for name, value in vars(args).items() if name not in _MODE_FLAGS
    )


def main(argv=None) -> None:
    """Open the GUI unless ``--cli`` asks for a printed report."""

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cli:
        run_cli(args)
    elif not args.gui and _calculator_options_given(parser, args):
        parser.error("calculator options need --cli (the GUI starts from the case study)")
    else:
        run_gui()


def main_cli(argv=None) -> None:
    """Print a report without opening the GUI; ``--cli`` is implied."""

    args = build_parser().parse_args(argv)
    args.cli = True
    run_cli(args)
