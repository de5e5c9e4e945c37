"""Input parsing helpers for the NPS value calculator."""
from __future__ import annotations

import logging
import math
import numbers
import re
from typing import List, Optional, Sequence, Tuple

from .definitions import DISPLAY_SCALES

logger = logging.getLogger(__name__)

BULLET = "•"

# Leading numeric prefix, the same text a browser's parseFloat accepts.
_NUMBER_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_NUMBER_FULL = re.compile(_NUMBER_PREFIX.pattern + r"\s*$")


def parse_number(raw: object, strict: bool = False) -> float:
    """Parse ``raw`` into a float, returning 0.0 for anything unparseable.

    By default a leading numeric prefix is enough (``"12abc"`` is 12). With
    ``strict`` the whole text must be numeric, as when the entry is used in
    arithmetic directly, so ``"12abc"`` is 0.
    """

    if isinstance(raw, numbers.Real) and not isinstance(raw, bool):
        value = float(raw)
    else:
        text = "" if raw is None else str(raw)
        if strict and not text.strip():
            return 0.0
        match = (_NUMBER_FULL if strict else _NUMBER_PREFIX).match(text)
        if not match:
            logger.debug("coercing non-numeric input %r to 0", raw)
            return 0.0
        value = float(match.group(1).replace("Infinity", "inf"))
    if math.isnan(value):
        logger.debug("coercing NaN input to 0")
        return 0.0
    return value


def parse_estimation_text(text: Optional[str]) -> List[str]:
    """Split bullet-delimited guidance into trimmed, non-empty lines."""

    if not text:
        return []
    return [s.strip() for s in text.split(BULLET) if s.strip()]


def to_display(name: str, value: float) -> float:
    """Convert a canonical value to the unit shown in input widgets."""

    return value / DISPLAY_SCALES.get(name, 1.0)


def from_display(name: str, raw: object) -> float:
    """Parse a display-unit entry and rescale it to canonical units.

    Scaled entries are multiplied as a whole, so trailing junk makes them 0;
    unscaled entries keep the lenient prefix parse.
    """

    scale = DISPLAY_SCALES.get(name)
    if scale is None:
        return parse_number(raw)
    return parse_number(raw, strict=True) * scale


def parse_assignments(items: Optional[Sequence[str]]) -> List[Tuple[str, str]]:
    """Parse ``name=value`` items; the value text is left for the model to coerce."""

    if not items:
        return []
    pairs = []
    for item in items:
        if "=" not in item:
            raise ValueError(f"Override '{item}' must look like 'name=value'")
        name, raw = item.split("=", 1)
        name = name.strip()
        if not name:
            raise ValueError(f"Override '{item}' is missing a field name")
        pairs.append((name, raw.strip()))
    return pairs


__all__ = [
    "BULLET",
    "from_display",
    "parse_assignments",
    "parse_estimation_text",
    "parse_number",
    "to_display",
]
