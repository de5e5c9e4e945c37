"""Value model for a one-point NPS increase."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .parsing import parse_number

logger = logging.getLogger(__name__)

InputParameters = Dict[str, float]
ValueComponents = Dict[str, float]

BASELINE_FIELDS = (
    "totalCustomers",
    "arpp",
    "currentNPS",
    "cac",
    "operatingCosts",
    "serviceCostPerCustomer",
    "premiumMargin",
)

# Impact fields are percentages (0.5 means 0.5%).
IMPACT_FIELDS = (
    "retentionImprovement",
    "shareOfWalletIncrease",
    "referralIncrease",
    "premiumUptakeIncrease",
    "cacReduction",
    "serviceCostReduction",
    "operationalEfficiency",
)

INPUT_FIELDS = BASELINE_FIELDS + IMPACT_FIELDS

COMPONENT_FIELDS = (
    "retentionValue",
    "shareOfWalletValue",
    "referralValue",
    "premiumValue",
    "cacSavings",
    "serviceCostSavings",
    "operationalSavings",
)

# Delta Air Lines 2023 case study.
DEFAULT_INPUTS: Mapping[str, float] = MappingProxyType(
    {
        "totalCustomers": 50_000_000.0,
        "arpp": 200.0,
        "currentNPS": 40.0,
        "cac": 500_000_000.0,
        "retentionImprovement": 0.5,
        "shareOfWalletIncrease": 0.5,
        "referralIncrease": 0.3,
        "premiumUptakeIncrease": 0.2,
        "cacReduction": 1.0,
        "serviceCostReduction": 0.2,
        "operationalEfficiency": 0.1,
        "serviceCostPerCustomer": 50.0,
        "premiumMargin": 100.0,
        "operatingCosts": 8_000_000_000.0,
    }
)


def compute(params: Mapping[str, float]) -> ValueComponents:
    """Return the seven value components and their total.

    Missing fields count as zero. Nothing is rounded here; rounding is a
    display concern handled by :mod:`npsvalue.formatting`.
    """

    def get(name: str) -> float:
        return params.get(name, 0.0)

    customers = get("totalCustomers")
    results = {
        "retentionValue": (get("retentionImprovement") / 100) * customers * get("arpp"),
        "shareOfWalletValue": (get("shareOfWalletIncrease") / 100) * customers * get("arpp"),
        "referralValue": (get("referralIncrease") / 100) * customers * get("arpp"),
        "premiumValue": (get("premiumUptakeIncrease") / 100) * customers * get("premiumMargin"),
        "cacSavings": (get("cacReduction") / 100) * get("cac"),
        "serviceCostSavings": (get("serviceCostReduction") / 100)
        * customers
        * get("serviceCostPerCustomer"),
        "operationalSavings": (get("operationalEfficiency") / 100) * get("operatingCosts"),
    }
    total = 0.0
    for name in COMPONENT_FIELDS:
        total += results[name]
    results["totalValue"] = total
    return results


class ValueModel:
    """Mutable input snapshot that recomputes its results on every edit."""

    def __init__(self, inputs: Optional[Mapping[str, float]] = None) -> None:
        self._inputs: InputParameters = dict(DEFAULT_INPUTS)
        self._results: ValueComponents = {}
        if inputs:
            for name, value in inputs.items():
                self._check_name(name)
                self._inputs[name] = parse_number(value)
        self._recompute()

    @staticmethod
    def _check_name(name: str) -> None:
        if name not in DEFAULT_INPUTS:
            raise KeyError(f"Unknown input field '{name}'")

    def _recompute(self) -> None:
        self._results = compute(self._inputs)

    @property
    def inputs(self) -> InputParameters:
        return dict(self._inputs)

    @property
    def results(self) -> ValueComponents:
        return dict(self._results)

    def get(self, name: str) -> float:
        self._check_name(name)
        return self._inputs[name]

    def set_input(self, name: str, raw_value: object) -> InputParameters:
        """Store ``raw_value`` under ``name`` (unparseable values become 0)."""

        self._check_name(name)
        value = parse_number(raw_value)
        logger.debug("set %s=%r (raw %r)", name, value, raw_value)
        self._inputs[name] = value
        self._recompute()
        return self.inputs

    def update(self, values: Mapping[str, object]) -> InputParameters:
        for name, raw in values.items():
            self.set_input(name, raw)
        return self.inputs

    def reset(self) -> InputParameters:
        self._inputs = dict(DEFAULT_INPUTS)
        self._recompute()
        return self.inputs


__all__ = [
    "BASELINE_FIELDS",
    "COMPONENT_FIELDS",
    "DEFAULT_INPUTS",
    "IMPACT_FIELDS",
    "INPUT_FIELDS",
    "InputParameters",
    "ValueComponents",
    "ValueModel",
    "compute",
]
