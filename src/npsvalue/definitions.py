"""Static labels, definitions and guidance text for the calculator fields."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

NO_DESCRIPTION = "No description available"
NO_ESTIMATION = "No estimation guidance available"

CASE_STUDY_TITLE = "Case Study: Delta Air Lines (2023)"
CASE_STUDY_TEXT = (
    "This calculator is pre-populated with Delta Air Lines' 2023 metrics as a case study, "
    "using data from their annual report and financial statements. Delta was chosen because "
    "they are one of the largest global carriers with publicly available data and consistent "
    "financial reporting. Some metrics (like NPS and impact assumptions) use industry "
    "benchmarks where airline-specific data isn't public. Feel free to adjust any values to "
    "match your airline's specific metrics."
)

# Widgets show these fields in scaled units (customers in millions).
DISPLAY_SCALES: Mapping[str, float] = MappingProxyType({"totalCustomers": 1_000_000.0})

INPUT_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "totalCustomers": "Total Customers (Millions)",
        "arpp": "Average Revenue Per Passenger ($)",
        "currentNPS": "Current NPS",
        "cac": "Customer Acquisition Cost ($)",
        "operatingCosts": "Operating Costs ($)",
        "serviceCostPerCustomer": "Service Cost Per Customer ($)",
        "premiumMargin": "Premium Margin ($)",
        "retentionImprovement": "Retention Improvement",
        "shareOfWalletIncrease": "Share of Wallet Increase",
        "referralIncrease": "Referral Increase",
        "premiumUptakeIncrease": "Premium Uptake Increase",
        "cacReduction": "CAC Reduction",
        "serviceCostReduction": "Service Cost Reduction",
        "operationalEfficiency": "Operational Efficiency",
    }
)

SECTIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "Baseline Metrics",
        (
            "totalCustomers",
            "arpp",
            "currentNPS",
            "cac",
            "operatingCosts",
            "serviceCostPerCustomer",
            "premiumMargin",
        ),
    ),
    (
        "Impact Assumptions (%)",
        (
            "retentionImprovement",
            "shareOfWalletIncrease",
            "referralIncrease",
            "premiumUptakeIncrease",
            "cacReduction",
            "serviceCostReduction",
            "operationalEfficiency",
        ),
    ),
)

COMPONENT_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "retentionValue": "Retention",
        "shareOfWalletValue": "Share of Wallet",
        "referralValue": "Referrals",
        "premiumValue": "Premium Uptake",
        "cacSavings": "CAC Savings",
        "serviceCostSavings": "Service Cost Savings",
        "operationalSavings": "Operational Savings",
        "totalValue": "Total Value",
    }
)

RESULT_GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Revenue Effects", ("retentionValue", "shareOfWalletValue", "referralValue", "premiumValue")),
    ("Cost Effects", ("cacSavings", "serviceCostSavings", "operationalSavings")),
)

DEFINITIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "totalCustomers": MappingProxyType(
            {
                "description": "Total number of unique passengers who flew with the airline in the past year",
                "estimation": (
                    "Calculate from:\n• Annual passenger manifests\n• Loyalty program data\n"
                    "• If using total passenger trips, adjust for average trips per customer "
                    "(typically 2-4 per year for leisure travelers, 12+ for business)"
                ),
            }
        ),
        "arpp": MappingProxyType(
            {
                "description": (
                    "Average Revenue Per Passenger: Total annual revenue divided by total "
                    "number of passengers"
                ),
                "estimation": (
                    "Calculate using:\n• Total revenue ÷ total passengers\n"
                    "• Segment by route type and class\n"
                    "• Industry benchmarks: $200-300 for short-haul, $500-1500 for long-haul\n"
                    "• Consider ancillary revenue"
                ),
            }
        ),
        "currentNPS": MappingProxyType(
            {
                "description": (
                    "Current Net Promoter Score: Percentage of promoters minus percentage "
                    "of detractors"
                ),
                "estimation": (
                    "Source from:\n• Post-flight surveys\n• Customer feedback data\n"
                    "• Industry benchmarks: 30-50 for leading airlines\n"
                    "• Calculate: (% scoring 9-10) minus (% scoring 0-6)"
                ),
            }
        ),
        "cac": MappingProxyType(
            {
                "description": (
                    "Customer Acquisition Cost: Total marketing and sales spend to acquire "
                    "new customers"
                ),
                "estimation": (
                    "Sum of:\n• Marketing budget\n• Sales team costs\n"
                    "• Commission to travel agents\n• Loyalty program acquisition costs"
                ),
            }
        ),
        "retentionImprovement": MappingProxyType(
            {
                "description": (
                    "Expected percentage increase in customer retention rate from a 1-point "
                    "NPS increase"
                ),
                "estimation": (
                    "Estimate using:\n• Historical NPS vs retention correlation\n"
                    "• Industry benchmark: 0.5-1.0% increase\n"
                    "• Compare retention rates of promoters vs detractors"
                ),
            }
        ),
        "shareOfWalletIncrease": MappingProxyType(
            {
                "description": "Expected percentage increase in spending from existing customers",
                "estimation": (
                    "Calculate from:\n• Spending difference between promoters and passives\n"
                    "• Historical upgrade rates by NPS score\n"
                    "• Industry benchmark: 0.3-0.7% increase"
                ),
            }
        ),
        "referralIncrease": MappingProxyType(
            {
                "description": "Expected percentage increase in new customers from referrals",
                "estimation": (
                    "Derive from:\n• Current referral rates by NPS score\n"
                    "• Social media mention rates\n• Industry benchmark: 0.2-0.4% increase"
                ),
            }
        ),
        "cacReduction": MappingProxyType(
            {
                "description": "Expected percentage reduction in customer acquisition costs",
                "estimation": (
                    "Calculate using:\n• Word-of-mouth acquisition costs vs paid\n"
                    "• Referral program efficiency\n• Industry benchmark: 0.5-1.5% reduction"
                ),
            }
        ),
    }
)


def get_definition(name: str) -> Dict[str, str]:
    """Return description/estimation text for ``name`` with fallbacks filled in."""

    entry = DEFINITIONS.get(name, {})
    return {
        "label": INPUT_LABELS.get(name, name),
        "description": entry.get("description") or NO_DESCRIPTION,
        "estimation": entry.get("estimation") or NO_ESTIMATION,
    }


__all__ = [
    "CASE_STUDY_TEXT",
    "CASE_STUDY_TITLE",
    "COMPONENT_LABELS",
    "DEFINITIONS",
    "DISPLAY_SCALES",
    "INPUT_LABELS",
    "NO_DESCRIPTION",
    "NO_ESTIMATION",
    "RESULT_GROUPS",
    "SECTIONS",
    "get_definition",
]
