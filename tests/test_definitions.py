"""Tests for static field definitions."""

from npsvalue.definitions import (
    COMPONENT_LABELS,
    DEFINITIONS,
    DISPLAY_SCALES,
    INPUT_LABELS,
    NO_DESCRIPTION,
    NO_ESTIMATION,
    RESULT_GROUPS,
    SECTIONS,
    get_definition,
)
from npsvalue.model import COMPONENT_FIELDS, INPUT_FIELDS


def test_sections_cover_every_input_once():
    fields = [field for _, names in SECTIONS for field in names]

    assert sorted(fields) == sorted(INPUT_FIELDS)
    assert set(INPUT_LABELS) == set(INPUT_FIELDS)


def test_result_groups_cover_every_component():
    names = [name for _, group in RESULT_GROUPS for name in group]

    assert names == list(COMPONENT_FIELDS)
    assert set(COMPONENT_LABELS) == set(COMPONENT_FIELDS) | {"totalValue"}


def test_definitions_reference_known_fields():
    assert set(DEFINITIONS) <= set(INPUT_FIELDS)
    assert set(DISPLAY_SCALES) <= set(INPUT_FIELDS)


def test_get_definition():
    definition = get_definition("arpp")

    assert definition["label"] == "Average Revenue Per Passenger ($)"
    assert definition["description"].startswith("Average Revenue Per Passenger")
    assert "•" in definition["estimation"]


def test_get_definition_falls_back():
    definition = get_definition("operatingCosts")

    assert definition["description"] == NO_DESCRIPTION
    assert definition["estimation"] == NO_ESTIMATION
