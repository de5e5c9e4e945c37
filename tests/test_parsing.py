"""Tests for input parsing helpers."""

import math

import pytest

from npsvalue.definitions import DEFINITIONS
from npsvalue.parsing import (
    from_display,
    parse_assignments,
    parse_estimation_text,
    parse_number,
    to_display,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (12, 12.0),
        (0.5, 0.5),
        ("3.25", 3.25),
        ("  7 ", 7.0),
        ("-4", -4.0),
        (".5", 0.5),
        ("1e9", 1e9),
        ("12abc", 12.0),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        (float("nan"), 0.0),
        ("NaN", 0.0),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_parse_number_infinity():
    assert math.isinf(parse_number("Infinity"))
    assert parse_number("-Infinity") < 0


def test_parse_estimation_text_three_segments():
    assert parse_estimation_text("first • second •third ") == ["first", "second", "third"]


def test_parse_estimation_text_keeps_order_and_drops_empty():
    assert parse_estimation_text("•a••  b  •\n•") == ["a", "b"]


def test_parse_estimation_text_without_bullet():
    assert parse_estimation_text("  just one line  ") == ["just one line"]


@pytest.mark.parametrize("text", ["", None])
def test_parse_estimation_text_empty(text):
    assert parse_estimation_text(text) == []


def test_parse_estimation_text_on_definition():
    lines = parse_estimation_text(DEFINITIONS["cac"]["estimation"])

    assert lines == [
        "Sum of:",
        "Marketing budget",
        "Sales team costs",
        "Commission to travel agents",
        "Loyalty program acquisition costs",
    ]


def test_display_scaling():
    assert to_display("totalCustomers", 50_000_000) == 50
    assert from_display("totalCustomers", "60") == 60_000_000
    assert from_display("totalCustomers", "oops") == 0
    assert to_display("arpp", 200) == 200
    assert from_display("arpp", "250") == 250


def test_parse_assignments():
    assert parse_assignments(["arpp=250", " cac = abc "]) == [("arpp", "250"), ("cac", "abc")]
    assert parse_assignments(None) == []


@pytest.mark.parametrize("item", ["arpp", "=5"])
def test_parse_assignments_rejects_malformed(item):
    with pytest.raises(ValueError):
        parse_assignments([item])


def test_scaled_entry_must_be_numeric_as_a_whole():
    assert from_display("totalCustomers", "12abc") == 0
    assert from_display("totalCustomers", " 12 ") == 12_000_000
    assert from_display("totalCustomers", "") == 0


def test_unscaled_entry_keeps_prefix_parse():
    assert from_display("arpp", "12abc") == 12


def test_parse_number_strict():
    assert parse_number("12abc", strict=True) == 0
    assert parse_number("1e3", strict=True) == 1000
    assert parse_number(7, strict=True) == 7
