"""Tests for the command-line front end."""

import pytest

from npsvalue import main, main_cli
from npsvalue.cli import build_model, build_parser, option_name, run_cli


def run(argv, capsys):
    args = build_parser().parse_args(["--cli"] + argv)
    model = run_cli(args)
    return model, capsys.readouterr().out


def test_option_name():
    assert option_name("totalCustomers") == "--total-customers"
    assert option_name("arpp") == "--arpp"
    assert option_name("serviceCostPerCustomer") == "--service-cost-per-customer"


def test_defaults_print_case_study(capsys):
    model, out = run([], capsys)

    assert "Case Study: Delta Air Lines (2023)" in out
    assert "Total Customers (Millions): 50" in out
    assert "Operating Costs ($): 8,000,000,000" in out
    assert "Total Value: $158M" in out
    assert model.results["cacSavings"] == pytest.approx(5_000_000)


def test_customers_entered_in_millions(capsys):
    model, out = run(["--total-customers", "0"], capsys)

    assert model.get("totalCustomers") == 0
    assert "Custom scenario" in out
    assert "  Retention: $0" in out
    assert "  CAC Savings: $5M" in out
    assert "  Operational Savings: $8M" in out


def test_non_numeric_option_is_zero(capsys):
    model, out = run(["--cac-reduction", "lots"], capsys)

    assert model.get("cacReduction") == 0
    assert "  CAC Savings: $0" in out


def test_set_uses_canonical_units(capsys):
    model, _ = run(["--set", "totalCustomers=25000000", "--set", "arpp=abc"], capsys)

    assert model.get("totalCustomers") == 25_000_000
    assert model.get("arpp") == 0


def test_set_unknown_field_exits(capsys):
    args = build_parser().parse_args(["--cli", "--set", "bogus=1"])

    with pytest.raises(SystemExit):
        run_cli(args)
    assert "Unknown field 'bogus'" in capsys.readouterr().err


def test_build_model_rejects_malformed_set():
    args = build_parser().parse_args(["--set", "arpp"])

    with pytest.raises(ValueError):
        build_model(args)


def test_explain_prints_guidance(capsys):
    _, out = run(["--explain", "referralIncrease"], capsys)

    assert "Referral Increase" in out
    assert "Expected percentage increase in new customers from referrals" in out
    assert "  - Social media mention rates" in out


def test_full_amounts(capsys):
    _, out = run(["--full"], capsys)

    assert "Total Value: $158,000,000.00" in out


def test_csv_and_chart_file(tmp_path, capsys):
    csv_path = tmp_path / "out.csv"
    png_path = tmp_path / "chart.png"
    run(["--csv", str(csv_path), "--chart-file", str(png_path)], capsys)

    assert csv_path.read_text().startswith("Group,Component,Value ($)")
    assert png_path.stat().st_size > 0


def test_main_requires_cli_flag_for_options():
    with pytest.raises(SystemExit):
        main(["--arpp", "250"])


def test_main_cli_mode(capsys):
    main(["--cli", "--arpp", "250"])

    assert "Average Revenue Per Passenger ($): 250" in capsys.readouterr().out


def test_main_cli_entry_point(capsys):
    main_cli([])

    assert "Total Value: $158M" in capsys.readouterr().out


def test_main_gui_flag_ignores_options(monkeypatch):
    import npsvalue

    opened = []
    monkeypatch.setattr(npsvalue, "run_gui", lambda: opened.append(True))
    main(["--gui", "--arpp", "250"])
    main([])

    assert opened == [True, True]


def test_chart_axis_labels_render(tmp_path, capsys):
    png_path = tmp_path / "chart.png"
    run(["--chart-file", str(png_path), "--set", "totalCustomers=1"], capsys)

    assert png_path.stat().st_size > 0
