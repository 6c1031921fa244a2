import argparse
import json

import pytest

from pom_grading.cli.grading_cli import main, parse_rule_overrides
from pom_grading.config.size_systems import EU_SIZE_SYSTEM, default_base_size
from pom_grading.data.connectors.base_connector import InMemoryStore
from pom_grading.exceptions import GradingError, InvalidBaseSizeError
from pom_grading.main import GradingApp


@pytest.fixture
def pom_file(tmp_path, sample_pom_text):
    path = tmp_path / "pom.txt"
    path.write_text(sample_pom_text, encoding="utf-8")
    return path


def run_cli(tmp_path, pom_file, *extra):
    return main([
        "--input", str(pom_file),
        "--rules-store", str(tmp_path / "rules.json"),
        "--output-dir", str(tmp_path / "out"),
        *extra,
    ])


def test_cli_writes_charts(tmp_path, pom_file, capsys):
    exit_code = run_cli(tmp_path, pom_file, "--system", "US", "--base-size", "S")

    assert exit_code == 0
    assert "Size grading complete" in capsys.readouterr().out
    us_csv = (tmp_path / "out" / "size-charts" / "US-size-chart.csv").read_text(encoding="utf-8")
    assert "A,Front Length From Shoulder,63.5 cm,66 cm,68.5 cm,71 cm" in us_csv


def test_cli_rejects_base_size_outside_system(tmp_path, pom_file, capsys):
    exit_code = run_cli(tmp_path, pom_file, "--system", "EU", "--base-size", "M")

    assert exit_code == 1
    assert "is not a EU size" in capsys.readouterr().out
    assert not (tmp_path / "out").exists()


def test_cli_rejects_malformed_rule(tmp_path, pom_file):
    assert run_cli(tmp_path, pom_file, "--base-size", "S", "--set-rule", "B:4") == 1


@pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
def test_cli_rejects_non_finite_rule(tmp_path, pom_file, capsys, value):
    assert run_cli(tmp_path, pom_file, "--base-size", "S", "--set-rule", f"B={value}") == 1
    assert "must be finite" in capsys.readouterr().out
    assert not (tmp_path / "out").exists()


@pytest.mark.parametrize(
    ("system", "base_size"),
    [("US", "S"), ("EU", "34"), ("UK", "6")],
)
def test_cli_base_size_defaults_to_second_size_of_system(tmp_path, pom_file, system, base_size):
    assert run_cli(tmp_path, pom_file, "--system", system) == 0

    csv_path = tmp_path / "out" / "size-charts" / f"{system}-size-chart.csv"
    assert f"(Base Size: {base_size})" in csv_path.read_text(encoding="utf-8")


def test_cli_saves_and_uses_profile(tmp_path, pom_file):
    assert run_cli(tmp_path, pom_file, "--base-size", "S", "--set-rule", "B=10", "--save-profile", "wide") == 0

    saved = json.loads((tmp_path / "rules.json").read_text(encoding="utf-8"))
    assert json.loads(saved["custom-grading-rules-US"]) == {"wide": {"B": 10.0}}

    assert run_cli(tmp_path, pom_file, "--base-size", "S", "--rules-profile", "wide") == 0
    us_csv = (tmp_path / "out" / "size-charts" / "US-size-chart.csv").read_text(encoding="utf-8")
    assert "B,½ Chest,44 cm,54 cm,64 cm" in us_csv


def test_cli_unknown_profile_fails(tmp_path, pom_file, capsys):
    exit_code = run_cli(tmp_path, pom_file, "--base-size", "S", "--rules-profile", "missing")

    assert exit_code == 1
    assert "No grading profile named 'missing'" in capsys.readouterr().out


def test_parse_rule_overrides():
    assert parse_rule_overrides(["B=4.5", " A = 3"]) == {"B": 4.5, "A": 3.0}
    assert parse_rule_overrides(None) == {}


@pytest.mark.parametrize("value", ["B=nan", "B=inf", "B=-Infinity"])
def test_parse_rule_overrides_rejects_non_finite(value):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_rule_overrides([value])


def test_grading_app_grade(sample_pom_text):
    app = GradingApp(rules_store=InMemoryStore())
    app.configure(base_size_system="UK", base_size="10", custom_grading_rules={"B": 4.0})

    charts = app.grade(sample_pom_text)

    assert charts["UK"].chart["12"]["B"] == 58.0
    assert charts["US"].chart[charts["US"].base_size]["B"] == 54.0


def test_grading_app_invalid_base_size(tmp_path, sample_pom_text):
    app = GradingApp(rules_store=InMemoryStore())
    app.configure(base_size_system="US", base_size="40", output_dir=str(tmp_path / "out"))

    with pytest.raises(InvalidBaseSizeError):
        app.run_grading(sample_pom_text)
    assert not (tmp_path / "out").exists()


def test_grading_app_unknown_system():
    app = GradingApp(rules_store=InMemoryStore())

    with pytest.raises(GradingError):
        app.configure(base_size_system="JP")


def test_grading_app_defaults_base_size_per_system():
    app = GradingApp(rules_store=InMemoryStore())

    app.configure(base_size_system="EU")
    assert app.base_size == "34"

    app.configure(base_size_system="UK", base_size="12")
    assert app.base_size == "12"


@pytest.mark.parametrize(
    ("system", "preferred", "expected"),
    [
        ("US", None, "S"),
        ("EU", None, "34"),
        ("UK", None, "6"),
        ("US", "L", "L"),
        ("EU", "M", "34"),
        (EU_SIZE_SYSTEM, "40", "40"),
    ],
)
def test_default_base_size(system, preferred, expected):
    assert default_base_size(system, preferred) == expected
